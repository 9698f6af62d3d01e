import enum


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    OWNER = "OWNER"


class ResourceType(str, enum.Enum):
    ROOM = "ROOM"
    HALL = "HALL"


class BookingStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"


class BookingType(str, enum.Enum):
    REGULAR = "REGULAR"
    ADVANCED = "ADVANCED"


class BookingAction(str, enum.Enum):
    CANCEL_ADVANCED = "cancel_advanced"
    MARK_PAID = "mark_paid"
    CHECKOUT = "checkout"
    CANCEL_BOOKING = "cancel_booking"

    @classmethod
    def parse(cls, raw):
        try:
            return cls((raw or "").strip())
        except ValueError:
            return None


class PaymentMethod(str, enum.Enum):
    CHECKOUT = "CHECKOUT"
    CHECKOUT_COMPLETE = "CHECKOUT_COMPLETE"


class PaymentStatus(str, enum.Enum):
    COMPLETED = "COMPLETED"


class SmsType(str, enum.Enum):
    CANCELLATION = "CANCELLATION"
    CHECKOUT = "CHECKOUT"


class SmsStatus(str, enum.Enum):
    SENT = "SENT"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class EmailType(str, enum.Enum):
    EXPORT = "EXPORT"
    TEST = "TEST"


class EmailStatus(str, enum.Enum):
    PENDING = "PENDING"
    SENT = "SENT"
    FAILED = "FAILED"
