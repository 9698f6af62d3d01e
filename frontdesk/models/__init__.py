from frontdesk.models.booking import Booking
from frontdesk.models.booking_cancellation import BookingCancellation
from frontdesk.models.email_log import EmailLog
from frontdesk.models.enums import (
    BookingAction,
    BookingStatus,
    BookingType,
    EmailStatus,
    EmailType,
    PaymentMethod,
    PaymentStatus,
    ResourceType,
    SmsStatus,
    SmsType,
    UserRole,
)
from frontdesk.models.payment import Payment
from frontdesk.models.resource import Resource
from frontdesk.models.setting import Setting
from frontdesk.models.sms_log import SmsLog
from frontdesk.models.user import User

__all__ = [
    "User",
    "Resource",
    "Booking",
    "BookingCancellation",
    "Payment",
    "SmsLog",
    "EmailLog",
    "Setting",
    "BookingAction",
    "BookingStatus",
    "BookingType",
    "EmailStatus",
    "EmailType",
    "PaymentMethod",
    "PaymentStatus",
    "ResourceType",
    "SmsStatus",
    "SmsType",
    "UserRole",
]
