from frontdesk.extensions import db
from frontdesk.models.base import PKType, TimestampMixin, enum_type
from frontdesk.models.enums import PaymentMethod, PaymentStatus


class Payment(TimestampMixin, db.Model):
    __tablename__ = "payments"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    booking_id = db.Column(PKType, db.ForeignKey("bookings.id", ondelete="CASCADE"), nullable=False, index=True)
    resource_id = db.Column(PKType, db.ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = db.Column(db.Numeric(12, 2), nullable=False)
    payment_method = db.Column(enum_type(PaymentMethod, "payment_method"), nullable=False)
    payment_status = db.Column(
        enum_type(PaymentStatus, "payment_status"), nullable=False, default=PaymentStatus.COMPLETED, index=True
    )
    admin_id = db.Column(PKType, db.ForeignKey("users.id"), nullable=False, index=True)
    payment_notes = db.Column(db.Text, nullable=True)

    booking = db.relationship("Booking", back_populates="payments")
