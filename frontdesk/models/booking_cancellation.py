from frontdesk.extensions import db
from frontdesk.models.base import PKType, TimestampMixin


class BookingCancellation(TimestampMixin, db.Model):
    __tablename__ = "booking_cancellations"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    booking_id = db.Column(PKType, db.ForeignKey("bookings.id", ondelete="CASCADE"), nullable=False, index=True)
    resource_id = db.Column(PKType, db.ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True)
    cancelled_by = db.Column(PKType, db.ForeignKey("users.id"), nullable=False, index=True)
    cancellation_reason = db.Column(db.Text, nullable=False)
    original_client_name = db.Column(db.String(120), nullable=False)
    original_advance_date = db.Column(db.Date, nullable=True)
    duration_at_cancellation = db.Column(db.Integer, nullable=True)

    booking = db.relationship("Booking", back_populates="cancellations")
