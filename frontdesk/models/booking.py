from frontdesk.extensions import db
from frontdesk.models.base import PKType, TimestampMixin, enum_type
from frontdesk.models.enums import BookingStatus, BookingType


class Booking(TimestampMixin, db.Model):
    __tablename__ = "bookings"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    resource_id = db.Column(PKType, db.ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True)
    admin_id = db.Column(PKType, db.ForeignKey("users.id"), nullable=False, index=True)
    booking_type = db.Column(enum_type(BookingType, "booking_type"), nullable=False, default=BookingType.REGULAR)

    client_name = db.Column(db.String(120), nullable=False)
    client_mobile = db.Column(db.String(15), nullable=False, default="")
    client_aadhar = db.Column(db.String(20), nullable=True)
    client_license = db.Column(db.String(30), nullable=True)
    receipt_number = db.Column(db.String(32), nullable=True, index=True)
    payment_mode = db.Column(db.String(24), nullable=True)

    check_in = db.Column(db.DateTime(timezone=True), nullable=False)
    check_out = db.Column(db.DateTime(timezone=True), nullable=True)
    actual_check_out = db.Column(db.DateTime(timezone=True), nullable=True)
    advance_date = db.Column(db.Date, nullable=True)

    status = db.Column(
        enum_type(BookingStatus, "booking_status"), nullable=False, default=BookingStatus.ACTIVE, index=True
    )
    payment_notes = db.Column(db.Text, nullable=True)
    is_paid = db.Column(db.Boolean, nullable=False, default=False)
    total_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)

    resource = db.relationship("Resource", back_populates="bookings")
    admin = db.relationship("User", back_populates="bookings")
    cancellations = db.relationship("BookingCancellation", back_populates="booking", lazy="dynamic")
    payments = db.relationship("Payment", back_populates="booking", lazy="dynamic")

    __table_args__ = (db.Index("ix_bookings_resource_status", "resource_id", "status"),)

    @property
    def occupies_resource(self):
        return self.status == BookingStatus.ACTIVE
