from frontdesk.extensions import db
from frontdesk.models.base import PKType, TimestampMixin, enum_type
from frontdesk.models.enums import SmsStatus, SmsType


class SmsLog(TimestampMixin, db.Model):
    __tablename__ = "sms_logs"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    booking_id = db.Column(PKType, db.ForeignKey("bookings.id", ondelete="SET NULL"), nullable=True, index=True)
    mobile = db.Column(db.String(15), nullable=False, default="")
    sms_type = db.Column(enum_type(SmsType, "sms_type"), nullable=False)
    message = db.Column(db.Text, nullable=False)
    status = db.Column(enum_type(SmsStatus, "sms_status"), nullable=False, index=True)
    response_data = db.Column(db.Text, nullable=True)
