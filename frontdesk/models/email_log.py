from frontdesk.extensions import db
from frontdesk.models.base import PKType, TimestampMixin, enum_type
from frontdesk.models.enums import EmailStatus, EmailType


class EmailLog(TimestampMixin, db.Model):
    __tablename__ = "email_logs"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    recipient_email = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(255), nullable=False)
    email_type = db.Column(enum_type(EmailType, "email_type"), nullable=False, default=EmailType.EXPORT)
    status = db.Column(enum_type(EmailStatus, "email_status"), nullable=False, default=EmailStatus.PENDING, index=True)
    response_data = db.Column(db.Text, nullable=True)
    admin_id = db.Column(PKType, db.ForeignKey("users.id"), nullable=True, index=True)
