from frontdesk.extensions import db
from frontdesk.models.base import PKType, TimestampMixin, enum_type
from frontdesk.models.enums import ResourceType


class Resource(TimestampMixin, db.Model):
    __tablename__ = "resources"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    display_name = db.Column(db.String(120), nullable=False)
    custom_name = db.Column(db.String(120), nullable=True)
    resource_type = db.Column(enum_type(ResourceType, "resource_type"), nullable=False, default=ResourceType.ROOM)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)

    bookings = db.relationship("Booking", back_populates="resource", lazy="dynamic")

    @property
    def name(self):
        return self.custom_name or self.display_name
