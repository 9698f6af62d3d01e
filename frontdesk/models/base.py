from datetime import datetime, timezone

from frontdesk.extensions import db
from sqlalchemy import BigInteger, Integer


# Use BIGINT in PostgreSQL, but INTEGER in SQLite so autoincrement works.
PKType = BigInteger().with_variant(Integer, "sqlite")


def utcnow():
    return datetime.now(timezone.utc)


def enum_type(enum_cls, name):
    # Stored as VARCHAR + CHECK so SQLite and PostgreSQL share the schema.
    return db.Enum(enum_cls, name=name, native_enum=False, length=32, validate_strings=True)


class TimestampMixin:
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
