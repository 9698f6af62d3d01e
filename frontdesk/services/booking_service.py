import math
from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone
from decimal import Decimal

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from frontdesk.extensions import db
from frontdesk.models import Booking, BookingStatus, Resource

# Placeholder billing rule until a real rate card exists.
MINIMUM_CHARGE = Decimal("500")
HOURLY_RATE = Decimal("100")

ADVANCED_CANCEL_NOTE = " - Advanced booking cancelled by admin"
REGULAR_CANCEL_NOTE = " - Booking cancelled by admin"


@dataclass(frozen=True)
class Duration:
    hours: int
    total_minutes: int
    formatted: str


def as_utc(value):
    # SQLite hands back naive datetimes; everything is stored as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class BookingService:
    @staticmethod
    def calculate_duration(check_in, now=None):
        now = as_utc(now or datetime.now(timezone.utc))
        elapsed = (now - as_utc(check_in)).total_seconds()
        hours = math.floor(elapsed / 3600)
        total_minutes = math.floor(elapsed / 60)
        shown = max(total_minutes, 0)
        return Duration(hours=hours, total_minutes=total_minutes, formatted=f"{shown // 60}h {shown % 60}m")

    @staticmethod
    def calculate_checkout_amount(check_in, now=None):
        duration = BookingService.calculate_duration(check_in, now)
        return max(MINIMUM_CHARGE, Decimal(duration.hours) * HOURLY_RATE)

    @staticmethod
    def get_booking(booking_id):
        try:
            booking_pk = int(str(booking_id).strip())
        except (TypeError, ValueError):
            return None
        return (
            Booking.query.options(joinedload(Booking.resource), joinedload(Booking.admin))
            .filter(Booking.id == booking_pk)
            .first()
        )

    @staticmethod
    def _commit(operation, booking_id):
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("Could not %s for booking %s", operation, booking_id)
            return False
        return True

    @staticmethod
    def cancel_advanced_booking(booking):
        booking.status = BookingStatus.COMPLETED
        booking.payment_notes = f"{booking.payment_notes or ''}{ADVANCED_CANCEL_NOTE}"
        return BookingService._commit("cancel advanced booking", booking.id)

    @staticmethod
    def cancel_regular_booking(booking, now=None):
        booking.status = BookingStatus.COMPLETED
        booking.actual_check_out = now or datetime.now(timezone.utc)
        booking.payment_notes = f"{booking.payment_notes or ''}{REGULAR_CANCEL_NOTE}"
        return BookingService._commit("cancel booking", booking.id)

    @staticmethod
    def _conditional_update(operation, booking_id, criteria, values):
        try:
            updated = (
                Booking.query.filter(Booking.id == booking_id, *criteria)
                .update(values, synchronize_session="fetch")
            )
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("Could not %s for booking %s", operation, booking_id)
            return False
        return updated == 1

    @staticmethod
    def mark_booking_paid(booking_id, amount=None, now=None):
        """Flag an unpaid booking as paid and release its resource.

        An existing actual_check_out (e.g. from a cancellation) is kept.
        Returns False when no unpaid booking with that id exists.
        """
        values = {
            "is_paid": True,
            "status": BookingStatus.COMPLETED,
            "actual_check_out": func.coalesce(Booking.actual_check_out, now or datetime.now(timezone.utc)),
        }
        if amount is not None:
            values["total_amount"] = amount
        return BookingService._conditional_update(
            "mark booking paid", booking_id, [Booking.is_paid.is_(False)], values
        )

    @staticmethod
    def complete_checkout(booking_id, amount=None, now=None):
        """Close an ACTIVE booking; returns False when nothing was open."""
        values = {
            "is_paid": True,
            "status": BookingStatus.COMPLETED,
            "actual_check_out": now or datetime.now(timezone.utc),
        }
        if amount is not None:
            values["total_amount"] = amount
        return BookingService._conditional_update(
            "complete checkout", booking_id, [Booking.status == BookingStatus.ACTIVE], values
        )

    @staticmethod
    def active_bookings_by_resource():
        resources = Resource.query.filter_by(is_active=True).order_by(Resource.id).all()
        active = (
            Booking.query.filter(Booking.status == BookingStatus.ACTIVE)
            .order_by(Booking.check_in)
            .all()
        )
        by_resource = {resource.id: [] for resource in resources}
        for booking in active:
            by_resource.setdefault(booking.resource_id, []).append(booking)
        return [(resource, by_resource[resource.id]) for resource in resources]

    @staticmethod
    def bookings_between(start_date=None, end_date=None):
        query = Booking.query.options(joinedload(Booking.resource), joinedload(Booking.admin))
        if start_date:
            query = query.filter(Booking.check_in >= datetime.combine(start_date, time.min, tzinfo=timezone.utc))
        if end_date:
            upper = datetime.combine(end_date + timedelta(days=1), time.min, tzinfo=timezone.utc)
            query = query.filter(Booking.check_in < upper)
        return query.order_by(Booking.check_in.desc()).all()
