from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from frontdesk.models import Booking, BookingStatus
from frontdesk.services import BookingService
from frontdesk.services.booking_service import as_utc

from helpers import reload

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (timedelta(hours=3, minutes=30), Decimal("500")),
        (timedelta(hours=5), Decimal("500")),
        (timedelta(hours=7, minutes=59), Decimal("700")),
        (timedelta(hours=10), Decimal("1000")),
        (timedelta(hours=-4), Decimal("500")),
    ],
)
def test_checkout_amount_has_minimum_and_hourly_rate(elapsed, expected):
    assert BookingService.calculate_checkout_amount(NOW - elapsed, NOW) == expected


def test_duration_floors_hours_and_minutes():
    duration = BookingService.calculate_duration(NOW - timedelta(hours=3, minutes=30, seconds=59), NOW)
    assert duration.hours == 3
    assert duration.total_minutes == 210
    assert duration.formatted == "3h 30m"


def test_duration_accepts_naive_check_in_as_utc():
    duration = BookingService.calculate_duration(datetime(2026, 10, 18, 2, 0), NOW)
    assert duration.hours == 10


def test_get_booking_handles_missing_and_garbage_ids(active_booking):
    assert BookingService.get_booking(str(active_booking.id)).id == active_booking.id
    assert BookingService.get_booking(active_booking.id + 100) is None
    assert BookingService.get_booking("abc") is None
    assert BookingService.get_booking(None) is None


def test_mark_booking_paid_transitions_only_once(active_booking):
    assert BookingService.mark_booking_paid(active_booking.id, amount=Decimal("1000"), now=NOW) is True
    booking = reload(Booking, active_booking.id)
    assert booking.is_paid is True
    assert booking.status == BookingStatus.COMPLETED
    assert booking.total_amount == Decimal("1000")
    assert as_utc(booking.actual_check_out) == NOW

    assert BookingService.mark_booking_paid(active_booking.id, now=NOW) is False


def test_complete_checkout_requires_active_booking(active_booking):
    assert BookingService.complete_checkout(active_booking.id, now=NOW) is True
    assert BookingService.complete_checkout(active_booking.id, now=NOW) is False
    assert BookingService.complete_checkout(active_booking.id + 100, now=NOW) is False


def test_active_bookings_by_resource_excludes_completed(resource, make_booking):
    open_booking = make_booking()
    make_booking(client_name="Gone Guest", status=BookingStatus.COMPLETED)

    rows = BookingService.active_bookings_by_resource()

    assert [(r.id, [b.id for b in bookings]) for r, bookings in rows] == [(resource.id, [open_booking.id])]


def test_bookings_between_filters_on_check_in_date(make_booking):
    inside = make_booking(check_in=datetime(2026, 10, 10, 9, 0, tzinfo=timezone.utc))
    make_booking(check_in=datetime(2026, 9, 1, 9, 0, tzinfo=timezone.utc))

    found = BookingService.bookings_between(
        datetime(2026, 10, 1).date(), datetime(2026, 10, 10).date()
    )

    assert [b.id for b in found] == [inside.id]
