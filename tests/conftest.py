from datetime import date, datetime, timedelta, timezone

import pytest

from frontdesk import create_app
from frontdesk.extensions import db
from frontdesk.models import Booking, BookingType, Resource, UserRole
from frontdesk.services import AuthService


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(app):
    return AuthService.create_user("frontdesk", "s3cret-pass", full_name="Desk Admin")


@pytest.fixture
def owner(app):
    return AuthService.create_user("owner", "owner-pass", full_name="Hotel Owner", role=UserRole.OWNER)


@pytest.fixture
def resource(app):
    room = Resource(display_name="Room 101", custom_name="Deluxe 101")
    db.session.add(room)
    db.session.commit()
    return room


@pytest.fixture
def make_booking(admin, resource):
    def factory(**overrides):
        values = {
            "resource_id": resource.id,
            "admin_id": admin.id,
            "client_name": "Ravi Kumar",
            "client_mobile": "98765 43210",
            "client_aadhar": "123412341234",
            "check_in": datetime.now(timezone.utc) - timedelta(hours=10),
            "total_amount": 0,
        }
        values.update(overrides)
        booking = Booking(**values)
        db.session.add(booking)
        db.session.commit()
        return booking

    return factory


@pytest.fixture
def active_booking(make_booking):
    return make_booking()


@pytest.fixture
def advance_booking(make_booking):
    return make_booking(
        booking_type=BookingType.ADVANCED,
        client_name="Meena S",
        advance_date=date.today() + timedelta(days=3),
        check_in=datetime.now(timezone.utc) + timedelta(days=3),
    )
