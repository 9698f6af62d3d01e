import pytest
from flask import session
from flask_wtf.csrf import generate_csrf

from frontdesk.models import Booking, BookingCancellation, BookingStatus
from frontdesk.services import BookingActionService

from helpers import flashes, login, reload


def _post(client, **data):
    return client.post("/booking-actions", data=data)


def test_unauthenticated_request_goes_to_login(client, active_booking):
    response = _post(client, action="cancel_booking", booking_id=active_booking.id)

    assert response.status_code == 302
    assert "/login" in response.headers["Location"]
    assert reload(Booking, active_booking.id).status == BookingStatus.ACTIVE


def test_non_admin_is_redirected_with_error(client, owner, active_booking):
    login(client, owner)

    response = _post(client, action="cancel_booking", booking_id=active_booking.id)

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/grid")
    assert flashes(client) == [("error", "Access denied")]
    assert BookingCancellation.query.count() == 0
    assert reload(Booking, active_booking.id).status == BookingStatus.ACTIVE


def test_get_request_is_rejected(client, admin):
    login(client, admin)

    response = client.get("/booking-actions")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/grid")
    assert flashes(client) == [("error", "Invalid request")]


def test_missing_booking_id(client, admin):
    login(client, admin)

    _post(client, action="checkout", booking_id="")

    assert flashes(client) == [("error", "Booking ID required")]


def test_unknown_action(client, admin, active_booking):
    login(client, admin)

    _post(client, action="refund", booking_id=active_booking.id)

    assert flashes(client) == [("error", "Invalid action")]


@pytest.mark.parametrize("action", ["cancel_advanced", "mark_paid", "checkout", "cancel_booking"])
def test_unknown_booking_redirects_with_error(client, admin, active_booking, action):
    login(client, admin)

    response = _post(client, action=action, booking_id=active_booking.id + 50)

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/grid")
    assert flashes(client) == [("error", "Booking not found")]
    assert Booking.query.count() == 1
    assert reload(Booking, active_booking.id).status == BookingStatus.ACTIVE


def test_cancel_booking_success_flash(client, admin, active_booking):
    login(client, admin)

    response = _post(client, action="cancel_booking", booking_id=active_booking.id)

    assert response.status_code == 302
    assert flashes(client) == [("success", "Booking cancelled successfully! Room is now available.")]
    assert reload(Booking, active_booking.id).status == BookingStatus.COMPLETED
    assert BookingCancellation.query.count() == 1


def test_unexpected_error_is_reported_generically(client, admin, active_booking, monkeypatch):
    def explode(*_args, **_kwargs):
        raise RuntimeError("database went away")

    monkeypatch.setattr(BookingActionService, "perform", explode)
    login(client, admin)

    _post(client, action="checkout", booking_id=active_booking.id)

    assert flashes(client) == [("error", "Operation failed: database went away")]


class TestCsrf:
    @pytest.fixture(autouse=True)
    def enable_csrf(self, app):
        app.config["WTF_CSRF_ENABLED"] = True

    @pytest.mark.parametrize("token", [None, "forged-token"])
    def test_bad_token_short_circuits(self, client, admin, active_booking, token):
        login(client, admin)
        data = {"action": "cancel_booking", "booking_id": active_booking.id}
        if token:
            data["csrf_token"] = token

        response = client.post("/booking-actions", data=data)

        assert response.status_code == 302
        assert response.headers["Location"].endswith("/grid")
        assert flashes(client) == [("error", "Invalid request")]
        booking = reload(Booking, active_booking.id)
        assert booking.status == BookingStatus.ACTIVE
        assert booking.payment_notes is None
        assert BookingCancellation.query.count() == 0

    def test_valid_token_is_accepted(self, app, client, admin, active_booking):
        with app.test_request_context():
            token = generate_csrf()
            raw_token = session["csrf_token"]
        login(client, admin)
        with client.session_transaction() as sess:
            sess["csrf_token"] = raw_token

        client.post(
            "/booking-actions",
            data={"action": "cancel_booking", "booking_id": active_booking.id, "csrf_token": token},
        )

        assert flashes(client) == [("success", "Booking cancelled successfully! Room is now available.")]
        assert reload(Booking, active_booking.id).status == BookingStatus.COMPLETED
