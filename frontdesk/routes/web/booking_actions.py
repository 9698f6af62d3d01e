from flask import Blueprint, current_app, flash, redirect, request, url_for
from flask_login import current_user

from frontdesk.decorators import admin_action_required
from frontdesk.extensions import db
from frontdesk.services import BookingActionService, RequestContext

web_booking_actions_bp = Blueprint("web_booking_actions", __name__)


def _back_to_grid(message, category):
    flash(message, category)
    return redirect(url_for("web_grid.grid"))


@web_booking_actions_bp.get("/booking-actions")
@admin_action_required
def booking_action_get():
    return _back_to_grid("Invalid request", "error")


@web_booking_actions_bp.post("/booking-actions")
@admin_action_required
def booking_action():
    action = request.form.get("action", "")
    booking_id = request.form.get("booking_id", "")
    ctx = RequestContext(admin_id=current_user.id, admin_username=current_user.username)

    try:
        outcome = BookingActionService.perform(ctx, action, booking_id)
    except Exception as exc:
        db.session.rollback()
        current_app.logger.exception("Booking action %s failed for booking %s", action, booking_id)
        return _back_to_grid(f"Operation failed: {exc}", "error")

    for failure in outcome.secondary_failures:
        current_app.logger.warning(
            "Booking %s action %s: %s step failed: %s", booking_id, action, failure.effect, failure.detail
        )
    return _back_to_grid(outcome.message, outcome.category)
