from datetime import date

from flask import Blueprint, flash, redirect, request, url_for
from flask_login import current_user

from frontdesk.decorators import admin_required
from frontdesk.errors import AppError
from frontdesk.extensions import limiter
from frontdesk.services import BookingService, ExportService

web_export_bp = Blueprint("web_export", __name__)


def _parse_date(raw, label):
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise AppError(f"{label} must be a date in YYYY-MM-DD format.", 400) from exc


def _required_email(raw):
    email = (raw or "").strip()
    if "@" not in email:
        raise AppError("A valid recipient email is required.", 400)
    return email


@web_export_bp.post("/export/email")
@admin_required
@limiter.limit("10 per hour")
def email_export():
    try:
        to_email = _required_email(request.form.get("to_email"))
        start_date = _parse_date(request.form.get("start_date"), "Start date")
        end_date = _parse_date(request.form.get("end_date"), "End date")
        if start_date and end_date and end_date < start_date:
            raise AppError("End date cannot be before start date.", 400)
    except AppError as exc:
        flash(exc.message, "error")
        return redirect(url_for("web_grid.grid"))

    bookings = BookingService.bookings_between(start_date, end_date)
    filters = {
        "start_date": start_date.isoformat() if start_date else None,
        "end_date": end_date.isoformat() if end_date else None,
    }
    result = ExportService.send_export_email(to_email, bookings, filters, current_user.id)
    if result.success:
        flash(f"Export of {len(bookings)} bookings sent to {to_email}.", "success")
    else:
        flash(f"Export email failed: {result.message}", "error")
    return redirect(url_for("web_grid.grid"))


@web_export_bp.post("/settings/email-test")
@admin_required
def email_test():
    try:
        to_email = _required_email(request.form.get("to_email"))
    except AppError as exc:
        flash(exc.message, "error")
        return redirect(url_for("web_grid.grid"))

    result = ExportService.test_email_configuration(to_email, current_user.id)
    flash(result.message, "success" if result.success else "error")
    return redirect(url_for("web_grid.grid"))
