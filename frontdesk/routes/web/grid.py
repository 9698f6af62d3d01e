from flask import Blueprint, render_template

from frontdesk.decorators import admin_required
from frontdesk.services import BookingService

web_grid_bp = Blueprint("web_grid", __name__)


@web_grid_bp.get("/grid")
@admin_required
def grid():
    rows = BookingService.active_bookings_by_resource()
    occupied = sum(1 for _resource, bookings in rows if bookings)
    return render_template("grid.html", rows=rows, occupied=occupied, total=len(rows))
