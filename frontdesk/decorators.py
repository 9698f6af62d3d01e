from functools import wraps

from flask import abort, current_app, flash, redirect, request, url_for
from flask_login import current_user

from frontdesk.extensions import login_manager
from frontdesk.models import UserRole


def role_required(*roles, redirect_to=None):
    """Restrict a view to the given roles.

    Anonymous users go to the login page. Other roles get a 403, or an
    "Access denied" flash and a redirect to ``redirect_to`` when it is set.
    """
    allowed = {UserRole(role) for role in roles}

    def wrapper(func):
        @wraps(func)
        def inner(*args, **kwargs):
            if not current_user.is_authenticated:
                return login_manager.unauthorized()
            if current_user.role not in allowed:
                current_app.logger.warning("User %s denied access to %s", current_user.id, request.endpoint)
                if redirect_to:
                    flash("Access denied", "error")
                    return redirect(url_for(redirect_to))
                abort(403)
            return func(*args, **kwargs)

        return inner

    return wrapper


admin_required = role_required(UserRole.ADMIN)
admin_action_required = role_required(UserRole.ADMIN, redirect_to="web_grid.grid")
