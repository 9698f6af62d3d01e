from flask import Blueprint, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required, login_user, logout_user

from frontdesk.errors import AppError
from frontdesk.extensions import limiter
from frontdesk.services import AuthService

web_auth_bp = Blueprint("web_auth", __name__)


@web_auth_bp.get("/")
def landing():
    if current_user.is_authenticated:
        return redirect(url_for("web_grid.grid"))
    return redirect(url_for("web_auth.login"))


@web_auth_bp.route("/login", methods=["GET", "POST"])
@limiter.limit("20 per minute")
def login():
    if current_user.is_authenticated:
        return redirect(url_for("web_grid.grid"))

    if request.method == "GET":
        return render_template("login.html")

    try:
        user = AuthService.authenticate_user(
            username=request.form.get("username", ""),
            password=request.form.get("password", ""),
        )
    except AppError as exc:
        flash(exc.message, "error")
        return redirect(url_for("web_auth.login"))

    login_user(user)
    flash(f"Welcome back, {user.full_name or user.username}.", "success")
    return redirect(url_for("web_grid.grid"))


@web_auth_bp.post("/logout")
@login_required
def logout():
    logout_user()
    flash("Logged out successfully.", "success")
    return redirect(url_for("web_auth.login"))
