from flask import flash, redirect, render_template, url_for
from flask_wtf.csrf import CSRFError
from sqlalchemy.exc import IntegrityError


class AppError(Exception):
    status_code = 400

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


def register_error_handlers(app):
    @app.errorhandler(CSRFError)
    def handle_csrf_error(err):
        app.logger.warning("Rejected request with invalid CSRF token: %s", err.description)
        flash("Invalid request", "error")
        return redirect(url_for("web_grid.grid"))

    @app.errorhandler(AppError)
    def handle_app_error(err):
        return render_template("error.html", message=err.message), err.status_code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(_err):
        app.logger.warning("Database integrity error")
        return render_template("error.html", message="Conflict. Record already exists."), 409

    @app.errorhandler(400)
    def bad_request(_err):
        return render_template("error.html", message="Bad request"), 400

    @app.errorhandler(401)
    def unauthorized(_err):
        return render_template("error.html", message="Unauthorized"), 401

    @app.errorhandler(403)
    def forbidden(_err):
        return render_template("error.html", message="Forbidden"), 403

    @app.errorhandler(404)
    def not_found(_err):
        return render_template("error.html", message="Page not found"), 404

    @app.errorhandler(500)
    def server_error(_err):
        app.logger.exception("Internal server error")
        return render_template("error.html", message="Something went wrong."), 500
