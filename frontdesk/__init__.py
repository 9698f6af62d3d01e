import os

from dotenv import load_dotenv
from flask import Flask
from flask_wtf.csrf import generate_csrf
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.middleware.proxy_fix import ProxyFix

from frontdesk.commands import register_commands
from frontdesk.config import config_by_env
from frontdesk.errors import register_error_handlers
from frontdesk.extensions import bcrypt, csrf, db, limiter, login_manager, mail, migrate
from frontdesk.models import User
from frontdesk.routes.web.auth import web_auth_bp
from frontdesk.routes.web.booking_actions import web_booking_actions_bp
from frontdesk.routes.web.export import web_export_bp
from frontdesk.routes.web.grid import web_grid_bp
from frontdesk.services import SettingService


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


def create_app(config_name=None):
    load_dotenv()
    env = config_name or os.getenv("FLASK_ENV", "development")

    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    package_dir = os.path.dirname(os.path.abspath(__file__))

    app = Flask(
        __name__,
        instance_relative_config=True,
        template_folder=os.path.join(package_dir, "templates"),
    )
    app.config.from_object(config_by_env.get(env, config_by_env["development"]))
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if db_uri.startswith("sqlite:///") and not db_uri.startswith("sqlite:////") and db_uri != "sqlite:///:memory:":
        relative_path = db_uri.replace("sqlite:///", "", 1)
        absolute_path = os.path.join(project_root, relative_path)
        os.makedirs(os.path.dirname(absolute_path), exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{absolute_path}"

    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)
    csrf.init_app(app)
    mail.init_app(app)
    limiter.init_app(app)
    login_manager.init_app(app)
    _init_sentry(app, env)

    register_error_handlers(app)
    register_commands(app)

    app.register_blueprint(web_auth_bp)
    app.register_blueprint(web_grid_bp)
    app.register_blueprint(web_booking_actions_bp)
    app.register_blueprint(web_export_bp)

    if env == "development":
        with app.app_context():
            db.create_all()

    @app.context_processor
    def inject_globals():
        try:
            hotel_name = SettingService.hotel_name()
        except SQLAlchemyError:
            db.session.rollback()
            hotel_name = app.config.get("HOTEL_NAME", "")
        return {
            "csrf_token": generate_csrf,
            "hotel_name": hotel_name,
        }

    return app


def _init_sentry(app, env):
    dsn = app.config.get("SENTRY_DSN")
    if not dsn:
        return
    try:
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration

        sentry_sdk.init(
            dsn=dsn,
            integrations=[FlaskIntegration()],
            traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.05")),
            environment=env,
        )
        app.logger.info("Sentry initialized.")
    except Exception as exc:
        app.logger.warning("Sentry initialization failed: %s", exc)
