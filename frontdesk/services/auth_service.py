from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from frontdesk.errors import AppError
from frontdesk.extensions import bcrypt, db
from frontdesk.models import User, UserRole


class AuthService:
    @staticmethod
    def create_user(username, password, full_name="", role=UserRole.ADMIN):
        normalized = (username or "").strip().lower()
        if not normalized or not password:
            raise AppError("Username and password are required.", 400)
        if User.query.filter_by(username=normalized).first():
            raise AppError("Username already taken.", 409)

        user = User(
            username=normalized,
            full_name=(full_name or "").strip(),
            role=UserRole(role),
            password_hash=bcrypt.generate_password_hash(password).decode("utf-8"),
        )
        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            raise AppError("Username already taken.", 409) from exc
        return user

    @staticmethod
    def authenticate_user(username, password):
        user = User.query.filter_by(username=(username or "").strip().lower()).first()
        if not user:
            raise AppError("Invalid credentials.", 401)

        try:
            is_valid = bcrypt.check_password_hash(user.password_hash, password or "")
        except ValueError:
            is_valid = False

        if not is_valid:
            raise AppError("Invalid credentials.", 401)
        if not user.is_active_user:
            raise AppError("User account is inactive.", 403)
        user.last_login = datetime.now(timezone.utc)
        db.session.commit()
        return user
