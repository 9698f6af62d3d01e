import click
from flask.cli import with_appcontext

from frontdesk.errors import AppError
from frontdesk.extensions import db
from frontdesk.models import UserRole
from frontdesk.services import AuthService


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create any missing tables."""
    db.create_all()
    click.echo("Database tables created.")


@click.command("create-admin")
@click.argument("username")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.option("--full-name", default="")
@click.option("--role", type=click.Choice([role.value for role in UserRole]), default=UserRole.ADMIN.value)
@with_appcontext
def create_admin_command(username, password, full_name, role):
    try:
        user = AuthService.create_user(username, password, full_name=full_name, role=role)
    except AppError as exc:
        raise click.ClickException(exc.message) from exc
    click.echo(f"Created {user.role.value} user '{user.username}' (id={user.id}).")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_admin_command)
