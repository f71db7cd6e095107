import logging
import os
from typing import Any, Optional

import click
from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_migrate import Migrate
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from database import db
from services.errors import ApiError

DEFAULT_DATABASE_URL = "sqlite:///projectscope.db"

migrate = Migrate()


def _database_url() -> str:
    url = os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL)
    # Hosted Postgres providers still hand out the legacy scheme.
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def _config_from_env() -> dict[str, Any]:
    return {
        "SQLALCHEMY_DATABASE_URI": _database_url(),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "JWT_SECRET": os.environ.get("JWT_SECRET"),
        "JWT_EXPIRES_HOURS": int(os.environ.get("JWT_EXPIRES_HOURS", "24")),
        "APP_ENV": os.environ.get("APP_ENV", "development"),
        "LOG_LEVEL": os.environ.get("LOG_LEVEL", "INFO"),
    }


def _engine_options(config) -> dict[str, Any]:
    url = make_url(config["SQLALCHEMY_DATABASE_URI"])
    if config.get("APP_ENV") == "production" and url.get_backend_name() == "postgresql":
        return {"connect_args": {"sslmode": "require"}}
    return {}


def create_app(config_override: Optional[dict[str, Any]] = None) -> Flask:
    """Build the API application.

    Configuration is read from the environment (and a ``.env`` file), then
    ``config_override`` is applied on top. ``JWT_SECRET`` has no default and
    must be provided.
    """
    load_dotenv()

    # Initialize Flask app
    app = Flask(__name__)
    app.config.update(_config_from_env())
    if config_override:
        app.config.update(config_override)

    if not app.config.get("JWT_SECRET"):
        raise RuntimeError("JWT_SECRET must be set to sign and verify bearer tokens.")

    app.logger.setLevel(app.config["LOG_LEVEL"])
    app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", _engine_options(app.config))

    db.init_app(app)

    # Models import should be after initializing db
    import models  # noqa: F401

    # Create flask command lines to update the db based on the model
    # Useage:
    # Create a migration script in ./migrations/versions
    # > flask --app app db migrate -m "Add risk owner"
    # Run the update
    # > flask --app app db upgrade
    migrate.init_app(app, db)

    _register_blueprints(app)
    _register_error_handlers(app)
    _register_commands(app)

    safe_url = make_url(app.config["SQLALCHEMY_DATABASE_URI"]).render_as_string(hide_password=True)
    app.logger.info("Using database %s", safe_url)
    return app


def _register_blueprints(app: Flask) -> None:
    from routes.auth import auth_bp
    from routes.columns import columns_bp
    from routes.identifiers import identifiers_bp
    from routes.minutes import minutes_bp
    from routes.projects import projects_bp
    from routes.risks import risks_bp
    from routes.sprints import sprints_bp
    from routes.system import system_bp
    from routes.tasks import tasks_bp

    for blueprint in (
        system_bp,
        auth_bp,
        projects_bp,
        tasks_bp,
        sprints_bp,
        risks_bp,
        minutes_bp,
        columns_bp,
        identifiers_bp,
    ):
        app.register_blueprint(blueprint)


# Error handling
# ------------------------------
def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def handle_api_error(error: ApiError):
        if error.status_code >= 500:
            db.session.rollback()
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        if error.code in (404, 405):
            return jsonify({"error": "Route not found"}), 404
        return jsonify({"error": error.name, "message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        app.logger.exception("Unhandled error: %s", error)
        if isinstance(error, SQLAlchemyError):
            db.session.rollback()
        return jsonify({"error": "Internal server error", "message": str(error)}), 500


# Command line
# ------------------------------
def _register_commands(app: Flask) -> None:
    @app.cli.command("create-user")
    @click.argument("username")
    @click.argument("email")
    @click.option("--full-name", default="", help="Display name stored in tokens.")
    @click.password_option()
    def create_user(username, email, full_name, password):
        """Create an active user that can log in to the API."""
        from models.user import User

        user = User(username=username, email=email, full_name=full_name, is_active=True)
        user.set_password(password)
        try:
            db.session.add(user)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()  # Roll back the transaction
            raise click.ClickException(f"An error occurred: {str(e)}")
        click.echo(f"Created user {username} (id {user.id})")


# Application Execution
# ------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    create_app().run(debug=os.environ.get("APP_ENV") != "production")
