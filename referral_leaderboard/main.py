from flask import Flask
from .config import CONFIGS, DevelopmentConfig
from .extensions import db, migrate, ma, cors
from .utils.logger import configure_logging
import click
import os


def create_app(config_name=None, config_overrides=None):
    app = Flask(__name__, instance_relative_config=False)
    env = config_name or os.getenv("FLASK_ENV", "development")
    app.config.from_object(CONFIGS.get(env, DevelopmentConfig))
    if config_overrides:
        app.config.update(config_overrides)

    configure_logging(app)

    # initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    ma.init_app(app)
    origins = [o.strip() for o in app.config["CORS_ORIGINS"].split(",")]
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": origins}},
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "OPTIONS"],
    )

    from .models import leaderboard_entry  # noqa: F401  registers the table
    from .services.snapshot import init_snapshot
    init_snapshot(app)

    # register blueprints
    from .routes.page_routes import bp as page_bp
    from .routes.leaderboard_routes import bp as leaderboard_bp

    app.register_blueprint(page_bp)
    app.register_blueprint(leaderboard_bp)

    # error handlers to match required error format
    from .utils.response_formatter import error_response

    @app.errorhandler(400)
    def bad_request(e):
        return error_response("BAD_REQUEST", str(e), status=400)

    @app.errorhandler(404)
    def not_found(e):
        return error_response("NOT_FOUND", "Resource not found", status=404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return error_response("METHOD_NOT_ALLOWED", str(e), status=405)

    @app.errorhandler(500)
    def server_error(e):
        return error_response("SERVER_ERROR", "Internal server error", status=500)

    @app.cli.command("init-db")
    def init_db():
        """Create the leaderboard table."""
        db.create_all()
        click.echo("Leaderboard table ready.")

    app.logger.info("Leaderboard app created (%s)", env)
    return app
