# travel_tracker/__init__.py
from flask import Flask
from config import Config
from .extensions import db, migrate, limiter, csrf
from travel_tracker.models import User, Country, VisitedCountry # noqa: F401 (registers tables)
from .context_processors import utility_processor
# Import logging configuration
from .logging_config import setup_logging
# Import security utilities
from .security import add_security_headers


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Setup logging (do this early, after config is loaded)
    setup_logging(app)

    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        raise ValueError("Database configuration is incomplete. Set DATABASE_URL in the environment or .env file.")

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    csrf.init_app(app)

    # Register blueprints here
    from travel_tracker.main import bp as main_bp
    app.register_blueprint(main_bp)

    # Register CLI commands
    from travel_tracker.cli import register_cli_commands
    register_cli_commands(app)

    # Register error handlers
    from travel_tracker.error_handlers import register_error_handlers
    register_error_handlers(app)

    app.context_processor(utility_processor)

    app.after_request(add_security_headers)

    app.logger.info(f"Travel tracker ready (default user {app.config.get('DEFAULT_USER_ID')})")

    return app
