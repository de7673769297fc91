import logging

from flask import Flask
from flask.json.provider import DefaultJSONProvider
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from sqlalchemy.orm import DeclarativeBase
from datetime import datetime, date


from config import Config
from .errors import handle_exception


# Serialize datetimes as ISO 8601 strings (Flask 3.x)
class BlogJSONProvider(DefaultJSONProvider):
    def default(self, obj):
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)


class Base(DeclarativeBase):
    pass
db = SQLAlchemy(model_class=Base)
migrate = Migrate()

logger = logging.getLogger(__name__)


def create_app(config_class=Config, dependencies=None):
    """
    Build the Flask application.

    Args:
        config_class: Configuration object loaded into app.config
        dependencies: Optional {key: implementation} overrides registered in the
            DI container after the defaults (tests swap the search index this way)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Setup logging (console + file)
    from .common.logging_config import setup_logging
    setup_logging(app)

    app.json = BlogJSONProvider(app)

    CORS(app, resources={r"/*": {
        "origins": "*",
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": "*",
        "expose_headers": [
            "Authorization",
            "Link",
            "Location",
            "X-Total-Count",
            f"X-{app.config['APP_NAME']}-alert",
            f"X-{app.config['APP_NAME']}-error",
            f"X-{app.config['APP_NAME']}-params",
        ]
    }})

    db.init_app(app)
    migrate.init_app(app, db)

    # Models must be imported before create_all / migrations can see them
    from . import model  # noqa: F401

    if app.config.get("AUTO_CREATE_SCHEMA"):
        with app.app_context():
            db.create_all()
            logger.info("[INIT] Database schema created/verified")

    # Import and initialize DI after models are imported
    from .config.di_setup import init_di
    init_di(app.config, overrides=dependencies)

    if app.config.get("ELASTICSEARCH_ENABLED"):
        from .core.es_initializer import initialize_elasticsearch
        initialize_elasticsearch()

    from .controller.auth import init_app as auth_api_init
    app.register_blueprint(auth_api_init())

    from .controller.entry import init_app as entry_api_init
    app.register_blueprint(entry_api_init())

    from .controller.health import init_app as health_api_init
    app.register_blueprint(health_api_init())

    from .core.es_initializer import register_commands
    register_commands(app)

    app.register_error_handler(Exception, handle_exception)

    return app
