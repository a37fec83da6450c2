"""
Tagboard - Articles with free text tags and a tag cloud
Application factory and initialization
"""
import os
import sys
import logging

import flask.cli
flask.cli.show_server_banner = lambda *args: None

# Core Flask imports
from flask import Flask

# Local imports
from constants import *
from settings import load_settings
from db import db, migrate, init_db
from utils import ColoredFormatter, FilterRemoveDateFromWerkzeugLogs, get_or_create_secret_key, format_date
import structlog
from metrics import init_metrics

# Routes
from routes.articles import articles_bp
from routes.api import api_bp


def configure_logging(level="INFO"):
    """Colored stdlib logging plus structlog on top of it"""
    formatter = ColoredFormatter(
        '[%(asctime)s.%(msecs)03d] %(levelname)s (%(module)s) %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        handlers=[handler]
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if os.environ.get('LOG_FORMAT') == 'json' else structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Apply filter to hide date from http access logs
    logging.getLogger('werkzeug').addFilter(FilterRemoveDateFromWerkzeugLogs())
    logging.getLogger('alembic.runtime.migration').setLevel(logging.WARNING)


logger = structlog.get_logger('main')


def create_app(config=None):
    """Application factory"""
    app_settings = load_settings()
    configure_logging(app_settings["logging"]["level"])

    app = Flask(__name__, template_folder=TEMPLATES_DIR)
    app.config["SQLALCHEMY_DATABASE_URI"] = app_settings["database"]["uri"]
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config["TAG_CLOUD_CLASSES"] = app_settings["tag_cloud"]["classes"]
    if config:
        app.config.update(config)
    if not app.config.get('SECRET_KEY'):
        app.config['SECRET_KEY'] = get_or_create_secret_key()

    # Initialize components
    db.init_app(app)
    migrate.init_app(app, db)

    # Register exception handlers
    from exceptions import register_exception_handlers
    register_exception_handlers(app)

    # Register blueprints
    app.register_blueprint(articles_bp)
    app.register_blueprint(api_bp)

    app.jinja_env.filters['format_date'] = format_date

    # Initialize metrics
    init_metrics(app)

    # Initialize database
    init_db(app)

    return app


if __name__ == '__main__':
    app = create_app()
    logger.info(f'Build Version: {BUILD_VERSION}')
    logger.info('Starting server on port 8465...')
    app.run(debug=False, use_reloader=False, host="0.0.0.0", port=8465)
    logger.info('Shutting down server...')
