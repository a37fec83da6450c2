from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event, inspect
from flask_migrate import Migrate
from alembic.config import Config
from alembic import command
import os
import logging
from constants import ALEMBIC_DIR, ALEMBIC_CONF
from utils import now_utc

# Retrieve main logger
logger = logging.getLogger("main")

db = SQLAlchemy()
migrate = Migrate(directory=ALEMBIC_DIR)


# Alembic functions
def get_alembic_cfg():
    cfg = Config(ALEMBIC_CONF)
    cfg.set_main_option("script_location", ALEMBIC_DIR)
    return cfg


def _set_sqlite_pragma(dbapi_connection, connection_record):
    import sqlite3
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return

    cursor = dbapi_connection.cursor()
    # Taggings rely on ON DELETE CASCADE
    cursor.execute("PRAGMA foreign_keys=ON;")
    cursor.close()


def init_db(app):
    with app.app_context():
        event.listen(db.engine, "connect", _set_sqlite_pragma)

        inspector = inspect(db.engine)
        if not inspector.has_table("articles"):
            logger.info("Initializing database tables...")
            db.create_all()
            if not app.config.get("TESTING") and os.path.exists(ALEMBIC_CONF):
                command.stamp(get_alembic_cfg(), "head")
                logger.info("Database created and stamped to the latest migration version.")
        else:
            # Ensure new tables are created even if DB exists
            db.create_all()
