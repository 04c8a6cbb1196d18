"""
Database initialization and migration utilities.
"""
import logging
from sqlalchemy import create_engine, text
from quest_relay.db.models import Base
from quest_relay.config import get_db_components

logger = logging.getLogger(__name__)


def create_database_if_not_exists(database_url: str | None = None):
    """Create the database if it doesn't exist (PostgreSQL only)."""
    db_components = get_db_components(database_url)
    if db_components["backend"] != "postgresql":
        logger.info(f"Skipping database creation for backend: {db_components['backend']}")
        return

    db_name = db_components["db_name"]
    engine = create_engine(db_components["db_url_without_name"], isolation_level="AUTOCOMMIT")

    with engine.connect() as conn:
        # Check if database exists
        result = conn.execute(
            text("SELECT 1 FROM pg_database WHERE datname = :db_name"),
            {"db_name": db_name}
        )

        if not result.fetchone():
            logger.info(f"Creating database: {db_name}")
            # Database names cannot be bound parameters in CREATE DATABASE
            conn.execute(text(f'CREATE DATABASE "{db_name}"'))
            logger.info(f"Database {db_name} created successfully")
        else:
            logger.info(f"Database {db_name} already exists")

    engine.dispose()


def create_tables(database_url: str | None = None):
    """Create all tables defined in models."""
    engine = create_engine(get_db_components(database_url)["db_url"])

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("All tables created successfully")

    engine.dispose()


def init_database(database_url: str | None = None):
    """Complete database initialization."""
    logger.info("Checking database synchronization...")
    create_database_if_not_exists(database_url)
    create_tables(database_url)
    logger.info("Database is ready")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
