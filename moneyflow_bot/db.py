"""Database initialization and management for moneyflow-bot."""

import sqlite3
import logging

from moneyflow_bot.config import DATABASE_PATH

logger = logging.getLogger(__name__)


def get_db_connection(db_path: str = DATABASE_PATH):
    """Get a database connection with WAL mode enabled."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row

    # Enable WAL mode for better concurrency
    conn.execute("PRAGMA journal_mode=WAL;")

    return conn


def init_db(db_path: str = DATABASE_PATH):
    """Initialize the database with required schema."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        # is_paid is TEXT so rows migrated with the legacy 't'/'f' encoding load as-is
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS users (
                telegram_id INTEGER PRIMARY KEY,
                username TEXT,
                first_name TEXT,
                is_paid TEXT NOT NULL DEFAULT 'f',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS progress (
                user_id INTEGER PRIMARY KEY,
                current_day INTEGER NOT NULL DEFAULT 0,
                last_access TIMESTAMP
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS completed_days (
                user_id INTEGER NOT NULL,
                day INTEGER NOT NULL,
                completed_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                PRIMARY KEY (user_id, day)
            )
        """)

        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_completed_days_user_id
            ON completed_days(user_id)
        """)

        conn.commit()
        logger.info(f"Database initialized successfully at {db_path}")

    except sqlite3.Error as e:
        logger.error(f"Database initialization error: {e}")
        conn.rollback()
        raise
    finally:
        conn.close()
