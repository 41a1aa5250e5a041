"""User and progress records for moneyflow-bot."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from .config import DATABASE_PATH
from .db import get_db_connection

logger = logging.getLogger(__name__)


@dataclass
class User:
    telegram_id: int
    username: Optional[str]
    first_name: Optional[str]
    is_paid: bool


@dataclass
class Progress:
    user_id: int
    current_day: int
    last_access: Optional[str]
    completed_days: set[int] = field(default_factory=set)


def coerce_paid_flag(value: Any) -> bool:
    """Normalize a stored paid flag to a bool.

    Only a real ``True`` or the exact legacy string ``'t'`` (written by the old
    Postgres-backed deployment) count as paid. Anything else is unpaid.
    """
    return value is True or value == "t"


def find_user_by_id(user_id: int, db_path: str = DATABASE_PATH) -> Optional[User]:
    """
    Look up a user by Telegram id.

    Args:
        user_id: Telegram user id
        db_path: Path to database file

    Returns:
        User with a canonical boolean ``is_paid``, or None if not registered
    """
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute(
            "SELECT telegram_id, username, first_name, is_paid FROM users WHERE telegram_id = ?",
            (user_id,),
        )
        row = cursor.fetchone()
        if not row:
            return None

        return User(
            telegram_id=row["telegram_id"],
            username=row["username"],
            first_name=row["first_name"],
            is_paid=coerce_paid_flag(row["is_paid"]),
        )
    finally:
        conn.close()


def register_user(
    user_id: int,
    username: Optional[str] = None,
    first_name: Optional[str] = None,
    db_path: str = DATABASE_PATH,
) -> bool:
    """Insert an unpaid user record if none exists. Returns True if created."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute(
            "INSERT OR IGNORE INTO users (telegram_id, username, first_name) VALUES (?, ?, ?)",
            (user_id, username, first_name),
        )
        conn.commit()
        created = cursor.rowcount > 0
        if created:
            logger.info(f"Registered new user {user_id}")
        return created
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def set_paid(user_id: int, paid: bool = True, db_path: str = DATABASE_PATH) -> None:
    """Set the paid flag, creating the user record when missing."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute(
            """
            INSERT INTO users (telegram_id, is_paid) VALUES (?, ?)
            ON CONFLICT(telegram_id) DO UPDATE SET is_paid = excluded.is_paid
            """,
            (user_id, "t" if paid else "f"),
        )
        conn.commit()
        logger.info(f"User {user_id} paid flag set to {paid}")
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def upsert_progress(
    user_id: int,
    day: int,
    db_path: str = DATABASE_PATH,
    now: Optional[datetime] = None,
) -> Optional[Progress]:
    """
    Record a delivered lesson day for a user.

    Marks ``day`` as completed, advances ``current_day`` to ``day`` if it is
    larger, and stamps ``last_access``. Creates the progress record on first use.

    Args:
        user_id: Telegram user id
        day: Lesson day that was delivered
        db_path: Path to database file
        now: Timestamp to record (defaults to current UTC time)

    Returns:
        The progress record after the update
    """
    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute(
            """
            INSERT INTO progress (user_id, current_day, last_access) VALUES (?, ?, ?)
            ON CONFLICT(user_id) DO UPDATE SET
                current_day = MAX(progress.current_day, excluded.current_day),
                last_access = excluded.last_access
            """,
            (user_id, day, timestamp),
        )
        cursor.execute(
            """
            INSERT INTO completed_days (user_id, day, completed_at) VALUES (?, ?, ?)
            ON CONFLICT(user_id, day) DO UPDATE SET completed_at = excluded.completed_at
            """,
            (user_id, day, timestamp),
        )
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()

    logger.info(f"Progress updated: user={user_id}, day={day}")
    return get_progress(user_id, db_path)


def get_progress(user_id: int, db_path: str = DATABASE_PATH) -> Optional[Progress]:
    """Return the progress record for a user, or None if nothing was delivered yet."""
    conn = get_db_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute(
            "SELECT user_id, current_day, last_access FROM progress WHERE user_id = ?",
            (user_id,),
        )
        row = cursor.fetchone()
        if not row:
            return None

        cursor.execute(
            "SELECT day FROM completed_days WHERE user_id = ? ORDER BY day",
            (user_id,),
        )
        days = {day_row["day"] for day_row in cursor.fetchall()}

        return Progress(
            user_id=row["user_id"],
            current_day=row["current_day"],
            last_access=row["last_access"],
            completed_days=days,
        )
    finally:
        conn.close()
