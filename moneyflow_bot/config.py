"""Configuration management for moneyflow-bot."""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Database configuration
DATABASE_PATH = os.getenv("DATABASE_PATH", "moneyflow.db")

# Telegram configuration
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN") or os.getenv("BOT_TOKEN")

# Webhook configuration (empty WEBHOOK_URL means long polling)
WEBHOOK_URL = os.getenv("WEBHOOK_URL", "")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

# Lesson delivery
MESSAGE_CHUNK_SIZE = int(os.getenv("MESSAGE_CHUNK_SIZE", "3500"))
CHUNK_DELAY = float(os.getenv("CHUNK_DELAY", "0.5"))
MAX_DAY = int(os.getenv("MAX_DAY", "7"))

DEDUPLICATE_UPDATES = os.getenv("DEDUPLICATE_UPDATES", "false").lower() in (
    "1",
    "true",
    "yes",
)
DEDUP_CACHE_SIZE = int(os.getenv("DEDUP_CACHE_SIZE", "1000"))

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "moneyflow_bot.log")


# Validate required configuration
def validate_config():
    """Validate that all required configuration is present."""
    if not TELEGRAM_BOT_TOKEN:
        raise ValueError(
            "Missing required environment variables: TELEGRAM_BOT_TOKEN (or BOT_TOKEN)"
        )

    if MESSAGE_CHUNK_SIZE <= 0 or MESSAGE_CHUNK_SIZE > 4096:
        raise ValueError(
            f"MESSAGE_CHUNK_SIZE must be between 1 and 4096, got {MESSAGE_CHUNK_SIZE}"
        )


def setup_logging():
    """Configure logging to both file and console."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)

    # Create logger
    logger = logging.getLogger("moneyflow_bot")
    logger.setLevel(log_level)

    # File handler
    file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(log_format))

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(log_format))

    # Add handlers
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
