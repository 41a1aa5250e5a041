"""Main entry point for moneyflow-bot."""

import asyncio
import logging
from moneyflow_bot.config import setup_logging, validate_config, DATABASE_PATH, WEBHOOK_URL
from moneyflow_bot.db import init_db
from moneyflow_bot.bot.bot import create_application, run_bot
from moneyflow_bot.webhook import run_webhook

logger = logging.getLogger("moneyflow_bot")


def main():
    """Main function to start the course bot."""
    setup_logging()
    logger.info("Starting moneyflow-bot...")

    try:
        validate_config()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise

    try:
        init_db(DATABASE_PATH)
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    logger.info("Moneyflow-bot initialized successfully")

    try:
        if WEBHOOK_URL:
            asyncio.run(run_webhook(create_application()))
        else:
            run_bot()
    except KeyboardInterrupt:
        logger.info("Shutting down moneyflow-bot...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
