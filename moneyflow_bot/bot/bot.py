"""Main Telegram bot application."""

import logging
from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
)

from moneyflow_bot.config import (
    DATABASE_PATH,
    DEDUP_CACHE_SIZE,
    DEDUPLICATE_UPDATES,
    MAX_DAY,
    TELEGRAM_BOT_TOKEN,
)
from moneyflow_bot.bot.handlers import DAY_HANDLERS, is_duplicate
from moneyflow_bot.dedup import UpdateDeduplicator
from moneyflow_bot.messages import (
    GENERIC_ERROR,
    HELP_MESSAGE,
    NO_PROGRESS_YET,
    PRICING_MESSAGE,
    PROGRESS_LOCKED,
    WELCOME_MESSAGE,
    progress_message,
)
from moneyflow_bot.store import find_user_by_id, get_progress, register_user

logger = logging.getLogger(__name__)


async def reply_with_apology(update: Update, command: str, error: Exception) -> None:
    logger.error(f"Error in {command} command: {error}", exc_info=True)
    message = update.effective_message
    if not message:
        return
    try:
        await message.reply_text(GENERIC_ERROR)
    except Exception as send_error:
        logger.error(f"Failed to send error message: {send_error}")


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.message
    user = update.effective_user
    if not message or is_duplicate(update, context):
        return

    try:
        if user:
            register_user(user.id, user.username, user.first_name, DATABASE_PATH)
        await message.reply_text(WELCOME_MESSAGE)
        logger.info("Start command processed successfully")
    except Exception as e:
        await reply_with_apology(update, "start", e)


async def pricing_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.message
    if not message or is_duplicate(update, context):
        return

    try:
        await message.reply_text(PRICING_MESSAGE)
    except Exception as e:
        await reply_with_apology(update, "pricing", e)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.message
    if not message or is_duplicate(update, context):
        return

    try:
        await message.reply_text(HELP_MESSAGE)
    except Exception as e:
        await reply_with_apology(update, "help", e)


async def progress_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.message
    user = update.effective_user
    if not message or not user or is_duplicate(update, context):
        return

    try:
        record = find_user_by_id(user.id, DATABASE_PATH)
        if record is None or not record.is_paid:
            await message.reply_text(PROGRESS_LOCKED)
            return

        progress = get_progress(user.id, DATABASE_PATH)
        if progress is None:
            await message.reply_text(NO_PROGRESS_YET)
            return

        await message.reply_text(
            progress_message(progress.completed_days, progress.current_day, MAX_DAY)
        )
    except Exception as e:
        await reply_with_apology(update, "progress", e)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    _ = update
    logger.error(
        f"Exception while handling update: {context.error}", exc_info=context.error
    )


def create_application() -> Application:
    if not TELEGRAM_BOT_TOKEN:
        raise ValueError("TELEGRAM_BOT_TOKEN is not configured")

    application = Application.builder().token(TELEGRAM_BOT_TOKEN).build()

    if DEDUPLICATE_UPDATES:
        application.bot_data["dedup"] = UpdateDeduplicator(DEDUP_CACHE_SIZE)
        logger.info(f"Duplicate update protection enabled ({DEDUP_CACHE_SIZE} entries)")

    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("pricing", pricing_command))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("progress", progress_command))

    for day, handler in DAY_HANDLERS.items():
        application.add_handler(CommandHandler(f"day{day}", handler))

    application.add_error_handler(error_handler)

    return application


def run_bot() -> None:
    logger.info("Starting Telegram bot in polling mode...")
    application = create_application()
    application.run_polling(allowed_updates=Update.ALL_TYPES)
