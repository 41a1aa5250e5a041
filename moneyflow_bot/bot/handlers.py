import logging
from typing import Any, Awaitable, Callable

from telegram import Update
from telegram.ext import ContextTypes

from moneyflow_bot import lessons
from moneyflow_bot.config import CHUNK_DELAY, DATABASE_PATH, MAX_DAY, MESSAGE_CHUNK_SIZE
from moneyflow_bot.messages import GENERIC_ERROR, paywall_message
from moneyflow_bot.store import find_user_by_id, upsert_progress
from .sender import send_long_message

logger = logging.getLogger(__name__)

CommandCallback = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]


def is_duplicate(update: Update, context: ContextTypes.DEFAULT_TYPE) -> bool:
    """Check the application's dedup cache, if one is configured."""
    dedup = context.bot_data.get("dedup")
    message = update.effective_message
    if dedup is None or message is None:
        return False
    return dedup.seen(message.chat_id, message.message_id)


async def deliver_lesson(bot: Any, user_id: int, chat_id: int, day: int) -> bool:
    """
    Gate, send and record one lesson day.

    Unpaid or unknown users get the paywall message. Paid users get the
    lesson text (or the placeholder for days without content), after which
    progress is recorded. Progress failures are logged, not raised: the
    lesson has already been delivered at that point.

    Returns:
        True if the lesson was delivered, False if access was denied
    """
    user = find_user_by_id(user_id, DATABASE_PATH)

    if user is None or not user.is_paid:
        logger.info(f"Day {day} denied for user {user_id}: not paid")
        await bot.send_message(chat_id=chat_id, text=paywall_message(day))
        return False

    content = lessons.get_lesson(day)
    await send_long_message(bot, chat_id, content, {}, MESSAGE_CHUNK_SIZE, CHUNK_DELAY)

    try:
        upsert_progress(user_id, day, DATABASE_PATH)
    except Exception as e:
        logger.error(f"Error updating progress for user {user_id}: {e}", exc_info=True)

    logger.info(f"Day {day} lesson delivered to user {user_id}")
    return True


def day_command_handler(day: int) -> CommandCallback:
    async def handle_day(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if is_duplicate(update, context):
            return

        user = update.effective_user
        chat = update.effective_chat
        if not user or not chat:
            return

        try:
            await deliver_lesson(context.bot, user.id, chat.id, day)
        except Exception as e:
            logger.error(f"Error in day {day} command: {e}", exc_info=True)
            try:
                await context.bot.send_message(chat_id=chat.id, text=GENERIC_ERROR)
            except Exception as send_error:
                logger.error(f"Failed to send error message: {send_error}")

    handle_day.__name__ = f"day{day}_command"
    return handle_day


DAY_HANDLERS: dict[int, CommandCallback] = {
    day: day_command_handler(day) for day in range(1, MAX_DAY + 1)
}
