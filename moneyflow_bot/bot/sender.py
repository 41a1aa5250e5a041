"""Sequential delivery of long texts as multiple Telegram messages."""

import asyncio
import logging
from typing import Any, Optional

from moneyflow_bot.bot.utils import split_message, utf16_len
from moneyflow_bot.config import CHUNK_DELAY, MESSAGE_CHUNK_SIZE
from moneyflow_bot.messages import chunk_failure_message, part_indicator

logger = logging.getLogger(__name__)

# Hard per-message cap enforced by the Bot API, in UTF-16 code units
TELEGRAM_MAX_MESSAGE_LENGTH = 4096


async def send_long_message(
    bot: Any,
    chat_id: int | str,
    message: str,
    options: Optional[dict[str, Any]] = None,
    chunk_size: int = MESSAGE_CHUNK_SIZE,
    delay: float = CHUNK_DELAY,
) -> None:
    """
    Send ``message`` to ``chat_id``, splitting it when it exceeds Telegram's limit.

    Messages up to 4096 UTF-16 units go out in a single call. Longer ones are
    split with :func:`split_message` into pieces of at most ``chunk_size``
    UTF-16 units, each tagged with a "part i/N" footer, and sent one after
    another with ``delay`` seconds between them.

    If a part fails, the user is told which part failed (best effort) and the
    original error is re-raised; later parts are not sent.

    Args:
        bot: Object exposing ``async send_message(chat_id=..., text=..., **options)``
        chat_id: Destination chat
        message: Text to deliver
        options: Extra keyword arguments for ``send_message`` (parse_mode, reply_markup, ...)
        chunk_size: Maximum UTF-16 units per part, leaving room for the footer
        delay: Pause between parts in seconds
    """
    if not bot or not chat_id or not message:
        logger.error("Invalid parameters for send_long_message")
        return

    if not isinstance(message, str):
        logger.error(f"Message must be a string, got {type(message).__name__}")
        return

    options = options or {}

    if utf16_len(message) <= TELEGRAM_MAX_MESSAGE_LENGTH:
        try:
            await bot.send_message(chat_id=chat_id, text=message, **options)
            return
        except Exception as e:
            logger.error(f"Error sending message to chat {chat_id}: {e}")
            raise

    chunks = split_message(message, chunk_size)
    total = len(chunks)
    logger.info(f"Splitting long message into {total} chunks for chat {chat_id}")

    for idx, chunk in enumerate(chunks, 1):
        text = chunk
        if total > 1:
            text += "\n\n" + part_indicator(idx, total)

        try:
            await bot.send_message(chat_id=chat_id, text=text, **options)
        except Exception as e:
            logger.error(f"Error sending chunk {idx}/{total} to chat {chat_id}: {e}")

            try:
                await bot.send_message(chat_id=chat_id, text=chunk_failure_message(idx))
            except Exception as notify_error:
                logger.error(f"Failed to send error notification: {notify_error}")

            raise

        if idx < total and delay > 0:
            await asyncio.sleep(delay)
