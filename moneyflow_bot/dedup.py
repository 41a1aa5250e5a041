"""Bounded cache for dropping redelivered Telegram updates."""

import logging
from collections import OrderedDict

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 1000


class UpdateDeduplicator:
    """Remember recently handled messages by ``(chat_id, message_id)``.

    Webhook delivery is at-least-once, so the same message can arrive twice.
    The cache keeps the ``max_size`` most recent keys and evicts the oldest.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE):
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self._seen: OrderedDict[tuple[int, int], None] = OrderedDict()

    def __len__(self) -> int:
        return len(self._seen)

    def __contains__(self, key: tuple[int, int]) -> bool:
        return key in self._seen

    def seen(self, chat_id: int, message_id: int) -> bool:
        """Record the message and return True if it was already recorded."""
        key = (chat_id, message_id)
        if key in self._seen:
            self._seen.move_to_end(key)
            logger.debug(f"Duplicate message skipped: {chat_id}-{message_id}")
            return True

        self._seen[key] = None
        while len(self._seen) > self.max_size:
            self._seen.popitem(last=False)
        return False

    def clear(self) -> None:
        self._seen.clear()
