"""Daily lesson content.

Each authored lesson lives in ``day<N>.txt`` next to this module. Days without
a file get a "still being prepared" placeholder instead.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from moneyflow_bot.messages import SUPPORT_CONTACT

logger = logging.getLogger(__name__)

LESSONS_DIR = Path(__file__).parent


@lru_cache(maxsize=None)
def load_lesson(day: int) -> Optional[str]:
    """Return the authored text for ``day``, or None if there is none."""
    path = LESSONS_DIR / f"day{day}.txt"
    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8").strip()


def placeholder_lesson(day: int) -> str:
    return (
        f"🎯 ថ្ងៃទី {day} - កំពុងរៀបចំ\n\n"
        f"🔄 មេរៀនថ្ងៃទី{day} កំពុងរៀបចំ។ សូមសាកម្តងទៀតនៅពេលក្រោយ។\n\n"
        f"📞 ត្រូវការជំនួយ? ទាក់ទងមក {SUPPORT_CONTACT}"
    )


def get_lesson(day: int) -> str:
    content = load_lesson(day)
    if content is None:
        logger.info(f"No lesson authored for day {day}, sending placeholder")
        return placeholder_lesson(day)
    return content


__all__ = ["get_lesson", "load_lesson", "placeholder_lesson"]
