"""
Model prioritizer.

Picks the ORDER in which catalog models are tried for one conversation.
Long conversations lead with the Pro models, short ones with Flash.
Both orders are permutations of MODEL_CATALOG and keep the oldest model last.
"""

import logging
from typing import Optional

from google.genai import types

from gemini.config import CHAR_THRESHOLD, MODEL_CATALOG

logger = logging.getLogger(__name__)

# Catalog indices per regime: 0=2.5-pro, 1=2.5-flash, 2=1.5-pro, 3=1.5-flash, 4=pro
PRIORITY_TABLE = {
    "long": (0, 2, 1, 3, 4),
    "short": (1, 3, 0, 2, 4),
}


def count_conversation_chars(messages: list[types.Content]) -> int:
    """Total length of every text part across all messages."""
    return sum(
        len(part.text or "")
        for message in messages
        for part in (message.parts or [])
    )


def choose_model_order(total_chars: int, threshold: Optional[int] = None) -> list[str]:
    """Return every catalog model exactly once, in the order to try them."""
    if threshold is None:
        threshold = CHAR_THRESHOLD

    regime = "long" if total_chars > threshold else "short"
    order = [MODEL_CATALOG[i] for i in PRIORITY_TABLE[regime]]

    logger.info(
        "Conversation is %s (%d chars, threshold %d) — trying %s first",
        regime, total_chars, threshold, order[0],
    )
    return order
