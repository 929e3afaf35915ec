"""Question classification and system prompt selection.

A question is answered either conversationally (``chatty``) or as a worked
solution (``solution``). Callers may force a mode; otherwise it is guessed from
keywords in the question, with analytical keywords taking precedence over
greetings.
"""

import logging
from enum import Enum
from typing import Any, Optional, Union

from nelax.prompts import CHATTY_SYSTEM, SOLUTION_SYSTEM

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    CHATTY = "chatty"
    SOLUTION = "solution"


GREETING_KEYWORDS = ("hi", "hello", "hey", "how are you", "good morning", "good evening")
ANALYTICAL_KEYWORDS = ("?", "solve", "calculate", "explain", "why", "how", "find", "prove")

SYSTEM_PROMPTS: dict[Mode, str] = {
    Mode.CHATTY: CHATTY_SYSTEM,
    Mode.SOLUTION: SOLUTION_SYSTEM,
}


def normalize_question(question: Any) -> str:
    """Return ``question`` if it is a string, otherwise ``""``."""

    return question if isinstance(question, str) else ""


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def classify(explicit_mode: Optional[str], question: Any) -> Union[Mode, str]:
    """Pick the answering mode for ``question``.

    An explicit mode wins and is returned untouched, even if it is not one of
    the known modes. Unknown modes end up with the solution prompt in
    :func:`select_system_prompt`.
    """

    if explicit_mode:
        return explicit_mode

    text = normalize_question(question).lower()
    is_greeting = _contains_any(text, GREETING_KEYWORDS)
    is_analytical = _contains_any(text, ANALYTICAL_KEYWORDS)

    mode = Mode.CHATTY if is_greeting and not is_analytical else Mode.SOLUTION
    logger.debug("Detected mode %s (greeting=%s, analytical=%s)", mode.value, is_greeting, is_analytical)
    return mode


def select_system_prompt(mode: Union[Mode, str]) -> str:
    try:
        return SYSTEM_PROMPTS[Mode(mode)]
    except ValueError:
        return SYSTEM_PROMPTS[Mode.SOLUTION]
