# services/garden_planner/answers.py
# Coercion helpers for raw questionnaire answers and the multi-select toggle policy.

import logging
import math
from typing import Any, List, Optional, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]


def to_string_list(value: Any) -> List[str]:
    """Normalizes an answer to a list of strings. Absent or falsy values give an empty list."""
    if not value:
        return []
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [str(item) for item in value]
    return [str(value)]


def to_number(value: Any) -> Optional[Number]:
    """
    Returns numeric answers unchanged and parses textual ones.
    Blank text parses as 0. Anything else that doesn't parse to a finite number
    gives None; callers supply the default.
    """
    if isinstance(value, bool): # bool is an int subclass but not a scale answer
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0 # blank text reads as zero
        try:
            parsed = float(text)
        except ValueError:
            logger.debug(f"Ignoring non-numeric answer value: {value!r}")
            return None
        return parsed if math.isfinite(parsed) else None
    return None


def toggle_selection(current: List[str], value: str, max_count: Optional[int] = None) -> List[str]:
    """
    Toggles `value` in a multi-select answer and returns the new selection list.

    Selected values are removed. New values are appended; when `max_count` is set
    and already reached, the oldest selection is dropped first (FIFO window).
    The input list is left untouched.
    """
    selections = list(current)
    if value in selections:
        return [item for item in selections if item != value]
    if max_count and len(selections) >= max_count:
        evicted = selections.pop(0)
        logger.debug(f"Selection limit {max_count} reached, evicting '{evicted}' for '{value}'")
    selections.append(value)
    return selections
