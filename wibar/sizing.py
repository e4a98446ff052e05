"""
Wibar Size Resolution

Bar sizes are given either as absolute lengths or as integer percentages of
the screen ("50%").
"""

from __future__ import annotations
import math
import re
from typing import Optional

from .errors import InvalidSizeError

_PERCENT = re.compile(r"\s*(\d+)\s*%\s*")


def parse_percentage(value) -> Optional[int]:
    """Return the percentage in a size token, or None if it is not one."""
    if not isinstance(value, str):
        return None
    match = _PERCENT.fullmatch(value)
    return int(match.group(1)) if match else None


def resolve_size(value, screen_length: int) -> int:
    """Resolve a size token to an absolute length.

    Args:
        value: An int/float, a numeric string or an integer percentage
        screen_length: Screen dimension percentages are relative to

    Returns:
        The absolute length

    Raises:
        InvalidSizeError: if the value cannot be resolved or is negative
    """
    if isinstance(value, bool):
        raise InvalidSizeError(value)

    percent = parse_percentage(value)
    if percent is not None:
        return int(math.ceil(screen_length * percent / 100))

    try:
        length = int(math.ceil(float(value)))
    except (TypeError, ValueError, OverflowError):
        raise InvalidSizeError(value) from None

    if length < 0:
        raise InvalidSizeError(value, "must not be negative")
    return length
