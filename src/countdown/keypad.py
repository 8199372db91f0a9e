"""Shift-register keypad edits over the `MM:SS` digits of a duration.

A new digit enters at the seconds ones place and every other digit moves one
place to the left. Deleting moves the digits back to the right and fills the
leading place with zero. Once the minutes already exceed `MAX_ENTRY_MINUTES`
the register is full and further digits are refused, so four digits always
fit and a fifth is ignored.
"""

from __future__ import annotations

from typing import Optional

from .constants import MAX_ENTRY_MINUTES
from .duration import Duration


def enter_digit(duration: Duration, digit: int) -> Optional[Duration]:
    """Shift `digit` in at the ones place; return None when the register is full."""
    if not 0 <= digit <= 9:
        raise ValueError(f"digit must be in [0, 9], got: {digit}")

    minutes = duration.minutes
    if minutes > MAX_ENTRY_MINUTES:
        return None

    seconds_tens, seconds_ones = divmod(duration.seconds, 10)
    return Duration((minutes * 10 + seconds_tens) * 60 + seconds_ones * 10 + digit)


def delete_digit(duration: Duration) -> Duration:
    """Drop the seconds ones digit and shift the rest right."""
    minutes_tens, minutes_ones = divmod(duration.minutes, 10)
    seconds_tens = duration.seconds // 10
    return Duration(minutes_tens * 60 + minutes_ones * 10 + seconds_tens)
