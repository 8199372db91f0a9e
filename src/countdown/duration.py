"""Whole-second duration value type shown as `MM:SS`."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Duration:
    """Immutable non-negative count of whole seconds."""
    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"duration must not be negative, got: {self.value}")

    @property
    def minutes(self) -> int:
        return self.value // 60

    @property
    def seconds(self) -> int:
        return self.value % 60

    def format(self) -> str:
        """Format as zero-padded `MM:SS`."""
        return f"{self.minutes:02d}:{self.seconds:02d}"

    def __str__(self) -> str:
        return self.format()
