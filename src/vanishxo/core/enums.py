"""Core enumerations for the vanishing-marker domain."""

from __future__ import annotations

from enum import IntEnum


class Marker(IntEnum):
    """Player marker."""

    X = 0
    O = 1  # noqa: E741

    @property
    def opposite(self) -> Marker:
        return Marker(1 - self.value)

    def __str__(self) -> str:
        return self.name
