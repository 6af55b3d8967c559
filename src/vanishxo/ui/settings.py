"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

from vanishxo.game.interfaces import GameMode


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Game
    mode: GameMode = GameMode.HUMAN_VS_HUMAN

    # Computer opponent
    ai_delay_ms: int = 500
    ai_seed: int | None = None  # fixed seed → reproducible corner/edge picks

    # Board
    show_vanish_hint: bool = True
