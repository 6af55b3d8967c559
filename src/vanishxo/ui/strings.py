"""User-visible strings.

Usage::

    from vanishxo.ui.strings import t

    print(t().status_turn.format(player="X"))   # "Player X's turn"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    window_title: str

    # ── Status line ──────────────────────────────────────────────────────
    status_turn: str  # "{player}'s turn"
    status_thinking: str  # "Computer ({player}) is thinking..."
    status_won: str  # "{player} wins!"
    status_draw: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    mode_label: str
    mode_human_vs_human: str
    mode_human_vs_computer: str
    btn_reset: str


_ENGLISH = Strings(
    window_title="Vanishing XO",
    status_turn="Player {player}'s turn",
    status_thinking="Computer ({player}) is thinking...",
    status_won="Player {player} wins! 🎉",
    status_draw="Draw! 🤝",
    mode_label="Mode:",
    mode_human_vs_human="Player vs Player",
    mode_human_vs_computer="Player vs Computer",
    btn_reset="New game",
)


def t() -> Strings:
    """Return the active string table."""
    return _ENGLISH
