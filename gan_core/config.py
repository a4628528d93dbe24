from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GrammarConfig:
    # Accept the trailing "'" marker on pieces whose loss ends the game
    allow_terminal_marker: bool = False
