from __future__ import annotations

from enum import Enum, auto


class Side(Enum):
    FIRST = auto()    # uppercase
    SECOND = auto()   # lowercase

    @property
    def opposite(self) -> Side:
        return Side.SECOND if self is Side.FIRST else Side.FIRST


class State(Enum):
    NORMAL = auto()
    ENHANCED = auto()
    DIMINISHED = auto()


# Textual prefix of each piece state
STATE_PREFIXES: dict[State, str] = {
    State.NORMAL: "",
    State.ENHANCED: "+",
    State.DIMINISHED: "-",
}

PREFIX_STATES: dict[str, State] = {prefix: state for state, prefix in STATE_PREFIXES.items()}
