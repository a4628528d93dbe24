from __future__ import annotations

import re

from gan_core.enums import PREFIX_STATES, STATE_PREFIXES, Side, State
from gan_core.errors import InvalidField, InvalidPiece, InvalidSide, InvalidState, InvalidType

TERMINAL_MARKER = "'"

_PATTERN = re.compile(r"(?P<prefix>[-+]?)(?P<letter>[A-Za-z])")
_TERMINAL_PATTERN = re.compile(r"(?P<prefix>[-+]?)(?P<letter>[A-Za-z])(?P<terminal>'?)")


def _match(text: object, allow_terminal: bool) -> re.Match | None:
    if not isinstance(text, str):
        return None
    pattern = _TERMINAL_PATTERN if allow_terminal else _PATTERN
    return pattern.fullmatch(text)


class PieceComponent:
    """Piece type, state and owner.

    Format: [+-]LETTER, optionally followed by the terminal marker when the
    grammar allows it. Uppercase letters belong to the first player.

    Transformations return ``self`` when the requested value already holds,
    so callers may rely on ``piece.with_state(piece.state) is piece``.

    A terminal piece (``with_terminal(True)``) renders as e.g. ``K'`` and only
    parses back with ``allow_terminal=True``.
    """

    __slots__ = ("_type", "_side", "_state", "_terminal")

    def __init__(
        self,
        type: str,
        side: Side,
        state: State = State.NORMAL,
        terminal: bool = False,
    ) -> None:
        if not (isinstance(type, str) and len(type) == 1 and type.isascii() and type.isalpha()):
            raise InvalidType(type)
        if not isinstance(side, Side):
            raise InvalidSide(side)
        if not isinstance(state, State):
            raise InvalidState(state)
        if not isinstance(terminal, bool):
            raise InvalidField("terminal", terminal, "a bool")
        self._type = type.upper()
        self._side = side
        self._state = state
        self._terminal = terminal

    @classmethod
    def from_str(cls, text: str, allow_terminal: bool = False) -> PieceComponent:
        match = _match(text, allow_terminal)
        if match is None:
            raise InvalidPiece(text)
        letter = match.group("letter")
        return cls(
            letter,
            Side.FIRST if letter.isupper() else Side.SECOND,
            PREFIX_STATES[match.group("prefix")],
            terminal=bool(allow_terminal and match.group("terminal")),
        )

    @staticmethod
    def is_valid(text: object, allow_terminal: bool = False) -> bool:
        return _match(text, allow_terminal) is not None

    @property
    def type(self) -> str:
        return self._type

    @property
    def side(self) -> Side:
        return self._side

    @property
    def state(self) -> State:
        return self._state

    @property
    def terminal(self) -> bool:
        return self._terminal

    @property
    def letter(self) -> str:
        return self._type if self._side is Side.FIRST else self._type.lower()

    @property
    def is_normal(self) -> bool:
        return self._state is State.NORMAL

    @property
    def is_enhanced(self) -> bool:
        return self._state is State.ENHANCED

    @property
    def is_diminished(self) -> bool:
        return self._state is State.DIMINISHED

    @property
    def is_first_player(self) -> bool:
        return self._side is Side.FIRST

    @property
    def is_second_player(self) -> bool:
        return self._side is Side.SECOND

    @property
    def is_terminal(self) -> bool:
        return self._terminal

    # --- Transformations ---

    def enhance(self) -> PieceComponent:
        return self.with_state(State.ENHANCED)

    def diminish(self) -> PieceComponent:
        return self.with_state(State.DIMINISHED)

    def normalize(self) -> PieceComponent:
        return self.with_state(State.NORMAL)

    def with_state(self, state: State) -> PieceComponent:
        if state is self._state:
            return self
        return PieceComponent(self._type, self._side, state, self._terminal)

    def with_type(self, type: str) -> PieceComponent:
        if isinstance(type, str) and type.upper() == self._type:
            return self
        return PieceComponent(type, self._side, self._state, self._terminal)

    def with_side(self, side: Side) -> PieceComponent:
        if side is self._side:
            return self
        return PieceComponent(self._type, side, self._state, self._terminal)

    def flip(self) -> PieceComponent:
        return PieceComponent(self._type, self._side.opposite, self._state, self._terminal)

    def with_terminal(self, terminal: bool) -> PieceComponent:
        if terminal is self._terminal:
            return self
        return PieceComponent(self._type, self._side, self._state, terminal)

    # --- Comparisons ---

    def same_type(self, other: PieceComponent) -> bool:
        return isinstance(other, PieceComponent) and self._type == other._type

    def same_side(self, other: PieceComponent) -> bool:
        return isinstance(other, PieceComponent) and self._side is other._side

    def same_state(self, other: PieceComponent) -> bool:
        return isinstance(other, PieceComponent) and self._state is other._state

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PieceComponent):
            return NotImplemented
        return (
            self._type == other._type
            and self._side is other._side
            and self._state is other._state
            and self._terminal == other._terminal
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._type, self._side, self._state, self._terminal))

    def __repr__(self) -> str:
        return f"PieceComponent('{self}')"

    def __str__(self) -> str:
        suffix = TERMINAL_MARKER if self._terminal else ""
        return f"{STATE_PREFIXES[self._state]}{self.letter}{suffix}"
