from __future__ import annotations

from typing import Any

from gan_core.enums import Side, State
from gan_core.errors import InvalidField, InvalidSide, InvalidState
from gan_core.grammar import DEFAULT_GRAMMAR, SEPARATOR, Grammar
from gan_core.piece import PieceComponent
from gan_core.style import StyleComponent


class CompositeIdentifier:
    """Format: STYLE:PIECE, e.g. CHESS:K, shogi:+p.

    The style and the piece always belong to the same side. Every construction
    path checks it, including the constructor taking pre-built components.
    Transformations return a new identifier, or ``self`` when nothing changes.

    Terminal identifiers such as CHESS:K' only parse back with a grammar built
    from ``GrammarConfig(allow_terminal_marker=True)``.
    """

    __slots__ = ("_style", "_piece")

    def __init__(self, style: StyleComponent, piece: PieceComponent) -> None:
        if not isinstance(style, StyleComponent):
            raise InvalidField("style", style, "a StyleComponent")
        if not isinstance(piece, PieceComponent):
            raise InvalidField("piece", piece, "a PieceComponent")
        Grammar.check_sides(style, piece)
        self._style = style
        self._piece = piece

    @classmethod
    def from_str(cls, value: str, grammar: Grammar | None = None) -> CompositeIdentifier:
        grammar = grammar or DEFAULT_GRAMMAR
        style, piece = grammar.parse_components(value)
        return cls(style, piece)

    @classmethod
    def from_parts(
        cls,
        style: str,
        piece: str,
        grammar: Grammar | None = None,
    ) -> CompositeIdentifier:
        grammar = grammar or DEFAULT_GRAMMAR
        return cls(grammar.parse_style(style), grammar.parse_piece(piece))

    @classmethod
    def from_params(
        cls,
        name: str,
        type: str,
        side: Side,
        state: State = State.NORMAL,
        terminal: bool = False,
    ) -> CompositeIdentifier:
        return cls(StyleComponent(name, side), PieceComponent(type, side, state, terminal))

    @classmethod
    def from_dict(cls, d: dict) -> CompositeIdentifier:
        if not isinstance(d, dict):
            raise InvalidField("dict", d, "a dict")
        for key in ("name", "type", "side"):
            if key not in d:
                raise InvalidField(key, None, "a value")
        try:
            side = Side[d["side"]]
        except (KeyError, TypeError):
            raise InvalidSide(d["side"]) from None
        try:
            state = State[d.get("state", "NORMAL")]
        except (KeyError, TypeError):
            raise InvalidState(d.get("state")) from None
        return cls.from_params(d["name"], d["type"], side, state, d.get("terminal", False))

    @staticmethod
    def is_valid(value: object, grammar: Grammar | None = None) -> bool:
        return (grammar or DEFAULT_GRAMMAR).is_valid(value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "side": self.side.name,
            "state": self.state.name,
            "terminal": self.terminal,
        }

    # --- Components ---

    @property
    def style(self) -> StyleComponent:
        return self._style

    @property
    def piece(self) -> PieceComponent:
        return self._piece

    def to_style_str(self) -> str:
        return str(self._style)

    def to_piece_str(self) -> str:
        return str(self._piece)

    # --- Attributes ---

    @property
    def name(self) -> str:
        return self._style.name

    @property
    def type(self) -> str:
        return self._piece.type

    @property
    def side(self) -> Side:
        return self._piece.side

    @property
    def state(self) -> State:
        return self._piece.state

    @property
    def terminal(self) -> bool:
        return self._piece.terminal

    @property
    def is_normal(self) -> bool:
        return self._piece.is_normal

    @property
    def is_enhanced(self) -> bool:
        return self._piece.is_enhanced

    @property
    def is_diminished(self) -> bool:
        return self._piece.is_diminished

    @property
    def is_first_player(self) -> bool:
        return self._piece.is_first_player

    @property
    def is_second_player(self) -> bool:
        return self._piece.is_second_player

    @property
    def is_terminal(self) -> bool:
        return self._piece.is_terminal

    # --- Transformations ---

    def _with_piece(self, piece: PieceComponent) -> CompositeIdentifier:
        if piece is self._piece:
            return self
        return CompositeIdentifier(self._style, piece)

    def enhance(self) -> CompositeIdentifier:
        return self._with_piece(self._piece.enhance())

    def diminish(self) -> CompositeIdentifier:
        return self._with_piece(self._piece.diminish())

    def normalize(self) -> CompositeIdentifier:
        return self._with_piece(self._piece.normalize())

    def with_state(self, state: State) -> CompositeIdentifier:
        return self._with_piece(self._piece.with_state(state))

    def with_type(self, type: str) -> CompositeIdentifier:
        return self._with_piece(self._piece.with_type(type))

    def with_terminal(self, terminal: bool) -> CompositeIdentifier:
        return self._with_piece(self._piece.with_terminal(terminal))

    def with_name(self, name: str) -> CompositeIdentifier:
        style = self._style.with_name(name)
        if style is self._style:
            return self
        return CompositeIdentifier(style, self._piece)

    with_style = with_name

    def with_side(self, side: Side) -> CompositeIdentifier:
        if side is self.side:
            return self
        # Both components move together, never one at a time
        return CompositeIdentifier(self._style.with_side(side), self._piece.with_side(side))

    def flip(self) -> CompositeIdentifier:
        return self.with_side(self.side.opposite)

    # --- Comparisons ---

    def same_style(self, other: CompositeIdentifier) -> bool:
        return isinstance(other, CompositeIdentifier) and self._style.same_name(other._style)

    def cross_style(self, other: CompositeIdentifier) -> bool:
        return isinstance(other, CompositeIdentifier) and not self._style.same_name(other._style)

    def same_side(self, other: CompositeIdentifier) -> bool:
        return isinstance(other, CompositeIdentifier) and self._piece.same_side(other._piece)

    def same_type(self, other: CompositeIdentifier) -> bool:
        return isinstance(other, CompositeIdentifier) and self._piece.same_type(other._piece)

    def same_state(self, other: CompositeIdentifier) -> bool:
        return isinstance(other, CompositeIdentifier) and self._piece.same_state(other._piece)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeIdentifier):
            return NotImplemented
        return self._style == other._style and self._piece == other._piece

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._style, self._piece))

    def __repr__(self) -> str:
        return f"CompositeIdentifier('{self}')"

    def __str__(self) -> str:
        return f"{self._style}{SEPARATOR}{self._piece}"
