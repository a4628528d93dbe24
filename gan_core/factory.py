from __future__ import annotations

from gan_core.enums import Side, State
from gan_core.identifier import CompositeIdentifier
from gan_core.piece import PieceComponent
from gan_core.style import StyleComponent


class IdentifierFactory:
    """Builds identifiers for one player playing one style."""

    def __init__(self, name: str, side: Side) -> None:
        self.style = StyleComponent(name, side)

    @property
    def name(self) -> str:
        return self.style.name

    @property
    def side(self) -> Side:
        return self.style.side

    def opponent(self, name: str | None = None) -> IdentifierFactory:
        return IdentifierFactory(name if name is not None else self.name, self.side.opposite)

    def piece(
        self,
        type: str,
        state: State = State.NORMAL,
        terminal: bool = False,
    ) -> CompositeIdentifier:
        return CompositeIdentifier(self.style, PieceComponent(type, self.side, state, terminal))

    def enhanced(self, type: str) -> CompositeIdentifier:
        return self.piece(type, State.ENHANCED)

    def diminished(self, type: str) -> CompositeIdentifier:
        return self.piece(type, State.DIMINISHED)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.style})"
