from __future__ import annotations

from gan_core.config import GrammarConfig
from gan_core.errors import InvalidField, InvalidSeparator, SideMismatch
from gan_core.piece import PieceComponent
from gan_core.style import StyleComponent

SEPARATOR = ":"


class Grammar:
    """Validator for STYLE:PIECE identifiers.

    ``is_valid`` answers yes/no and never raises. ``parse_components`` runs the
    same checks in the same order and raises the error of the first failing
    one: separator, style, piece, then side consistency.
    """

    __slots__ = ("_config",)

    def __init__(self, config: GrammarConfig | None = None) -> None:
        self._config = config if config is not None else GrammarConfig()

    @property
    def config(self) -> GrammarConfig:
        return self._config

    @property
    def allow_terminal(self) -> bool:
        return self._config.allow_terminal_marker

    def split(self, text: str) -> tuple[str, str]:
        parts = text.split(SEPARATOR)
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise InvalidSeparator(text, SEPARATOR)
        return parts[0], parts[1]

    def is_valid(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        parts = text.split(SEPARATOR)
        if len(parts) != 2:
            return False
        style_text, piece_text = parts
        if not StyleComponent.is_valid(style_text):
            return False
        if not PieceComponent.is_valid(piece_text, self.allow_terminal):
            return False
        # Both halves encode the side in their letter case
        return style_text[0].isupper() == piece_text.lstrip("+-")[0].isupper()

    def parse_style(self, text: str) -> StyleComponent:
        return StyleComponent.from_str(text)

    def parse_piece(self, text: str) -> PieceComponent:
        return PieceComponent.from_str(text, self.allow_terminal)

    def parse_components(self, text: str) -> tuple[StyleComponent, PieceComponent]:
        if not isinstance(text, str):
            raise InvalidField("text", text, "a str")
        style_text, piece_text = self.split(text)
        style = self.parse_style(style_text)
        piece = self.parse_piece(piece_text)
        self.check_sides(style, piece)
        return style, piece

    @staticmethod
    def check_sides(style: StyleComponent, piece: PieceComponent) -> None:
        if style.side is not piece.side:
            raise SideMismatch(style.side, piece.side)

    def __repr__(self) -> str:
        return f"Grammar(allow_terminal_marker={self.allow_terminal})"


DEFAULT_GRAMMAR = Grammar()
