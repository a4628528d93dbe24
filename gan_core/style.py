from __future__ import annotations

import re

from gan_core.enums import Side
from gan_core.errors import InvalidName, InvalidSide, InvalidStyle

_UPPER_PATTERN = re.compile(r"[A-Z][A-Z0-9]*")
_LOWER_PATTERN = re.compile(r"[a-z][a-z0-9]*")
_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*")


class StyleComponent:
    """Game tradition a piece belongs to, e.g. CHESS or shogi.

    The name is case-insensitive; the rendered letters are uppercase for the
    first player and lowercase for the second.
    """

    __slots__ = ("_name", "_side")

    def __init__(self, name: str, side: Side) -> None:
        if not isinstance(name, str):
            raise InvalidName(name)
        if not _NAME_PATTERN.fullmatch(name):
            raise InvalidStyle(name)
        if not isinstance(side, Side):
            raise InvalidSide(side)
        self._name = name.upper()
        self._side = side

    @classmethod
    def from_str(cls, text: str) -> StyleComponent:
        if not isinstance(text, str):
            raise InvalidStyle(text)
        if _UPPER_PATTERN.fullmatch(text):
            return cls(text, Side.FIRST)
        if _LOWER_PATTERN.fullmatch(text):
            return cls(text, Side.SECOND)
        raise InvalidStyle(text)

    @staticmethod
    def is_valid(text: object) -> bool:
        if not isinstance(text, str):
            return False
        return bool(_UPPER_PATTERN.fullmatch(text) or _LOWER_PATTERN.fullmatch(text))

    @property
    def name(self) -> str:
        return self._name

    @property
    def side(self) -> Side:
        return self._side

    @property
    def letters(self) -> str:
        return self._name if self._side is Side.FIRST else self._name.lower()

    @property
    def is_first_player(self) -> bool:
        return self._side is Side.FIRST

    @property
    def is_second_player(self) -> bool:
        return self._side is Side.SECOND

    def with_side(self, side: Side) -> StyleComponent:
        if side is self._side:
            return self
        return StyleComponent(self._name, side)

    def flip(self) -> StyleComponent:
        return StyleComponent(self._name, self._side.opposite)

    def with_name(self, name: str) -> StyleComponent:
        if isinstance(name, str) and name.upper() == self._name:
            return self
        return StyleComponent(name, self._side)

    def same_name(self, other: StyleComponent) -> bool:
        return isinstance(other, StyleComponent) and self._name == other._name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleComponent):
            return NotImplemented
        return self._name == other._name and self._side is other._side

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._name, self._side))

    def __repr__(self) -> str:
        return f"StyleComponent('{self.letters}')"

    def __str__(self) -> str:
        return self.letters
