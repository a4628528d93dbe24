from __future__ import annotations

from typing import Any

from gan_core.enums import Side


class NotationError(ValueError):
    pass


class InvalidStyle(NotationError):
    def __init__(self, text: Any) -> None:
        super().__init__(f"Invalid style component: {text!r}")
        self.text = text


class InvalidPiece(NotationError):
    def __init__(self, text: Any) -> None:
        super().__init__(f"Invalid piece component: {text!r}")
        self.text = text


class InvalidSeparator(NotationError):
    def __init__(self, text: str, separator: str = ":") -> None:
        super().__init__(
            f"Invalid identifier: {text!r}, expected exactly one {separator!r} "
            f"between a style and a piece"
        )
        self.text = text
        self.separator = separator


class SideMismatch(NotationError):
    """Style and piece components belong to different players."""

    def __init__(self, style_side: Side, piece_side: Side) -> None:
        super().__init__(
            f"Style and piece must belong to the same side: "
            f"style side={style_side.name}, piece side={piece_side.name}"
        )
        self.style_side = style_side
        self.piece_side = piece_side


class InvalidField(NotationError):
    def __init__(self, field: str, value: Any, expected: str = "") -> None:
        message = f"Invalid {field}: {value!r}"
        if expected:
            message += f", expected {expected}"
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidName(InvalidField):
    def __init__(self, value: Any) -> None:
        super().__init__("name", value, "a str")


class InvalidType(InvalidField):
    def __init__(self, value: Any) -> None:
        super().__init__("type", value, "a single ASCII letter")


class InvalidSide(InvalidField):
    def __init__(self, value: Any) -> None:
        super().__init__("side", value, "Side.FIRST or Side.SECOND")


class InvalidState(InvalidField):
    def __init__(self, value: Any) -> None:
        super().__init__("state", value, "State.NORMAL, State.ENHANCED or State.DIMINISHED")
