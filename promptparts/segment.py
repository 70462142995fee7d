"""Styled text segments that make up a prompt module."""

from __future__ import annotations

from dataclasses import dataclass

_RESET = "\x1b[0m"

_COLOR_INDEX = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "purple": 5,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

ColorSpec = str | int | tuple[int, int, int] | None


def _color_code(color: ColorSpec, base: int) -> str | None:
    """Return the SGR parameter for a colour; `base` is 30 for fore, 40 for back."""
    if color is None:
        return None
    if isinstance(color, str):
        try:
            return str(base + _COLOR_INDEX[color.lower()])
        except KeyError:
            raise ValueError(f"unknown colour name: {color!r}") from None
    if isinstance(color, int):
        if not 0 <= color <= 255:
            raise ValueError(f"fixed colour out of range: {color}")
        return f"{base + 8};5;{color}"
    if isinstance(color, tuple) and len(color) == 3:
        if not all(0 <= part <= 255 for part in color):
            raise ValueError(f"RGB colour out of range: {color}")
        r, g, b = color
        return f"{base + 8};2;{r};{g};{b}"
    raise ValueError(f"unsupported colour specification: {color!r}")


@dataclass(frozen=True)
class Style:
    """Terminal text attributes and colours."""

    foreground: ColorSpec = None
    background: ColorSpec = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    def __post_init__(self) -> None:
        # Validate colours eagerly so a bad style fails where it is made.
        _color_code(self.foreground, 30)
        _color_code(self.background, 40)

    def _codes(self) -> list[str]:
        flags = (
            (self.bold, "1"),
            (self.dimmed, "2"),
            (self.italic, "3"),
            (self.underline, "4"),
            (self.blink, "5"),
            (self.reverse, "7"),
            (self.hidden, "8"),
            (self.strikethrough, "9"),
        )
        codes = [code for enabled, code in flags if enabled]
        codes.extend(
            code
            for code in (
                _color_code(self.background, 40),
                _color_code(self.foreground, 30),
            )
            if code is not None
        )
        return codes

    def paint(self, text: str) -> str:
        """Wrap `text` in the escape sequences of this style."""
        codes = self._codes()
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


@dataclass
class Segment:
    """A single configurable element of a module, such as a version number.

    With no style of its own a segment inherits the module's style.
    """

    name: str
    style: Style | None = None
    value: str = ""

    def ansi_string(self) -> str:
        """The value painted in the segment's style, without prefix or suffix."""
        if self.style is None:
            return self.value
        return self.style.paint(self.value)

    def is_empty(self) -> bool:
        """True when the value holds nothing but whitespace."""
        return not self.value.strip()

    def __str__(self) -> str:
        return self.ansi_string()