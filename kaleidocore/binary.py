"""Binary literal names of the form ``B0101`` for byte values."""

from __future__ import annotations

import re

_NAME_RE = re.compile(r"B([01]{1,8})")

BINARY_CONSTANTS: dict[str, int] = {
    f"B{value:0{width}b}": value
    for width in range(1, 9)
    for value in range(1 << width)
}


def binary_literal(name: str) -> int:
    """The value of a name made of ``B`` and one to eight binary digits."""
    match = _NAME_RE.fullmatch(name)
    if match is None:
        raise ValueError(f"not a binary literal name: {name!r}")
    return int(match.group(1), 2)


def binary_name(value: int, width: int | None = None) -> str:
    """The literal name of ``value`` padded to ``width`` digits (shortest by default)."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"value {value} is outside 0..255")
    needed = max(value.bit_length(), 1)
    if width is None:
        width = needed
    if not needed <= width <= 8:
        raise ValueError(f"width {width} cannot hold {value} in at most 8 digits")
    return f"B{value:0{width}b}"