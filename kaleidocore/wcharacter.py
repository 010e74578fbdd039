"""Character classification and case conversion in the C locale."""

from __future__ import annotations

_SPACE = frozenset(b" \t\n\v\f\r")
_HEX = frozenset(b"0123456789abcdefABCDEF")


def _code(c: int | str) -> int:
    return ord(c) if isinstance(c, str) else c


def _like(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for a decimal digit."""
    return 48 <= _code(c) <= 57


def is_alpha_numeric(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True if the value fits into seven bits."""
    return (_code(c) & ~0x7F) == 0


def is_whitespace(c: int | str) -> bool:
    """True for a blank: space or tab."""
    return _code(c) in (0x20, 0x09)


def is_control(c: int | str) -> bool:
    """True for a control character."""
    code = _code(c)
    return 0 <= code <= 0x1F or code == 0x7F


def is_graph(c: int | str) -> bool:
    """True for a printable character other than space."""
    return 0x21 <= _code(c) <= 0x7E


def is_lower_case(c: int | str) -> bool:
    """True for a lower-case ASCII letter."""
    return 97 <= _code(c) <= 122


def is_upper_case(c: int | str) -> bool:
    """True for an upper-case ASCII letter."""
    return 65 <= _code(c) <= 90


def is_printable(c: int | str) -> bool:
    """True for a printable character, space included."""
    return 0x20 <= _code(c) <= 0x7E


def is_punct(c: int | str) -> bool:
    """True for a printable character that is neither space nor alphanumeric."""
    return is_graph(c) and not is_alpha_numeric(c)


def is_space(c: int | str) -> bool:
    """True for space, form feed, newline, carriage return and both tabs."""
    return _code(c) in _SPACE


def is_hexadecimal_digit(c: int | str) -> bool:
    """True for a hexadecimal digit in either case."""
    return _code(c) in _HEX


def to_ascii(c: int | str) -> int | str:
    """Clear every bit above the lowest seven."""
    return _like(c, _code(c) & 0x7F)


def to_lower_case(c: int | str) -> int | str:
    """Lower-case an ASCII letter; leave anything else unchanged."""
    code = _code(c)
    return _like(c, code + 32) if is_upper_case(code) else c


def to_upper_case(c: int | str) -> int | str:
    """Upper-case an ASCII letter; leave anything else unchanged."""
    code = _code(c)
    return _like(c, code - 32) if is_lower_case(code) else c