"""Integer and floating-point to text conversions of the board's C library."""

from __future__ import annotations

_INT_BITS = 32
_LONG_BITS = 64


def _wrap_signed(val: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((val + half) % (1 << bits)) - half


def _wrap_unsigned(val: int, bits: int) -> int:
    return val & ((1 << bits) - 1)


def _digits(magnitude: int, radix: int) -> str:
    # Each digit is taken modulo the radix while the value steps down by ten,
    # exactly as the board library does; only radix 10 gives ordinary numerals.
    out = []
    while True:
        out.append(chr(magnitude % radix + ord("0")))
        magnitude //= 10
        if magnitude <= 0:
            break
    return "".join(reversed(out))


def _signed_to_a(val: int, radix: int) -> str:
    if val < 0:
        return "-" + _digits(-val, radix)
    return _digits(val, radix)


def itoa(val: int, radix: int) -> str:
    """Convert a 32-bit signed integer to text."""
    return _signed_to_a(_wrap_signed(val, _INT_BITS), radix)


def ltoa(val: int, radix: int) -> str:
    """Convert a 64-bit signed integer to text."""
    return _signed_to_a(_wrap_signed(val, _LONG_BITS), radix)


def utoa(val: int, radix: int) -> str:
    """Convert a 32-bit unsigned integer to text."""
    return _digits(_wrap_unsigned(val, _INT_BITS), radix)


def ultoa(val: int, radix: int) -> str:
    """Convert a 64-bit unsigned integer to text."""
    return _digits(_wrap_unsigned(val, _LONG_BITS), radix)


_FLOAT_PLACEHOLDER = "___"


def dtostre(val: float, prec: int, flags: int) -> str:
    """Placeholder text for a number in exponent form."""
    return _FLOAT_PLACEHOLDER


def dtostrf(val: float, width: int, prec: int) -> str:
    """Placeholder text for a number in fixed-point form."""
    return _FLOAT_PLACEHOLDER