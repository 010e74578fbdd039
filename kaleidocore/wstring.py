"""A mutable string type with the board library's semantics.

A ``WString`` may be *invalid*: it then holds no text at all and is false
in a boolean context, as happens when it is built from ``None`` or takes
part in a failed concatenation. Searches, comparisons and case changes
stop at the first NUL character, as the board's C string routines do.
"""

from __future__ import annotations

import math
import re
import struct
from typing import Iterator, Union

from .stdlib_ext import dtostrf, ltoa
from .wcharacter import to_lower_case as _lower_char
from .wcharacter import to_upper_case as _upper_char

_UNBOUNDED = 2**32 - 1
_C_SPACE = " \t\n\v\f\r"

_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_HEX_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    r"(?:[pP][+-]?[0-9]+)?)"
)
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

Operand = Union["WString", str, None]


def _cut(text: str) -> str:
    """Text up to, not including, the first NUL character."""
    nul = text.find("\0")
    return text if nul < 0 else text[:nul]


def _strcmp(a: str, b: str) -> int:
    a, b = _cut(a), _cut(b)
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    if len(a) == len(b):
        return 0
    return ord(a[len(b)]) if len(a) > len(b) else -ord(b[len(a)])


def _text_of(value: Operand) -> str | None:
    if value is None:
        return None
    if isinstance(value, WString):
        return value._text
    if isinstance(value, str):
        return value
    raise TypeError(f"expected a string, got {type(value).__name__}")


class WString:
    """Mutable text that may also be in an invalid, empty state."""

    __slots__ = ("_text",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: object = "", base_or_places: int | None = None) -> None:
        if value is None:
            self._text: str | None = None
        elif isinstance(value, WString):
            self._text = value._text
        elif isinstance(value, str):
            self._text = value
        elif isinstance(value, (bool, int)):
            self._text = ltoa(int(value), 10 if base_or_places is None else base_or_places)
        elif isinstance(value, float):
            places = 2 if base_or_places is None else base_or_places
            self._text = dtostrf(value, places + 2, places)
        else:
            raise TypeError(f"cannot build a string from {type(value).__name__}")

    # ---- basic protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._text) if self._text is not None else 0

    def __bool__(self) -> bool:
        return self._text is not None

    def __str__(self) -> str:
        return self._text or ""

    def __repr__(self) -> str:
        if self._text is None:
            return "WString(None)"
        return f"WString({self._text!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(self._text or "")

    def __getitem__(self, index: int) -> str:
        return self.char_at(index)

    def __setitem__(self, index: int, c: str) -> None:
        self.set_char_at(index, c)

    # ---- memory ---------------------------------------------------------

    def reserve(self, size: int) -> bool:
        """Make room for ``size`` characters; this also validates an invalid string."""
        if self._text is None:
            self._text = ""
        return True

    # ---- concatenation --------------------------------------------------

    def concat(self, value: object) -> bool:
        """Append ``value``; return False, leaving the text unchanged, on failure."""
        if value is None:
            return False
        if isinstance(value, WString):
            if value._text is None:
                return False
            addition = value._text
        elif isinstance(value, str):
            addition = value
        elif isinstance(value, (bool, int)):
            addition = ltoa(int(value), 10)
        elif isinstance(value, float):
            addition = dtostrf(value, 4, 2)
        else:
            raise TypeError(f"cannot concatenate {type(value).__name__}")
        if not addition:
            return True
        self._text = (self._text or "") + addition
        return True

    def __iadd__(self, value: object) -> WString:
        self.concat(value)
        return self

    def __add__(self, value: object) -> WString:
        result = WString(self)
        if not result.concat(value):
            result._text = None
        return result

    def __radd__(self, value: object) -> WString:
        if not isinstance(value, str):
            return NotImplemented
        return WString(value) + self

    # ---- comparison -----------------------------------------------------

    def compare_to(self, other: Operand) -> int:
        """Negative, zero or positive as this string sorts before, with or after ``other``."""
        mine, theirs = self._text, _text_of(other)
        if mine is None or theirs is None:
            if theirs:
                return -ord(theirs[0])
            if mine:
                return ord(mine[0])
            return 0
        return _strcmp(mine, theirs)

    def equals(self, other: Operand) -> bool:
        """True if both strings hold the same text."""
        if isinstance(other, WString):
            return len(self) == len(other) and self.compare_to(other) == 0
        theirs = _text_of(other)
        if len(self) == 0:
            return theirs is None or theirs[:1] in ("", "\0")
        assert self._text is not None
        if theirs is None:
            return self._text[0] == "\0"
        return _strcmp(self._text, theirs) == 0

    def equals_ignore_case(self, other: Operand) -> bool:
        """True if both strings match when ASCII case is ignored."""
        if other is self:
            return True
        theirs = _text_of(other) or ""
        mine = self._text or ""
        if len(mine) != len(theirs):
            return False
        if not mine:
            return True
        for a, b in zip(_cut(mine), theirs):
            if _lower_char(a) != _lower_char(b):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if other is None or isinstance(other, (WString, str)):
            return self.equals(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other: Operand) -> bool:
        return self.compare_to(other) < 0

    def __gt__(self, other: Operand) -> bool:
        return self.compare_to(other) > 0

    def __le__(self, other: Operand) -> bool:
        return self.compare_to(other) <= 0

    def __ge__(self, other: Operand) -> bool:
        return self.compare_to(other) >= 0

    def starts_with(self, prefix: Operand, offset: int | None = None) -> bool:
        """True if ``prefix`` occurs at ``offset`` (the start by default)."""
        mine, theirs = self._text, _text_of(prefix)
        if mine is None or theirs is None:
            return False
        if offset is None:
            offset = 0
        if len(mine) < len(theirs) or offset > len(mine) - len(theirs):
            return False
        segment = _cut(mine[offset:])[: len(theirs)]
        return segment == _cut(theirs)[: len(theirs)] and (
            len(segment) == len(theirs) or _cut(theirs) == segment
        )

    def ends_with(self, suffix: Operand) -> bool:
        """True if the text ends with ``suffix``."""
        mine, theirs = self._text, _text_of(suffix)
        if mine is None or theirs is None or len(mine) < len(theirs):
            return False
        return _strcmp(mine[len(mine) - len(theirs):], theirs) == 0

    # ---- character access -----------------------------------------------

    def char_at(self, index: int) -> str:
        """The character at ``index``, or NUL when out of range."""
        if self._text is None or not 0 <= index < len(self._text):
            return "\0"
        return self._text[index]

    def set_char_at(self, index: int, c: str) -> None:
        """Replace the character at ``index``; out-of-range indices are ignored."""
        if self._text is not None and 0 <= index < len(self._text):
            self._text = self._text[:index] + c[:1] + self._text[index + 1:]

    def get_bytes(self, bufsize: int, index: int = 0) -> bytes:
        """Up to ``bufsize`` - 1 characters from ``index``, as bytes."""
        if bufsize <= 0:
            return b""
        text = self._text or ""
        if index >= len(text):
            return b""
        n = min(bufsize - 1, len(text) - index)
        chunk = _cut(text[index:index + n])
        return chunk.encode("latin-1").ljust(n, b"\0")

    # ---- search ---------------------------------------------------------

    def index_of(self, target: Operand, from_index: int = 0) -> int:
        """Position of the first ``target`` at or after ``from_index``, or -1."""
        text = self._text or ""
        if from_index < 0 or from_index >= len(text):
            return -1
        needle = _cut(_text_of(target) or "") if target != "\0" else "\0"
        haystack = _cut(text[from_index:])
        if needle == "\0":
            return from_index + len(haystack)
        found = haystack.find(needle)
        return -1 if found < 0 else from_index + found

    def last_index_of(self, target: Operand, from_index: int | None = None) -> int:
        """Position of the last ``target`` starting at or before ``from_index``, or -1.

        A one-character ``str`` is searched for as a single character.
        """
        text = self._text or ""
        if isinstance(target, str) and len(target) == 1:
            if from_index is None:
                from_index = len(text) - 1
            if from_index < 0 or from_index >= len(text):
                return -1
            segment = _cut(text[: from_index + 1])
            if target == "\0":
                return len(segment)
            return segment.rfind(target)

        needle_full = _text_of(target) or ""
        if from_index is None:
            from_index = len(text) - len(needle_full)
        if not needle_full or not text or len(needle_full) > len(text):
            return -1
        if from_index < 0 or from_index >= len(text):
            from_index = len(text) - 1
        haystack = _cut(text)
        needle = _cut(needle_full)
        found = -1
        pos = haystack.find(needle)
        while 0 <= pos <= from_index:
            found = pos
            pos = haystack.find(needle, pos + 1)
        return found

    def substring(self, begin: int, end: int | None = None) -> WString:
        """A new string holding the characters from ``begin`` up to ``end``."""
        text = self._text or ""
        if end is None:
            end = len(text)
        if begin > end:
            begin, end = end, begin
        if begin >= len(text):
            return WString("")
        return WString(_cut(text[begin:min(end, len(text))]))

    # ---- modification ---------------------------------------------------

    def replace(self, find: Operand, replacement: Operand) -> None:
        """Replace every occurrence of ``find`` with ``replacement`` in place."""
        if self._text is None:
            return
        if (
            isinstance(find, str)
            and isinstance(replacement, str)
            and len(find) == 1
            and len(replacement) == 1
        ):
            head = _cut(self._text)
            self._text = head.replace(find, replacement) + self._text[len(head):]
            return

        needle = _text_of(find) or ""
        repl = _text_of(replacement) or ""
        if not self._text or not needle:
            return
        if len(repl) <= len(needle):
            self._text = self._text.replace(needle, repl)
            return
        if needle not in self._text:
            return
        # Growing replacements work backwards from the end, as the board does.
        index = len(self._text) - 1
        while index >= 0:
            index = self.last_index_of(WString(needle), index)
            if index < 0:
                break
            self._text = self._text[:index] + repl + self._text[index + len(needle):]
            index -= 1

    def remove(self, index: int, count: int | None = None) -> None:
        """Delete ``count`` characters from ``index`` (all of the rest by default)."""
        text = self._text
        if text is None or index < 0 or index >= len(text):
            return
        if count is None:
            count = _UNBOUNDED
        if count <= 0:
            return
        count = min(count, len(text) - index)
        self._text = text[:index] + text[index + count:]

    def _map_chars(self, convert) -> None:
        if self._text is None:
            return
        head = _cut(self._text)
        self._text = "".join(convert(c) for c in head) + self._text[len(head):]

    def to_lower_case(self) -> None:
        """Lower-case the ASCII letters in place."""
        self._map_chars(_lower_char)

    def to_upper_case(self) -> None:
        """Upper-case the ASCII letters in place."""
        self._map_chars(_upper_char)

    def trim(self) -> None:
        """Strip leading and trailing white space in place."""
        if self._text:
            self._text = self._text.strip(_C_SPACE)

    # ---- conversion -----------------------------------------------------

    def to_int(self) -> int:
        """The leading decimal integer of the text, or 0."""
        if self._text is None:
            return 0
        match = _INT_RE.match(_cut(self._text))
        return int(match.group(1)) if match else 0

    def to_double(self) -> float:
        """The leading floating-point number of the text, or 0.0."""
        if self._text is None:
            return 0.0
        text = _cut(self._text)
        hex_match = _HEX_FLOAT_RE.match(text)
        if hex_match:
            return float.fromhex(hex_match.group(1))
        match = _FLOAT_RE.match(text)
        return float(match.group(1)) if match else 0.0

    def to_float(self) -> float:
        """The leading number of the text at single precision."""
        value = self.to_double()
        try:
            return struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)