import math
import struct

import pytest

from kaleidocore.wstring import WString


def test_construct_from_text():
    s = WString("hello")
    assert str(s) == "hello"
    assert len(s) == 5
    assert bool(s)


def test_default_is_empty_and_valid():
    s = WString()
    assert str(s) == ""
    assert bool(s)
    assert len(s) == 0


def test_none_is_invalid():
    s = WString(None)
    assert not s
    assert len(s) == 0
    assert str(s) == ""


def test_construct_from_integers():
    assert WString(42) == "42"
    assert WString(-7) == "-7"


def test_construct_from_float_uses_placeholder():
    assert str(WString(1.5)) == "___"


def test_construct_from_unsupported_type():
    with pytest.raises(TypeError):
        WString([1, 2])


def test_copy_is_independent():
    a = WString("abc")
    b = WString(a)
    b.set_char_at(0, "z")
    assert str(a) == "abc"
    assert str(b) == "zbc"


def test_concat_text_and_numbers():
    s = WString("ab")
    assert s.concat("cd") is True
    assert s.concat(12) is True
    assert str(s) == "abcd12"


def test_concat_float_placeholder():
    s = WString("x")
    s.concat(2.25)
    assert str(s) == "x___"


def test_concat_failures_leave_text_unchanged():
    s = WString("ab")
    assert s.concat(None) is False
    assert s.concat(WString(None)) is False
    assert str(s) == "ab"


def test_concat_to_invalid():
    s = WString(None)
    assert s.concat("") is True
    assert not s
    assert s.concat("a") is True
    assert bool(s)
    assert str(s) == "a"


def test_operators_add():
    s = WString("ab")
    s += "cd"
    assert str(s) == "abcd"
    t = s + "ef"
    assert str(t) == "abcdef"
    assert str(s) == "abcd"
    assert str("zz" + WString("y")) == "zzy"


def test_add_invalid_operand_gives_invalid():
    result = WString("ab") + WString(None)
    assert not result


def test_compare_to_and_ordering():
    a, b = WString("apple"), WString("banana")
    assert a.compare_to(b) < 0
    assert b.compare_to(a) > 0
    assert a.compare_to("apple") == 0
    assert a < b
    assert b >= a
    assert sorted([b, a]) == [a, b]


def test_compare_prefix_sorts_first():
    assert WString("ab").compare_to("abc") < 0
    assert WString("abc").compare_to("ab") > 0


def test_compare_with_invalid():
    assert WString(None).compare_to(WString("A")) == -ord("A")
    assert WString("A").compare_to(WString(None)) == ord("A")
    assert WString(None).compare_to(WString(None)) == 0


def test_equals():
    s = WString("same")
    assert s.equals("same")
    assert s.equals(WString("same"))
    assert not s.equals("other")
    assert s == "same"
    assert s != "sam"
    assert WString("").equals(None)
    assert not s.equals(None)


def test_equals_ignore_case():
    assert WString("HeLLo").equals_ignore_case("hello")
    assert not WString("hello").equals_ignore_case("help!")
    assert not WString("hello").equals_ignore_case("hell")
    assert WString("").equals_ignore_case("")


def test_starts_and_ends_with():
    s = WString("keyboard")
    assert s.starts_with("key")
    assert not s.starts_with("board")
    assert s.starts_with("board", 3)
    assert not s.starts_with("board", 4)
    assert s.ends_with("board")
    assert not s.ends_with("key")
    assert not WString("ab").starts_with("abc")
    assert not WString(None).ends_with("")


def test_char_access():
    s = WString("abc")
    assert s.char_at(1) == "b"
    assert s[2] == "c"
    assert s.char_at(3) == "\0"
    s.set_char_at(10, "x")
    assert str(s) == "abc"
    s[0] = "x"
    assert str(s) == "xbc"


def test_get_bytes():
    s = WString("hello")
    assert s.get_bytes(3) == b"he"
    assert s.get_bytes(100, 1) == b"ello"
    assert s.get_bytes(0) == b""
    assert s.get_bytes(5, 9) == b""


@pytest.mark.parametrize("needle", ["l", "lo", "h", "z", "hello"])
def test_index_of_matches_str_find(needle):
    text = "hello world"
    assert WString(text).index_of(needle) == text.find(needle)
    assert WString(text).index_of(needle, 4) == text.find(needle, 4)


def test_index_of_from_past_end():
    assert WString("abc").index_of("a", 3) == -1


@pytest.mark.parametrize("needle", ["o", "l", "wor", "lo", "z"])
def test_last_index_of_matches_str_rfind(needle):
    text = "hello world"
    assert WString(text).last_index_of(needle) == text.rfind(needle)


def test_last_index_of_char_with_limit():
    s = WString("abcabc")
    assert s.last_index_of("b", 3) == "abcabc"[:4].rfind("b")
    assert s.last_index_of("b", 6) == -1


def test_last_index_of_string_clamps_limit():
    s = WString("abcabc")
    assert s.last_index_of(WString("bc"), 100) == "abcabc".rfind("bc")
    assert s.last_index_of("") == -1
    assert WString("ab").last_index_of("abc") == -1


def test_substring():
    s = WString("hello")
    assert str(s.substring(1, 3)) == "hello"[1:3]
    assert str(s.substring(3, 1)) == "hello"[1:3]
    assert str(s.substring(2)) == "hello"[2:]
    assert str(s.substring(1, 99)) == "hello"[1:]
    empty = s.substring(9)
    assert str(empty) == ""
    assert bool(empty)


def test_replace_char():
    s = WString("banana")
    s.replace("a", "o")
    assert str(s) == "banana".replace("a", "o")


@pytest.mark.parametrize(
    "text,find,repl",
    [("one two one", "one", "111"), ("aXbXc", "X", ""), ("abab", "ab", "xyz")],
)
def test_replace_string_matches_python(text, find, repl):
    s = WString(text)
    s.replace(WString(find), WString(repl))
    assert str(s) == text.replace(find, repl)


def test_replace_growing_overlap_works_backwards():
    s = WString("aaa")
    s.replace("aa", "xyz")
    assert str(s) == "axyz"


def test_replace_noop_cases():
    s = WString("abc")
    s.replace("", "zz")
    s.replace("q", "zz")
    assert str(s) == "abc"


def test_remove():
    s = WString("abcdef")
    s.remove(1, 2)
    assert str(s) == "adef"
    s.remove(2)
    assert str(s) == "ad"
    s.remove(5)
    s.remove(0, 0)
    assert str(s) == "ad"


def test_case_conversion_round_trip():
    s = WString("MiXeD 123!")
    s.to_upper_case()
    assert str(s) == "MIXED 123!"
    s.to_lower_case()
    assert str(s) == "mixed 123!"


def test_trim():
    s = WString(" \t hi there \r\n")
    s.trim()
    assert str(s) == "hi there"
    blank = WString("   ")
    blank.trim()
    assert str(blank) == ""


def test_to_int():
    assert WString("  -123abc").to_int() == -123
    assert WString("+45").to_int() == 45
    assert WString("abc").to_int() == 0
    assert WString(None).to_int() == 0


def test_to_double():
    assert WString("3.5e2").to_double() == float("3.5e2")
    assert WString("  -0.25xyz").to_double() == -0.25
    assert WString("nothing").to_double() == 0.0
    assert math.isinf(WString("inf").to_double())


def test_to_float_is_single_precision():
    value = WString("0.1").to_float()
    assert value == struct.unpack("f", struct.pack("f", 0.1))[0]
    assert math.isinf(WString("1e300").to_float())


def test_reserve_validates_invalid():
    s = WString(None)
    assert s.reserve(10) is True
    assert bool(s)
    assert str(s) == ""


def test_iteration():
    assert list(WString("abc")) == ["a", "b", "c"]
    assert list(WString(None)) == []