import pytest

from kaleidocore.arduino import high_byte, low_byte
from kaleidocore.wmath import make_word, map_range, random, random_range, random_seed


def test_random_zero_is_zero():
    assert random(0) == 0


@pytest.mark.parametrize("howbig", [1, 2, 10, 1000])
def test_random_stays_below_bound(howbig):
    for _ in range(200):
        value = random(howbig)
        assert 0 <= value < howbig


def test_random_with_negative_bound_is_non_negative():
    for _ in range(100):
        assert 0 <= random(-10) < 10


def test_seed_makes_sequence_repeatable():
    random_seed(1234)
    first = [random(1000) for _ in range(10)]
    random_seed(1234)
    second = [random(1000) for _ in range(10)]
    assert first == second


def test_zero_seed_does_not_reseed():
    random_seed(99)
    expected = [random(1000) for _ in range(5)]
    random_seed(99)
    random_seed(0)
    assert [random(1000) for _ in range(5)] == expected


@pytest.mark.parametrize("low,high", [(5, 5), (7, 3)])
def test_random_range_empty_returns_lower(low, high):
    assert random_range(low, high) == low


@pytest.mark.parametrize("low,high", [(-5, 5), (10, 20), (0, 1)])
def test_random_range_within_bounds(low, high):
    for _ in range(200):
        assert low <= random_range(low, high) < high


@pytest.mark.parametrize("bounds", [(0, 10, 0, 100), (0, 1023, 0, 255), (-50, 50, 200, 0)])
def test_map_range_endpoints(bounds):
    in_min, in_max, out_min, out_max = bounds
    assert map_range(in_min, in_min, in_max, out_min, out_max) == out_min
    assert map_range(in_max, in_min, in_max, out_min, out_max) == out_max


@pytest.mark.parametrize("x", [-3, 0, 17, 255])
def test_map_range_identity(x):
    assert map_range(x, 0, 255, 0, 255) == x


def test_map_range_truncates_toward_zero():
    assert map_range(-1, 0, 2, 0, 1) == 0


def test_map_range_empty_input_raises():
    with pytest.raises(ZeroDivisionError):
        map_range(1, 4, 4, 0, 10)


@pytest.mark.parametrize("word", [0, 0x1234, 0xFFFF, 0x8001])
def test_make_word_round_trip(word):
    assert make_word(high_byte(word), low_byte(word)) == word


def test_make_word_single_argument_is_identity():
    assert make_word(0xBEEF) == 0xBEEF


def test_make_word_masks_bytes():
    assert make_word(0x1AB, 0x1CD) == make_word(0xAB, 0xCD)