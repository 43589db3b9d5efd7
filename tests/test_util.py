import pytest

from jokerdeck.util import (
    INT_MIN,
    get_digits,
    get_digits_even,
    get_digits_odd,
    int_arr_max,
)


def test_get_digits_small_values():
    assert get_digits(0) == 1
    assert get_digits(9) == 1


def test_get_digits_int_max():
    assert get_digits(2147483647) == 10


def test_get_digits_is_monotonic():
    samples = [0, 5, 10, 99, 100, 12345, 999999, 10**8, 10**9, 2**31 - 1]
    results = [get_digits(n) for n in samples]
    assert results == sorted(results)


@pytest.mark.parametrize("n", [0, 7, 10, 99, 100, 999, 1000, 54321, 10**6, 10**8 - 1, 10**8, 10**9 - 1])
def test_get_digits_odd_is_half_rounded_up(n):
    assert get_digits_odd(n) == (get_digits(n) + 1) // 2


@pytest.mark.parametrize("n", [0, 9, 10, 999, 1000, 99999, 10**5, 10**7 - 1, 10**7, 10**9 - 1])
def test_get_digits_even_relation(n):
    assert get_digits_even(n) == get_digits(n) // 2 + 1


def test_int_arr_max_returns_largest():
    assert int_arr_max([3, 7, 2]) == 7


def test_int_arr_max_all_negative():
    assert int_arr_max([-5, -1, -9]) == -1


def test_int_arr_max_empty_is_int_min():
    assert int_arr_max([]) == INT_MIN


def test_int_arr_max_accepts_generator():
    assert int_arr_max(x for x in (4, 11, 6)) == 11