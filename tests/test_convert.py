import pytest

from ftkit.convert import INT_MAX, INT_MIN, atoi, itoa


def test_atoi_plain_number():
    assert atoi("1996") == 1996


def test_atoi_negative_with_leading_whitespace():
    assert atoi("\t\n\v\f\r  -42") == -42


def test_atoi_plus_sign():
    assert atoi("+6991") == 6991


def test_atoi_stops_at_first_non_digit():
    assert atoi("12abc34") == 12


@pytest.mark.parametrize("text", ["", "   ", "abc", "+-5", "--5", "- 5", "\x005"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_limits():
    assert atoi("2147483647") == INT_MAX
    assert atoi("-2147483648") == INT_MIN


def test_atoi_wraps_past_limit():
    assert atoi("2147483648") == INT_MIN


def test_itoa_min_value():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [INT_MIN, -1, 0, 7, 12332, INT_MAX])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_negative_has_sign_prefix():
    text = itoa(-12332)
    assert text.startswith("-")
    assert text[1:] == itoa(12332)


@pytest.mark.parametrize("n", [INT_MAX + 1, INT_MIN - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


def test_itoa_rejects_non_integer():
    with pytest.raises(TypeError):
        itoa(1.5)