import pytest

from ftkit.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ASCII = range(128)
HIGH = range(128, 256)


@pytest.mark.parametrize("code", ASCII)
def test_isalpha_matches_ascii_letters(code):
    assert isalpha(code) == chr(code).isalpha()


@pytest.mark.parametrize("code", ASCII)
def test_isdigit_matches_ascii_digits(code):
    assert isdigit(code) == chr(code).isdigit()


@pytest.mark.parametrize("code", ASCII)
def test_isprint_matches_printable(code):
    assert isprint(code) == chr(code).isprintable()


@pytest.mark.parametrize("code", range(-5, 300))
def test_isalnum_is_alpha_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


@pytest.mark.parametrize("code", HIGH)
def test_non_ascii_codes_are_rejected(code):
    assert not (isalpha(code) or isdigit(code) or isprint(code) or isascii(code))


def test_isascii_boundaries():
    assert isascii(0) and isascii(127)
    assert not isascii(-1)
    assert not isascii(128)


def test_printable_is_subset_of_ascii():
    assert all(isascii(code) for code in range(-10, 300) if isprint(code))


def test_accepts_strings():
    assert isalpha("q")
    assert isdigit("7")
    assert not isalnum("_")
    assert isprint(" ")
    assert not isprint("\n")


def test_toupper_and_tolower_on_strings():
    assert toupper("a") == "A"
    assert tolower("Z") == "z"


def test_toupper_on_int_keeps_int():
    assert toupper(ord("m")) == ord("M")
    assert tolower(ord("M")) == ord("m")


@pytest.mark.parametrize("code", range(-1, 256))
def test_case_round_trip(code):
    if isalpha(code):
        assert tolower(toupper(code)) == tolower(code)
        assert toupper(tolower(code)) == toupper(code)
        assert isalpha(toupper(code)) and isalpha(tolower(code))
    else:
        assert toupper(code) == code
        assert tolower(code) == code


def test_non_letters_unchanged():
    for ch in "0@[`{ ~":
        assert toupper(ch) == ch
        assert tolower(ch) == ch


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        toupper("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        isdigit(1.5)
    with pytest.raises(TypeError):
        tolower(None)