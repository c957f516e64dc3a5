import string

import pytest

from ftkit.chars import isalnum, isalpha, isascii, isdigit, isprint, tolower, toupper

ASCII = range(128)


@pytest.mark.parametrize("code", ASCII)
def test_isalpha_matches_ascii_letters(code):
    assert isalpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII)
def test_isdigit_matches_ascii_digits(code):
    assert isdigit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII)
def test_isalnum_is_union_of_alpha_and_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


@pytest.mark.parametrize("code", ASCII)
def test_isprint_matches_printable_ascii(code):
    assert isprint(code) == chr(code).isprintable()


@pytest.mark.parametrize("code", [-1, 128, 200, 0xE9, 0x3B1])
def test_non_ascii_codes_never_match(code):
    assert not isascii(code)
    assert not isalpha(code)
    assert not isdigit(code)
    assert not isalnum(code)
    assert not isprint(code)


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)


def test_string_arguments_are_accepted():
    assert isalpha("q")
    assert isdigit("7")
    assert not isalnum("_")
    assert isprint(" ")
    assert not isprint("\t")


def test_non_ascii_letters_are_not_alpha():
    assert not isalpha("é")
    assert not isalnum("ß")


@pytest.mark.parametrize("lower, upper", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion_pairs(lower, upper):
    assert toupper(lower) == upper
    assert tolower(upper) == lower
    assert toupper(ord(lower)) == ord(upper)
    assert tolower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " \n")
def test_case_conversion_leaves_non_letters(ch):
    assert toupper(ch) == ch
    assert tolower(ch) == ch


@pytest.mark.parametrize("code", ASCII)
def test_case_round_trip_is_idempotent(code):
    assert toupper(toupper(code)) == toupper(code)
    assert tolower(tolower(code)) == tolower(code)
    assert tolower(toupper(code)) == tolower(code)


def test_case_conversion_ignores_non_ascii():
    assert toupper("é") == "é"
    assert tolower("É") == "É"


def test_result_type_follows_argument():
    assert toupper("a") == "A"
    assert toupper(ord("a")) == ord("A")


@pytest.mark.parametrize("bad", ["", "ab", 1.5, None, b"a"])
def test_bad_arguments_raise(bad):
    with pytest.raises(TypeError):
        isalpha(bad)