import pytest

from bankcore.validators import (
    is_valid_name,
    is_valid_password,
    is_valid_phone_number,
    is_valid_pin_code,
    is_valid_username,
    is_valid_username_and_password,
)


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("Abcdefg1!", True),
        ("Ab1!", False),
        ("Abcdefghijklmno1!", False),
        ("abcdefg1!", False),
        ("ABCDEFG1!", False),
        ("Abcdefgh1", False),
        ("Abcdefgh!", False),
    ],
)
def test_password_rules(candidate, expected):
    assert is_valid_password(candidate) is expected


def test_password_length_bounds():
    base = "Ab1!"
    assert is_valid_password(base + "x" * 4) is True
    assert is_valid_password(base + "x" * 3) is False
    assert is_valid_password(base + "x" * 12) is True
    assert is_valid_password(base + "x" * 13) is False


@pytest.mark.parametrize(
    "username, expected",
    [
        ("john", True),
        ("jo", False),
        ("1john", False),
        ("_john", False),
        ("john.doe", True),
        ("john_doe", True),
        ("john.doe_x", False),
        ("john..doe", False),
        ("john doe", False),
        ("john-doe", False),
        ("john7", False),
    ],
)
def test_username_rules(username, expected):
    assert is_valid_username(username) is expected


def test_username_length_bounds():
    assert is_valid_username("a" * 20) is True
    assert is_valid_username("a" * 21) is False
    assert is_valid_username("a" * 4) is True
    assert is_valid_username("a" * 3) is False


def test_username_and_password_needs_both():
    good_candidate = "Abcdefg1!"
    assert is_valid_username_and_password("john", good_candidate) is True
    assert is_valid_username_and_password("jo", good_candidate) is False
    assert is_valid_username_and_password("john", "abc") is False


@pytest.mark.parametrize(
    "pin, expected",
    [
        ("1234", True),
        ("123456", True),
        ("12345", False),
        ("123", False),
        ("12a4", False),
        ("", False),
    ],
)
def test_pin_code(pin, expected):
    assert is_valid_pin_code(pin) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("John Smith", True),
        ("Jo Do", False),
        ("Johnathan", False),
        ("John3 Smith", False),
        ("John-Paul Smith", False),
        ("Mary Ann Smith", True),
    ],
)
def test_name(name, expected):
    assert is_valid_name(name) is expected


def test_name_length_bounds():
    assert is_valid_name("Ab " + "c" * 47) is True
    assert is_valid_name("Ab " + "c" * 48) is False


@pytest.mark.parametrize("operator", ["0", "1", "2", "5"])
def test_phone_valid_operators(operator):
    assert is_valid_phone_number("01" + operator + "0" * 8) is True


@pytest.mark.parametrize("operator", ["3", "4", "6", "9"])
def test_phone_invalid_operators(operator):
    assert is_valid_phone_number("01" + operator + "0" * 8) is False


def test_phone_shape_errors():
    assert is_valid_phone_number("01" + "0" * 8) is False
    assert is_valid_phone_number("01" + "0" * 10) is False
    assert is_valid_phone_number("02" + "0" * 9) is False
    assert is_valid_phone_number("010" + "0" * 7 + "x") is False