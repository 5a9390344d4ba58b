import pytest

from philosophers.args import (
    ArgumentError,
    Config,
    is_valid_args,
    parse_args,
    parse_number,
)


def test_parse_number_plain_digits():
    assert parse_number("42") == 42
    assert parse_number("007") == 7


def test_parse_number_accepts_int_max():
    assert parse_number("2147483647") == 2147483647


@pytest.mark.parametrize("text", ["", "12a", "-5", "+5", " 5", "2147483648", "1.5"])
def test_parse_number_rejects(text):
    with pytest.raises(ValueError):
        parse_number(text)


def test_valid_arguments():
    assert is_valid_args(["5", "800", "200", "200"]) is True
    assert is_valid_args(["5", "800", "200", "200", "7"]) is True


def test_zero_meals_and_zero_philosophers_pass_validation():
    assert is_valid_args(["5", "800", "200", "200", "0"]) is True
    assert is_valid_args(["0", "800", "200", "200"]) is True


@pytest.mark.parametrize(
    "args",
    [
        ["201", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "2a0", "200"],
        ["", "800", "200", "200"],
        ["5", "800", "200", "-1"],
        ["5", "800", "200", "200", "99999999999"],
    ],
)
def test_invalid_arguments(args):
    assert is_valid_args(args) is False


def test_parse_args_without_meal_target():
    assert parse_args(["5", "800", "200", "200"]) == Config(5, 800, 200, 200, None)


def test_parse_args_with_meal_target():
    config = parse_args(["5", "800", "200", "200", "7"])
    assert config == Config(5, 800, 200, 200, 7)
    assert config.meal_target == 7


@pytest.mark.parametrize("args", [[], ["5", "800", "200"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count_is_usage_error(args):
    with pytest.raises(ArgumentError) as info:
        parse_args(args)
    assert info.value.exit_code == 1


def test_invalid_argument_message():
    with pytest.raises(ArgumentError) as info:
        parse_args(["5", "abc", "200", "200"])
    assert str(info.value) == "Error: Invalid arguments"
    assert info.value.exit_code == 2


def test_zero_philosophers_rejected():
    with pytest.raises(ArgumentError) as info:
        parse_args(["0", "800", "200", "200"])
    assert str(info.value) == "Error: Philosophers 1-200"
    assert info.value.exit_code == 2