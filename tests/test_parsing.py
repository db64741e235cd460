import pytest

from dining.parsing import ArgumentError, Settings, c_atoi, c_atol, parse_args


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -7abc", -7),
        ("+5", 5),
        ("\t\n 12", 12),
        ("abc", 0),
        ("--5", 0),
        ("", 0),
    ],
)
def test_c_atoi_parses_leading_number(text, expected):
    assert c_atoi(text) == expected


def test_c_atoi_wraps_to_32_bits():
    assert c_atoi("2147483648") == c_atoi("-2147483648")
    assert c_atoi("2147483648") < 0


@pytest.mark.parametrize("text, expected", [("800", 800), (" -3x", -3), ("x", 0)])
def test_c_atol_parses_leading_number(text, expected):
    assert c_atol(text) == expected


def test_c_atol_saturates():
    huge = c_atol("9" * 30)
    assert huge == c_atol("9" * 40)
    assert huge > 0
    assert c_atol("-" + "9" * 30) == -huge - 1


def test_parse_args_four_values():
    settings = parse_args(["5", "800", "200", "200"])
    assert settings == Settings(5, 800, 200, 200, None)


def test_parse_args_with_meals():
    settings = parse_args(["4", "410", "200", "100", "7"])
    assert settings.meals_required == 7
    assert settings.num_philos == 4


def test_parse_args_lenient_numbers():
    settings = parse_args([" 3abc", "+60", "10ms", "10"])
    assert (settings.num_philos, settings.time_to_die, settings.time_to_eat) == (3, 60, 10)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "-1", "200", "200"],
        ["5", "800", "0", "200"],
        ["5", "800", "200", "abc"],
        ["5", "800", "200", "200", "0"],
        ["5", "800", "200", "200", "-2"],
    ],
)
def test_parse_args_rejects_non_positive(args):
    with pytest.raises(ArgumentError):
        parse_args(args)


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1"] * 6])
def test_parse_args_rejects_wrong_count(args):
    with pytest.raises(ArgumentError):
        parse_args(args)


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["1"])