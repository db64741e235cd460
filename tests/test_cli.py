import pytest

from dining.cli import main


@pytest.mark.parametrize(
    "argv",
    [
        ["1", "2"],
        ["1"] * 7,
        ["0", "100", "100", "100"],
        ["2", "100", "100", "100", "0"],
    ],
)
def test_invalid_arguments(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Invalid arguments\n"
    assert captured.out == ""


def test_runs_to_completion(capsys):
    assert main(["2", "800", "20", "20", "1"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert any(line.endswith(" 1 is eating") for line in lines)
    assert any(line.endswith(" 2 is eating") for line in lines)


def test_single_philosopher_exits(capsys):
    assert main(["1", "30", "10", "10"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].endswith(" 1 is thinking")