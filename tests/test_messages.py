import pytest

from coursekit.messages import format_message, main


def test_full_arguments():
    assert format_message("I will decide.", "*", 15) == "*" * 15 + "I will decide." + "*" * 15


def test_default_count():
    assert format_message("I will commit.", "+") == "+" * 10 + "I will commit." + "+" * 10


def test_all_defaults():
    assert format_message() == " " * 10 + "Decide. Commit. Succeed." + " " * 10


def test_zero_and_negative_count_leave_message_bare():
    assert format_message("x", "#", 0) == "x"
    assert format_message("x", "#", -3) == "x"


def test_length_invariant():
    result = format_message("abc", "-", 7)
    assert len(result) == 3 + 2 * 7
    assert result.startswith("-" * 7) and result.endswith("-" * 7)


@pytest.mark.parametrize("symbol", ["", "ab"])
def test_symbol_must_be_one_character(symbol):
    with pytest.raises(ValueError):
        format_message("hi", symbol, 2)


def test_main_prints_four_lines(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "*" * 15 + "I will decide." + "*" * 15,
        "+" * 10 + "I will commit." + "+" * 10,
        " " * 10 + "I will succeed." + " " * 10,
        " " * 10 + "Decide. Commit. Succeed." + " " * 10,
    ]