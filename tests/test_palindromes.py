import pytest

from coursekit.palindromes import (
    PLAIN,
    PUNCTUATED,
    SPACED,
    classify,
    format_verdict,
    main,
    split_phrases,
)


def test_plain_palindrome():
    verdict = classify("deed")
    assert verdict.letters == "deed"
    assert verdict.is_palindrome
    assert verdict.kind == PLAIN


def test_spaced_palindrome_ignores_case():
    verdict = classify("Never odd or even")
    assert verdict.letters == "neveroddoreven"
    assert verdict.is_palindrome
    assert verdict.kind == SPACED


def test_punctuation_wins_over_spaces():
    verdict = classify("No lemons, no melon")
    assert verdict.letters == "nolemonsnomelon"
    assert verdict.kind == PUNCTUATED


def test_not_a_palindrome():
    assert not classify("Comic").is_palindrome


def test_digits_are_ignored():
    verdict = classify("de9ed")
    assert verdict.letters == "deed"
    assert verdict.kind == PLAIN


def test_format_valid_line():
    line = format_verdict(classify("deed"))
    assert line[:25] == "deed".ljust(25)
    assert line[25:] == "type 1"


def test_format_prints_letters_backwards():
    line = format_verdict(classify("Comic"))
    assert line.startswith("cimoc ")
    assert line.endswith("invalid")
    assert len(line) == 25 + len("invalid")


def test_format_long_phrase_keeps_one_space():
    letters = "a" * 30
    assert format_verdict(classify(letters)) == letters + " type 1"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("aha#deed#", ["aha", "deed"]),
        ("a#b\n", ["a", "b\n"]),
        ("##", ["", ""]),
        ("x" * 80 + "#ok#", []),
        ("ok#" + "x" * 80 + "#z#", ["ok"]),
    ],
)
def test_split_phrases(text, expected):
    assert split_phrases(text) == expected


def test_main_reports_each_phrase(tmp_path, capsys):
    path = tmp_path / "palindromes.txt"
    path.write_text("deed#Comic#")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[-1] for line in lines] == ["1", "invalid"]
    assert lines[0].startswith("deed")


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "file not found" in capsys.readouterr().err