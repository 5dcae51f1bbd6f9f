"""Command-line entry point tests."""

from __future__ import annotations

import pytest

from main import convert, main
from number_speller.converter import NumberConverter


class TestConvert:
    @pytest.fixture
    def converter(self):
        return NumberConverter()

    def test_integer_literal_is_spelled(self, converter):
        assert convert(converter, "-7396", 2) == "negative seven thousand three hundred ninety six"

    def test_decimal_literal_is_spelled(self, converter):
        assert convert(converter, "2.71828", 3) == "two point seven one eight"

    def test_integer_phrase_is_parsed(self, converter):
        assert convert(converter, "frty twoo", 2) == "42"

    def test_large_phrase_keeps_precision(self, converter):
        text = converter.format_integer(-123_456_789_098_765_432)
        assert convert(converter, text, 2) == "-123456789098765432"

    def test_decimal_phrase_is_parsed(self, converter):
        assert convert(converter, "zero point four two", 2) == "0.42"

    def test_misspelled_separator_is_diagnosed(self, converter):
        with pytest.raises(ValueError, match=r"Did you mean point\?"):
            convert(converter, "three poin sixty two", 2)


class TestMain:
    def test_success_exit_code(self, capsys):
        assert main(["142", "frty twoo"]) == 0
        out = capsys.readouterr().out
        assert "one hundred forty two" in out
        assert "42" in out

    def test_failure_exit_code(self, capsys):
        assert main(["one hured and forty two"]) == 1
        out = capsys.readouterr().out
        assert "UNKNOWN_WORD" in out
        assert "Did you mean hundred?" in out

    def test_demo_runs_without_arguments(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "negativ three hundre and fifty fiv" in out
        assert "Invalid value in tail string." in out

    def test_precision_option(self, capsys):
        main(["--precision", "3", "2.71828"])
        assert "two point seven one eight" in capsys.readouterr().out

    def test_negative_precision_rejected(self):
        with pytest.raises(SystemExit):
            main(["--precision", "-1", "3.14"])

    def test_lexicon_option(self, capsys, minus_lexicon_file):
        assert main(["--lexicon", str(minus_lexicon_file), "-5"]) == 0
        assert "minus five" in capsys.readouterr().out
