"""Tests for the rixits command-line interface."""

import json

import pytest

from rixits.cli import main, parse_int


@pytest.fixture(autouse=True)
def _env(clean_env):
    return clean_env


def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


class TestNumbers:
    def test_encode_number(self, capsys):
        assert run(capsys, "--variant", "querysafe64", "encode-number", "4096") == (0, "100\n", "")

    def test_encode_zero_default_variant(self, capsys):
        code, out, _ = run(capsys, "encode-number", "0")
        assert out == "~\n"

    def test_decode_number(self, capsys):
        code, out, _ = run(capsys, "decode-number", "10")
        assert (code, out) == (0, "64\n")

    def test_big_number(self, capsys):
        value = str(2 ** 100)
        _, encoded, _ = run(capsys, "encode-number", value)
        _, decoded, _ = run(capsys, "decode-number", encoded.strip())
        assert decoded.strip() == value

    def test_invalid_symbol_reports_error(self, capsys):
        code, out, err = run(capsys, "decode-number", "1+2")
        assert code == 1
        assert out == ""
        assert err.startswith("ERROR: Invalid symbol '+' at position 1")

    def test_not_an_integer(self, capsys):
        code, _, err = run(capsys, "encode-number", "12ab")
        assert code == 1
        assert "Not a decimal integer" in err


class TestBases:
    def test_encode_base(self, capsys):
        assert run(capsys, "encode-base", "255", "--base", "16")[1] == "FF\n"

    def test_decode_base(self, capsys):
        assert run(capsys, "decode-base", "ff", "-b", "64")[1] == "2665\n"

    def test_digit_out_of_range(self, capsys):
        code, _, err = run(capsys, "decode-base", "G", "-b", "16")
        assert code == 1
        assert "Invalid base-16 character 'G'" in err

    def test_invalid_base(self, capsys):
        code, _, err = run(capsys, "encode-base", "5", "-b", "65")
        assert code == 1
        assert "Base must be 2-64" in err


class TestStrings:
    def test_encode_string(self, capsys):
        assert run(capsys, "encode-string", "A")[1] == "011~~~\n"

    def test_decode_string(self, capsys):
        assert run(capsys, "--variant", "mybase64", "decode-string", "011---")[1] == "A\n"

    def test_truncated(self, capsys):
        code, _, err = run(capsys, "decode-string", "01")
        assert code == 1
        assert "Truncated" in err


class TestOptions:
    def test_json_output(self, capsys):
        _, out, _ = run(capsys, "--json", "decode-number", "10")
        assert json.loads(out) == {"input": "10", "output": "64"}

    def test_custom_alphabet(self, capsys):
        code, out, _ = run(capsys, "--symbols", "01", "encode-number", "10")
        assert (code, out) == (0, "1010\n")

    def test_env_variant(self, capsys, clean_env):
        clean_env.setenv("RIXITS_VARIANT", "querysafe64")
        assert run(capsys, "encode-string", "A")[1] == "011...\n"

    def test_bad_variant(self, capsys):
        code, _, err = run(capsys, "--variant", "nope", "encode-number", "1")
        assert code == 1
        assert "Unknown variant" in err

    def test_no_command_prints_help(self, capsys):
        code, out, _ = run(capsys)
        assert code == 2
        assert "usage: rixits" in out

    def test_alphabet_table(self, capsys):
        code, out, _ = run(capsys, "--variant", "mybase64", "alphabet")
        assert code == 0
        assert "Radix:    64" in out
        assert "(also a digit)" not in out
        assert "Zero:     '-' (pad)" in out
        assert "62 .   63 _" in out

    def test_alphabet_table_right_aligns_digits(self, capsys):
        _, out, _ = run(capsys, "--variant", "querysafe64", "alphabet")
        assert " 0 0    1 1" in out
        assert " 8 8    9 9   10 A" in out

    def test_alphabet_json(self, capsys):
        _, out, _ = run(capsys, "--json", "alphabet")
        data = json.loads(out)
        assert data["name"] == "usrixits"
        assert data["zero_symbol"] == "~"

    def test_variants(self, capsys):
        code, out, _ = run(capsys, "variants")
        assert code == 0
        for name in ("mybase64", "usrixits", "querysafe64"):
            assert name in out

    def test_variants_right_aligns_radix(self, capsys):
        _, out, _ = run(capsys, "variants")
        header, _, *rows = out.splitlines()
        radix_end = header.index("radix") + len("radix")
        for row in rows:
            assert row[radix_end - 2:radix_end] == "64"
            assert row[:radix_end - 2].endswith(" ")


class TestParseInt:
    def test_plain(self):
        assert parse_int("42") == 42

    def test_underscores(self):
        assert parse_int("1_000") == 1000

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_int("0x10")
