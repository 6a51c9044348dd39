"""Tests for the command line interface."""

import json

import pytest

from tax_address import __version__
from tax_address.cli import main


def _normalize_args(directory_file, *extra):
    return [
        "normalize",
        "--street", "123 Main St",
        "--street", "",
        "--city", "Springfield",
        "--country", "US",
        "--region-id", "13",
        "--postal-code", "62704",
        "--directory-file", str(directory_file),
        *extra,
    ]


class TestCLI:
    """Test cases for CLI main function."""

    def test_cli_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        assert "normalize addresses" in capsys.readouterr().out

    def test_cli_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert f"Tax Address {__version__}" in capsys.readouterr().out

    def test_cli_no_command(self, capsys):
        assert main([]) == 1
        assert "Available commands" in capsys.readouterr().out

    def test_cli_normalize(self, capsys, directory_file):
        assert main(_normalize_args(directory_file)) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "streetAddress": ["123 Main St"],
            "city": "Springfield",
            "mainDivision": "IL",
            "postalCode": "62704",
            "country": "USA",
        }

    def test_cli_normalize_verbose(self, capsys, directory_file):
        assert main(["--verbose", *_normalize_args(directory_file, "--region-id", "99")]) == 0
        captured = capsys.readouterr()
        assert "mainDivision" not in json.loads(captured.out)
        assert "not found" in captured.err

    def test_cli_without_directory(self, capsys):
        assert main(["normalize", "--country", "US", "--region", "Illinois", "--postal-code", "2108"]) == 0
        assert json.loads(capsys.readouterr().out) == {"mainDivision": "Illinois", "postalCode": "02108"}

    def test_cli_unknown_scope(self, capsys, directory_file):
        assert main(_normalize_args(directory_file, "--scope-code", "eu_store")) == 1
        assert "No address field limits configured" in capsys.readouterr().err

    def test_cli_missing_directory_file(self, tmp_path):
        assert main(_normalize_args(tmp_path / "missing.json")) == 1
