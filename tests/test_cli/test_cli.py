"""Tests for the selectorkit CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli.main import cli


def _run(*args: str):
    return CliRunner().invoke(cli, list(args))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = _run("--help")
        assert result.exit_code == 0
        assert "build and check CSS-like selectors" in result.output

    def test_lists_commands(self) -> None:
        result = _run("--help")
        for name in ("build", "check", "area", "encode", "decode"):
            assert name in result.output

    def test_version(self) -> None:
        result = _run("--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_flag(self) -> None:
        result = _run("--verbose", "check", "div")
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# build
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_canonical_order(self) -> None:
        result = _run(
            "build",
            "--pseudo-class", "hover",
            "--class", "item",
            "--id", "first",
            "--element", "li",
            "--class", "active",
        )
        assert result.exit_code == 0
        assert result.output.strip() == "li#first.item.active:hover"

    def test_attr_and_pseudo_element(self) -> None:
        result = _run("build", "--attr", "disabled", "--pseudo-element", "after")
        assert result.exit_code == 0
        assert result.output.strip() == "[disabled]::after"

    def test_nothing_to_build(self) -> None:
        result = _run("build")
        assert result.exit_code == 1
        assert "Nothing to build" in result.output


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_valid_selector_is_normalized(self) -> None:
        result = _run("check", "ul>li.item")
        assert result.exit_code == 0
        assert result.output.strip() == "ul > li.item"

    def test_order_violation(self) -> None:
        result = _run("check", ".a#b")
        assert result.exit_code == 1
        assert "Invalid selector" in result.output

    def test_syntax_error(self) -> None:
        result = _run("check", "div >")
        assert result.exit_code == 1
        assert "Invalid selector" in result.output


# ---------------------------------------------------------------------------
# area / encode / decode
# ---------------------------------------------------------------------------


class TestAreaCommand:
    def test_area(self) -> None:
        result = _run("area", "10", "20")
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_fractional(self) -> None:
        result = _run("area", "1.5", "3")
        assert result.output.strip() == "4.5"

    def test_large_area_is_exact(self) -> None:
        result = _run("area", "1234567", "1")
        assert result.exit_code == 0
        assert result.output.strip() == "1234567"

    def test_large_fractional_area_is_exact(self) -> None:
        result = _run("area", "1234567.5", "2")
        assert result.output.strip() == "2469135"


class TestEncodeCommand:
    def test_compact(self) -> None:
        result = _run("encode", "[1, 2, 3]")
        assert result.exit_code == 0
        assert result.output.strip() == "[1,2,3]"

    def test_sort_keys(self) -> None:
        result = _run("encode", "--sort-keys", '{"b": 1, "a": 2}')
        assert result.output.strip() == '{"a":2,"b":1}'

    def test_malformed(self) -> None:
        result = _run("encode", "[1, 2")
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_nan_is_rejected(self) -> None:
        result = _run("encode", "[NaN]")
        assert result.exit_code == 1
        assert "Encode error" in result.output


class TestDecodeCommand:
    def test_rectangle(self) -> None:
        result = _run("decode", '{"width": 10, "height": 20}')
        assert result.exit_code == 0
        assert "Rectangle(width=10, height=20)" in result.output
        assert "area=200" in result.output

    def test_missing_field(self) -> None:
        result = _run("decode", '{"width": 10}')
        assert result.exit_code == 1
        assert "Missing field(s): height" in result.output

    def test_malformed(self) -> None:
        result = _run("decode", "{")
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_wrong_payload(self) -> None:
        result = _run("decode", "[1, 2]")
        assert result.exit_code == 1
        assert "Invalid shape" in result.output
        assert "Parse error" not in result.output

    def test_large_area_is_exact(self) -> None:
        result = _run("decode", '{"width": 1234567, "height": 1}')
        assert result.exit_code == 0
        assert "area=1234567" in result.output

    def test_fractional_area(self) -> None:
        result = _run("decode", '{"width": 0.5, "height": 3}')
        assert "area=1.5" in result.output

    def test_non_numeric_field(self) -> None:
        result = _run("decode", '{"width": "a", "height": 2}')
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Non-numeric field(s): width" in result.output

    def test_boolean_field_is_not_a_number(self) -> None:
        result = _run("decode", '{"width": true, "height": 2}')
        assert result.exit_code == 1
        assert "Non-numeric field(s): width" in result.output
