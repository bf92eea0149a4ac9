"""Tests for output formatters."""

from __future__ import annotations

import io
import json

import pytest
from rich.console import Console

from tdeecalc import estimate
from tdeecalc.export.formatters import (
    CSVFormatter,
    JSONFormatter,
    MarkdownFormatter,
    TableFormatter,
    format_result,
)


@pytest.fixture
def gain_range(male_gain):
    return estimate(**male_gain, goal=89)


@pytest.fixture
def captured_console():
    return Console(file=io.StringIO(), width=120)


class TestJSONFormatter:
    """Tests for JSON output."""

    def test_envelope(self, male_gain) -> None:
        data = json.loads(JSONFormatter().format(estimate(**male_gain)))

        assert data["success"] is True
        assert data["command"] == "estimate"
        assert data["data"]["mode"] == "point"
        assert data["data"]["goal"] is None
        assert data["data"]["columns"] == ["weight", "bmr", "tdee", "calories"]
        assert data["data"]["rows"][0]["calories"] == 3354
        assert data["data"]["profile"]["activity"] == "moderately"
        assert data["warnings"] == []

    def test_range_rows(self, gain_range) -> None:
        data = json.loads(JSONFormatter().format(gain_range))

        rows = data["data"]["rows"]
        assert [r["weight"] for r in rows] == [84, 85, 86, 87, 88, 89]
        assert rows[-1]["calories"] == rows[-1]["tdee"]
        assert data["data"]["goal"] == 89

    def test_warnings_included(self, male_gain) -> None:
        with pytest.warns(UserWarning):
            table = estimate(**{**male_gain, "height": 260})

        data = json.loads(JSONFormatter().format(table))
        assert data["warnings"] == ["Make sure you have input your height in cm"]


class TestMarkdownFormatter:
    """Tests for Markdown output."""

    def test_single_row(self, male_gain) -> None:
        text = MarkdownFormatter().format(estimate(**male_gain))

        assert text.startswith("# Daily Energy Estimate")
        assert "| Weight (kg) | BMR | TDEE | Calories |" in text
        assert "| 84 | 1970.4 | 3054 | 3354 |" in text
        assert "maintenance" not in text

    def test_goal_row_marked(self, gain_range) -> None:
        text = MarkdownFormatter().format(gain_range)

        assert "**Goal weight:** 89 kg" in text
        assert "| 89 | 2038.9 | 3160 | 3160 (maintenance) |" in text


class TestCSVFormatter:
    """Tests for CSV output."""

    def test_header_and_rows(self, gain_range) -> None:
        lines = CSVFormatter().format(gain_range).splitlines()

        assert lines[0] == "weight,bmr,tdee,calories"
        assert len(lines) == 7
        assert lines[1].startswith("84,")
        assert lines[1].endswith(",3054,3354")


class TestTableFormatter:
    """Tests for Rich table output."""

    def test_prints_rows_and_warnings(self, male_gain, captured_console) -> None:
        with pytest.warns(UserWarning):
            table = estimate(**{**male_gain, "age": 101})

        TableFormatter(captured_console).format(table)
        output = captured_console.file.getvalue()

        assert "Daily Energy by Weight" in output
        assert "Warning: Make sure you have input your age in years" in output

    def test_range_mentions_maintenance(self, gain_range, captured_console) -> None:
        TableFormatter(captured_console).format(gain_range)
        output = captured_console.file.getvalue()

        assert "Goal weight: 89 kg" in output
        assert "3160" in output
        assert "maintenance calories once 89 kg is reached" in output


class TestFormatResult:
    """Tests for the format dispatcher."""

    def test_table_prints(self, male_gain, captured_console) -> None:
        assert format_result(estimate(**male_gain), "table", captured_console) is None
        assert "3354" in captured_console.file.getvalue()

    @pytest.mark.parametrize("output_format", ["json", "markdown", "csv"])
    def test_text_formats_return_string(self, male_gain, output_format) -> None:
        text = format_result(estimate(**male_gain), output_format)
        assert "3354" in text

    def test_unknown_format(self, male_gain) -> None:
        with pytest.raises(ValueError, match="Unknown output format"):
            format_result(estimate(**male_gain), "xml")
