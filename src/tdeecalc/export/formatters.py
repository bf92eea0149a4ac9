"""Output formatters for estimate results."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tdeecalc.profiles.models import ResultTable


def _describe_profile(table: ResultTable) -> str:
    p = table.profile
    return (
        f"{p.height:g} cm, {p.weight:g} kg, {p.age:g} years, {p.sex.value}, "
        f"{p.activity.value} active, aim: {p.aim.value}"
    )


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, table: ResultTable) -> None:
        """Print formatted tables to console.

        Args:
            table: Estimate result to format
        """
        header_lines = [
            f"[bold]ENERGY ESTIMATE[/bold] - {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            f"Profile: {_describe_profile(table)}",
        ]
        if table.goal is not None:
            header_lines.append(f"Goal weight: {table.goal:g} kg")

        self.console.print(Panel("\n".join(header_lines), title="TDEE"))

        result_table = Table(title="Daily Energy by Weight")
        result_table.add_column("Weight (kg)", justify="right", style="cyan")
        result_table.add_column("BMR", justify="right")
        result_table.add_column("TDEE", justify="right")
        result_table.add_column("Calories", justify="right", style="green")

        goal_row = table.goal_row
        for row in table.rows:
            cells = (
                f"{row.weight:g}",
                f"{row.bmr:.1f}",
                str(row.tdee),
                str(row.calories),
            )
            if row is goal_row:
                result_table.add_row(*cells, style="bold")
            else:
                result_table.add_row(*cells)

        self.console.print(result_table)

        if goal_row is not None:
            self.console.print(
                f"[dim]Last row: maintenance calories once {goal_row.weight:g} kg is reached[/dim]"
            )

        for message in table.advisories:
            self.console.print(f"[yellow]Warning: {message}[/yellow]")


class JSONFormatter:
    """Format results as JSON for programmatic use."""

    def format(self, table: ResultTable, command: str = "estimate") -> str:
        """Return JSON string.

        Args:
            table: Estimate result to format
            command: Command name recorded in the envelope

        Returns:
            JSON string
        """
        first = table.rows[0]
        data = {
            "success": True,
            "command": command,
            "data": {
                "profile": table.profile.to_dict(),
                "mode": table.mode,
                "goal": table.goal,
                "columns": list(table.columns),
                "rows": table.to_records(),
            },
            "warnings": list(table.advisories),
            "human_summary": (
                f"TDEE {first.tdee} kcal/day, target {first.calories} kcal/day "
                f"({table.profile.aim.value})"
            ),
            "timestamp": datetime.now().isoformat(),
        }
        return json.dumps(data, indent=2)


class MarkdownFormatter:
    """Format results as Markdown for reports or documentation."""

    def format(self, table: ResultTable) -> str:
        """Return Markdown string.

        Args:
            table: Estimate result to format

        Returns:
            Markdown string
        """
        lines = [
            "# Daily Energy Estimate",
            "",
            f"**Profile:** {_describe_profile(table)}",
        ]
        if table.goal is not None:
            lines.append(f"**Goal weight:** {table.goal:g} kg")

        lines.extend(
            [
                "",
                "| Weight (kg) | BMR | TDEE | Calories |",
                "|-------------|-----|------|----------|",
            ]
        )

        goal_row = table.goal_row
        for row in table.rows:
            note = " (maintenance)" if row is goal_row else ""
            lines.append(
                f"| {row.weight:g} | {row.bmr:.1f} | {row.tdee} | {row.calories}{note} |"
            )

        if table.advisories:
            lines.extend(["", "## Warnings", ""])
            lines.extend(f"- {message}" for message in table.advisories)

        return "\n".join(lines)


class CSVFormatter:
    """Format results as CSV for spreadsheets and charting tools."""

    def format(self, table: ResultTable) -> str:
        """Return CSV string with a weight,bmr,tdee,calories header."""
        return table.to_dataframe().to_csv(index=False)


def format_result(
    table: ResultTable,
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format an estimate result in the specified format.

    Args:
        table: Estimate result to format
        output_format: One of 'table', 'json', 'markdown', 'csv'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown/csv, None for table (prints directly)
    """
    if output_format == "table":
        formatter = TableFormatter(console)
        formatter.format(table)
        return None
    elif output_format == "json":
        return JSONFormatter().format(table)
    elif output_format == "markdown":
        return MarkdownFormatter().format(table)
    elif output_format == "csv":
        return CSVFormatter().format(table)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
