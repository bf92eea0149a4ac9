"""Output formatters for estimate results."""

from tdeecalc.export.formatters import (
    CSVFormatter,
    JSONFormatter,
    MarkdownFormatter,
    TableFormatter,
    format_result,
)

__all__ = [
    "TableFormatter",
    "JSONFormatter",
    "MarkdownFormatter",
    "CSVFormatter",
    "format_result",
]
