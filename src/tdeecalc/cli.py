"""CLI interface using Typer."""

from __future__ import annotations

import json
import warnings
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from tdeecalc.config.settings import (
    OUTPUT_FORMATS,
    Settings,
    active_config_path,
    get_settings,
    use_config_path,
)
from tdeecalc.errors import PlausibilityWarning, ValidationError
from tdeecalc.export.formatters import format_result
from tdeecalc.profiles.body_calc import ActivityLevel, estimate

app = typer.Typer(
    help="BMR, TDEE and calorie targets for losing, maintaining or gaining weight",
    no_args_is_help=True,
)
console = Console()

config_app = typer.Typer(help="Manage configuration")
app.add_typer(config_app, name="config")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def load_settings_or_exit(json_output: bool = False, command: str = "estimate") -> Settings:
    """Load settings, exiting with a friendly message if the file is broken."""
    try:
        return get_settings()
    except (ValueError, yaml.YAMLError) as e:
        error = f"Invalid config file {active_config_path()}: {e}"
        if json_output:
            output_json({
                "success": False,
                "command": command,
                "errors": [error],
                "suggestions": ["Fix the file, or rewrite it with: tdeecalc config init --force"],
            })
        else:
            console.print(f"[red]{escape(error)}[/red]")
        raise typer.Exit(1)


def validation_suggestions(error: ValidationError) -> list[str]:
    """Actionable hints for a rejected input."""
    suggestions = []
    if error.choices:
        suggestions.append(f"Valid {error.field} values: {', '.join(error.choices)}")
    if error.field == "activity":
        suggestions.append(
            "Use the adverb only, e.g. 'moderately' rather than 'moderately active'"
        )
    return suggestions


@app.callback()
def main(
    config: Optional[Path] = typer.Option(
        None, "--config", help="Config file (default: ~/.tdeecalc/config.yaml)"
    ),
) -> None:
    """Select the config file before running a command."""
    if config is not None:
        use_config_path(config.expanduser())


# ============================================================================
# Main Commands
# ============================================================================


@app.command("estimate")
def estimate_command(
    height: float = typer.Argument(..., help="Height in centimetres"),
    weight: float = typer.Argument(..., help="Current weight in kilograms"),
    age: float = typer.Argument(..., help="Age in years"),
    sex: str = typer.Argument(..., help="'male' or 'female'"),
    activity: str = typer.Argument(
        ...,
        help="One of: " + ", ".join(level.value for level in ActivityLevel),
    ),
    aim: str = typer.Argument(..., help="'lose', 'maintain' or 'gain'"),
    goal: Optional[float] = typer.Option(
        None, "--goal", "-g", help="Goal weight in kg; adds a row per kg toward it"
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Output format: {', '.join(OUTPUT_FORMATS)} (default from config)",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write output to file instead of stdout"
    ),
) -> None:
    """Calculate BMR, TDEE and calorie targets."""
    settings = load_settings_or_exit(json_output=output_format == "json")
    output_format = output_format or settings.defaults.output_format
    json_output = output_format == "json"

    if output_format not in OUTPUT_FORMATS:
        console.print(f"[red]Unknown output format: {output_format}[/red]")
        console.print(f"[red]Choose one of: {', '.join(OUTPUT_FORMATS)}[/red]")
        raise typer.Exit(1)

    if output is not None and output_format == "table":
        console.print("[red]--output needs --format json, markdown or csv[/red]")
        raise typer.Exit(1)

    try:
        # Advisories are reported by the formatter instead
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", PlausibilityWarning)
            table = estimate(
                height,
                weight,
                age,
                sex,
                activity,
                aim,
                goal,
                limits=settings.plausibility.to_limits(),
            )
    except ValidationError as e:
        if json_output:
            output_json({
                "success": False,
                "command": "estimate",
                "errors": [str(e)],
                "suggestions": validation_suggestions(e),
            })
        else:
            console.print(f"[red]{e}[/red]")
            for suggestion in validation_suggestions(e):
                console.print(f"[dim]{suggestion}[/dim]")
        raise typer.Exit(1)

    text = format_result(table, output_format, console)
    if text is None:
        return

    if output is not None:
        output.write_text(text)
        console.print(f"[green]Wrote {len(table)} rows to {output}[/green]")
        for message in table.advisories:
            console.print(f"[yellow]Warning: {message}[/yellow]")
    else:
        print(text)


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    settings = load_settings_or_exit(command="config show")
    path = active_config_path()
    source = str(path) if path.exists() else f"{path} (not found, using defaults)"
    console.print(f"[dim]Config: {source}[/dim]")
    print(yaml.dump(settings.to_dict(), default_flow_style=False, sort_keys=False), end="")


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """Write a config file with default settings."""
    path = active_config_path()
    if path.exists() and not force:
        console.print(f"[yellow]Config file already exists: {path}[/yellow]")
        console.print("[dim]Use --force to overwrite it[/dim]")
        raise typer.Exit(1)

    Settings().save(path)
    console.print(f"[green]Wrote default config to {path}[/green]")


if __name__ == "__main__":
    app()
