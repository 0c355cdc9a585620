# src/quizmultiplier/cli/app.py
"""Command-line interface for quizmultiplier.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Calls commands module functions
3. Renders results with Rich
"""

from __future__ import annotations

import typer
import yaml  # type: ignore[import-untyped]
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from quizmultiplier import __version__
from quizmultiplier.commands import config_cmd, factor, generate, report, validate
from quizmultiplier.commands.base import GenerateResult
from quizmultiplier.commands.files import dump_questions
from quizmultiplier.config import build_settings, load_config
from quizmultiplier.log import setup_logging

app = typer.Typer(
    name="quizmult",
    help="quizmultiplier - turn one base fact into a diverse exam question set.",
    no_args_is_help=True,
)
console = Console()

OUTPUT_FORMATS = ("table", "json")


def version_callback(value: bool) -> None:
    if value:
        console.print(f"quizmultiplier {__version__}")
        raise typer.Exit()


def _configured_log_level() -> str:
    try:
        return build_settings(load_config()).log_level
    except (OSError, yaml.YAMLError, ValueError):
        return "WARNING"


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log generation details (DEBUG level).",
    ),
) -> None:
    """quizmultiplier - rule-based question multiplication."""
    setup_logging("DEBUG" if verbose else _configured_log_level(), rich=True)


@app.command()
def generate_cmd(
    fact_file: str = typer.Argument(..., help="YAML or JSON file with one base fact"),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    seed: int = typer.Option(
        None,
        "--seed",
        "-s",
        help="Seed for reproducible output",
    ),
    score: bool = typer.Option(
        None,
        "--score/--no-score",
        help="Attach validation and PYQ similarity scores",
    ),
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the questions to this JSON file",
    ),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table or json",
    ),
) -> None:
    """Generate the full question set for a base fact."""
    if output_format not in OUTPUT_FORMATS:
        console.print(f"[red]Error: unknown format '{output_format}' (use table or json)[/red]")
        raise typer.Exit(1)

    result = generate.generate(
        fact_path=fact_file,
        config_path=config_file,
        seed=seed,
        score=score,
        output_path=output,
    )

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if output_format == "json":
        # Plain stdout so the output can be piped
        typer.echo(dump_questions(result.questions))
        return

    _render_generate_result(result)


def _render_generate_result(result: GenerateResult) -> None:
    table = Table(title=f"Questions for {result.fact_id} (factor {result.factor})")
    table.add_column("#", style="dim", width=4)
    table.add_column("Type", style="cyan")
    table.add_column("Difficulty")
    table.add_column("Question")

    for i, question in enumerate(result.questions, 1):
        text = question.question_text.replace("\n", " ")
        if len(text) > 90:
            text = text[:90] + "..."
        table.add_row(str(i), question.type.value, question.difficulty.value, text)

    console.print(table)

    summary = ", ".join(f"{qt.value}: {count}" for qt, count in result.type_counts.items())
    console.print(f"[green]Generated {len(result.questions)} questions[/green]")
    if summary:
        console.print(f"[dim]{summary}[/dim]")

    if result.failures:
        console.print(f"[yellow]{len(result.failures)} generator calls failed:[/yellow]")
        for failure in result.failures:
            console.print(f"  [yellow]- {failure}[/yellow]")

    if result.output_path:
        console.print(f"[dim]Written to {result.output_path}[/dim]")


generate_cmd.__name__ = "generate"
app.registered_commands[0].name = "generate"


@app.command()
def validate_cmd(
    questions_file: str = typer.Argument(..., help="JSON file with a list of questions"),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    issues_only: bool = typer.Option(
        False,
        "--issues-only",
        help="Only list questions with validation issues",
    ),
    quality: bool = typer.Option(
        False,
        "--quality",
        help="Also run the editorial quality review",
    ),
) -> None:
    """Validate a saved question set."""
    result = validate.validate(
        questions_path=questions_file, config_path=config_file, quality=quality
    )

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Validation ({result.valid_count}/{len(result.validations)} valid)")
    table.add_column("Question", style="cyan")
    table.add_column("Type")
    table.add_column("Score", justify="right")
    table.add_column("Issues")

    for entry in result.validations:
        if issues_only and entry.is_valid:
            continue
        score_style = "green" if entry.is_valid else "red"
        table.add_row(
            entry.question_id,
            entry.question_type.value,
            f"[{score_style}]{entry.quality_score}[/{score_style}]",
            "\n".join(entry.issues) or "-",
        )

    console.print(table)

    if result.valid_count < len(result.validations):
        raise typer.Exit(1)


validate_cmd.__name__ = "validate"
app.registered_commands[1].name = "validate"


@app.command()
def factor_cmd(
    fact_file: str = typer.Argument(..., help="YAML or JSON file with one base fact"),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show the multiplication factor and the types each pass would use."""
    result = factor.factor(fact_path=fact_file, config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Multiplication Plan for {result.fact_id}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Factor", str(result.factor))
    table.add_row("Relevant types", ", ".join(qt.value for qt in result.relevant_types))
    table.add_row("High-impact types", ", ".join(qt.value for qt in result.high_impact_types))

    console.print(table)


factor_cmd.__name__ = "factor"
app.registered_commands[2].name = "factor"


@app.command()
def report_cmd(
    questions_file: str = typer.Argument(..., help="JSON file with a list of questions"),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Print the pattern analysis report for a saved question set."""
    result = report.report(questions_path=questions_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if plain:
        console.print(result.report, markup=False, highlight=False)
    else:
        console.print(
            Panel(
                result.report,
                title=f"Pattern Report ({result.question_count} questions)",
                border_style="green",
            )
        )


report_cmd.__name__ = "report"
app.registered_commands[3].name = "report"


@app.command()
def config_cmd_handler(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title="quizmultiplier Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    table.add_row("", "", "")
    table.add_row("policy_version", result.policy_version, "policy")

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    # Show config file location
    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > default[/dim]")


config_cmd_handler.__name__ = "config"
app.registered_commands[4].name = "config"
