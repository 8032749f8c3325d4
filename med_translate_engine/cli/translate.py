"""CLI commands that run the translation pipeline from a terminal."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from med_translate_engine.bootstrap import build_default_service_container
from med_translate_engine.core.exceptions import ContentRejectedError, MedTranslateError
from med_translate_engine.core.language import friendly_language_name
from med_translate_engine.services import ServiceContainer, runtime

console = Console()


def _get_services() -> ServiceContainer:
    """Return the registered container, wiring production adapters if needed."""
    try:
        return runtime.get_services()
    except RuntimeError:
        services = build_default_service_container()
        runtime.set_services(services)
        return services


def translate_command(
    text: str = typer.Argument(..., help="Text of the medical conversation"),
    source: str = typer.Option("en", "--source", "-s", help="Source language code"),
    target: str = typer.Option("fr", "--target", "-t", help="Target language code"),
    show_corrected: bool = typer.Option(
        False, "--show-corrected", help="Also print the spelling-corrected source text"
    ),
) -> None:
    """Check that TEXT is a medical conversation, then translate it."""
    pipeline = _get_services().pipeline
    if pipeline is None:
        console.print("[red]Error:[/red] translation pipeline is not configured")
        raise typer.Exit(1)

    try:
        outcome = asyncio.run(pipeline.run(text, source, target))
    except ContentRejectedError as e:
        console.print(f"[yellow]Rejected:[/yellow] {e.reason}")
        raise typer.Exit(1) from e
    except MedTranslateError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    if show_corrected:
        console.print(
            f"[bold]Corrected ({friendly_language_name(outcome.pair.source)}):[/bold] "
            f"{outcome.corrected_text}"
        )
    console.print(outcome.translated_text)


def pairs_command() -> None:
    """List the supported language pairs."""
    registry = _get_services().language_pairs
    if not registry:
        console.print("[dim]No language pairs configured.[/dim]")
        return

    table = Table(title="Supported Language Pairs")
    table.add_column("Source", style="cyan")
    table.add_column("Target", style="cyan")
    table.add_column("Model")
    for pair, model_id in registry.items():
        table.add_row(
            f"{pair.source} ({friendly_language_name(pair.source)})",
            f"{pair.target} ({friendly_language_name(pair.target)})",
            model_id,
        )
    console.print(table)


__all__ = ["translate_command", "pairs_command"]
