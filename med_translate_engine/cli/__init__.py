"""CLI commands for med-translate-engine."""

import typer

from med_translate_engine.cli.translate import pairs_command, translate_command

main_app = typer.Typer(
    name="med-translate",
    help="Medical conversation translator CLI",
    no_args_is_help=True,
)
main_app.command("translate")(translate_command)
main_app.command("pairs")(pairs_command)


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
