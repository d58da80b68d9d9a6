"""
Root entrypoint for the dirnotes CLI.

This module defines the top-level `notes` command and registers the note
commands from `dirnotes.cli.notes_cli` directly on it:

    notes                  list notes for the current directory
    notes list             same, explicit form
    notes add <word...>    add a note to the current directory
    notes delete <id>      delete a note from the current directory

Running `notes` without a subcommand lists. An unknown subcommand is a usage
error (exit status 2), reported by Typer before the database is touched.
"""

# ---------------------------------------------------------------------------
# Imports (must be at top to satisfy flake8 E402)
# ---------------------------------------------------------------------------
import typer

from dirnotes.config import load_settings

from .notes_cli import CliState, add_note, delete_note, list_notes

# Load environment variables (DIRNOTES_DB_PATH may come from a .env file)
load_settings()

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    help=(
        "Keep short notes attached to the directory you are working in.\n\n"
        "Notes are stored per directory in a single SQLite database at "
        "~/dev/notes/test.db (override with DIRNOTES_DB_PATH).\n\n"
        "Run without a command to list the notes for the current directory."
    ),
    add_completion=False,
)


@cli.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show which database and directory are used.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show raw store results (implies --verbose).",
    ),
) -> None:
    """List, add, or delete notes for the current directory."""
    ctx.obj = CliState(verbose=verbose, debug=debug)

    if ctx.invoked_subcommand is None:
        list_notes(ctx)


# ---------------------------------------------------------------------------
# Register note commands
# ---------------------------------------------------------------------------
# `add` and `delete` pass dash-prefixed words through as arguments: note text
# like "make -j4" and ids like "-1" must reach the command unparsed.
# ---------------------------------------------------------------------------
PASS_THROUGH_DASHES = {"ignore_unknown_options": True}

cli.command("list")(list_notes)
cli.command("add", context_settings=PASS_THROUGH_DASHES)(add_note)
cli.command("delete", context_settings=PASS_THROUGH_DASHES)(delete_note)

# ---------------------------------------------------------------------------
# Entry point for `python -m dirnotes.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
