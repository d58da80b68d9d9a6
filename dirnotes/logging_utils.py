"""
logging_utils.py

Small output helpers for the notes CLI.

`--verbose` reports what the command is about to do (which database, which
directory); `--debug` additionally dumps raw store results. Both go to
stderr through Typer's echo so stdout only ever carries the command's result
lines.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain-English description of the current step.
    verbose : bool
        Whether verbose mode is active. When False this does nothing.
    """
    if verbose:
        typer.echo(message, err=True)


def log_debug(message: str, debug: bool) -> None:
    """Print a `[debug]`-prefixed message when debug mode is enabled."""
    if debug:
        typer.echo(f"[debug] {message}", err=True)
