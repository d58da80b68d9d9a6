"""Allow `python -m dirnotes`."""

from dirnotes.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="notes")
