"""
Root entrypoint for the cnotes CLI.

The Typer application itself lives in cnotes/cli/app.py. Importing the
command modules below registers their subcommands on it:

    • cnotes/cli/sites_cli.py  →  site CRUD + listing a site's notes
    • cnotes/cli/notes_cli.py  →  note CRUD, rendering and search

Installed as the `cnotes` console script.
"""

from dotenv import load_dotenv

from cnotes.cli import notes_cli, sites_cli  # noqa: F401  (registers commands)
from cnotes.cli.app import cli

# Load environment variables (e.g., COLLECTED_NOTES_TOKEN from .env)
load_dotenv()

__all__ = ["cli"]

# ---------------------------------------------------------------------------
# Entry point for `python -m cnotes.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cli()
