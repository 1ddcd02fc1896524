"""
Shared Typer application and dispatch helpers for the cnotes CLI.

The root `cli` object is defined here so that the command modules
(sites_cli.py, notes_cli.py) can register their subcommands on it directly,
giving a flat command surface:

    cnotes get-sites
    cnotes get-note-by-path <site_path> <note_path>
    cnotes search-notes <site_path> <term> --mode semantic

Every command follows the same shape: read the CliSettings stored on the
context by the root callback, build a client, make exactly one call, and
print the outcome as pretty JSON on stdout.
"""

import json
from typing import Any, Callable, NoReturn, Optional

import typer

from cnotes.client import CollectedNotesClient
from cnotes.config import TOKEN_ENV_VAR, CliSettings, resolve_base_url, resolve_token
from cnotes.errors import CollectedNotesError
from cnotes.logging_utils import log_verbose
from cnotes.types import to_jsonable

# ---------------------------------------------------------------------------
# Root CLI application
# ---------------------------------------------------------------------------
cli = typer.Typer(
    help=(
        "Command-line client for the Collected Notes API.\n\n"
        "Results are printed as JSON. The bearer token is taken from --token, "
        f"the {TOKEN_ENV_VAR} environment variable, or ~/.collected-notes."
    ),
    no_args_is_help=True,
)


@cli.callback()
def root(
    ctx: typer.Context,
    dev: bool = typer.Option(
        False,
        "--dev",
        help="Use the development server (http://localhost:3000).",
    ),
    token: Optional[str] = typer.Option(
        None,
        "--token",
        envvar=TOKEN_ENV_VAR,
        help="Authentication token for the API.",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Request timeout in seconds (default: wait indefinitely).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show request and response progress on stderr.",
    ),
) -> None:
    """Collect global options into a CliSettings value for the subcommand."""
    ctx.obj = CliSettings(
        base_url=resolve_base_url(dev),
        explicit_token=token,
        timeout=timeout,
        verbose=verbose,
    )


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def emit(value: Any) -> None:
    """Print a successful result as pretty JSON."""
    typer.echo(json.dumps(to_jsonable(value), indent=2, ensure_ascii=False))


def emit_error(error: CollectedNotesError) -> None:
    """Print a failure as a JSON object with a single `error` field."""
    typer.echo(json.dumps({"error": str(error)}, indent=2, ensure_ascii=False))


def fail(error: CollectedNotesError) -> NoReturn:
    """
    Report a local failure (bad credentials or input) and stop.

    These are detected before any request is made and end the process with
    status 1. Remote failures are only printed; see dispatch().
    """
    emit_error(error)
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Client construction + dispatch
# ---------------------------------------------------------------------------


def open_client(settings: CliSettings) -> CollectedNotesClient:
    """
    Build a client from the invocation settings.

    Raises CredentialError when no token can be resolved.
    """
    token, source = resolve_token(settings.explicit_token)
    log_verbose(f"Using {settings.base_url} (token from {source})", settings.verbose)
    return CollectedNotesClient(
        settings.base_url,
        token,
        timeout=settings.timeout,
        verbose=settings.verbose,
    )


def dispatch(ctx: typer.Context, operation: Callable[[CollectedNotesClient], Any]) -> None:
    """
    Run one client operation and print its outcome.

    Transport, HTTP status and decode failures are printed as
    {"error": ...} and the command still exits 0, as the tool always has.
    """
    settings: CliSettings = ctx.obj

    try:
        client = open_client(settings)
    except CollectedNotesError as e:
        fail(e)

    try:
        result = operation(client)
    except CollectedNotesError as e:
        emit_error(e)
        return

    emit(result)
