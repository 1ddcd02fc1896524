"""
cnotes/config.py

Endpoint selection, token resolution and the settings value handed to each
CLI command.

Only two endpoints exist: the hosted production API and a local development
server. The bearer token comes from an explicit value (the `--token` option,
or the COLLECTED_NOTES_TOKEN environment variable, which may be set in a
`.env` file) or, failing that, from the plain-text file ~/.collected-notes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from cnotes.errors import CredentialError

PRODUCTION_URL = "https://api.collectednotes.com"
DEVELOPMENT_URL = "http://localhost:3000"

TOKEN_ENV_VAR = "COLLECTED_NOTES_TOKEN"
TOKEN_FILE_NAME = ".collected-notes"


def token_file_path() -> Path:
    """Return the per-user token file location (~/.collected-notes)."""
    return Path.home() / TOKEN_FILE_NAME


def resolve_base_url(dev: bool) -> str:
    """Pick the development server when `dev` is set, production otherwise."""
    return DEVELOPMENT_URL if dev else PRODUCTION_URL


def resolve_token(explicit: Optional[str], path: Optional[Path] = None) -> Tuple[str, str]:
    """
    Resolve the bearer token for this invocation.

    An explicit token always wins and the token file is not touched.
    Otherwise the token file is read and surrounding whitespace (including
    the trailing newline most editors add) is stripped.

    Parameters
    ----------
    explicit : str | None
        Token given on the command line or via the environment.
    path : Path | None
        Token file to read. Defaults to ~/.collected-notes.

    Returns
    -------
    tuple[str, str]
        The token and a short description of where it came from.

    Raises
    ------
    CredentialError
        If no explicit token was given and the file is missing, unreadable
        or blank.
    """
    if explicit is not None:
        return explicit, "command line"

    token_path = path if path is not None else token_file_path()
    try:
        token = token_path.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise CredentialError(
            f"Token not provided and could not read from {token_path}: {e}"
        ) from e

    if not token:
        raise CredentialError(f"Token not provided and {token_path} is empty")

    return token, str(token_path)


# ---------------------------------------------------------------------------
# CliSettings
# ---------------------------------------------------------------------------
# Global options collected by the root callback. Stored on the Typer context
# object and read by every subcommand. The token is resolved lazily so that
# `--help` works without credentials.
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class CliSettings:
    base_url: str
    explicit_token: Optional[str] = None
    timeout: Optional[float] = None
    verbose: bool = False
