"""
logging_utils.py

Logging helpers used across the cnotes CLI and API client.

Output is lightweight and predictable: verbose messages are printed through
Typer's echo function, and only when the user passes `--verbose`. They are
written to stderr so that stdout carries nothing but the JSON result.
"""

import typer


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high-level progress message when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain-English description of what is happening
        (e.g., "GET https://api.collectednotes.com/sites").

    verbose : bool
        Whether verbose mode is active. When False, this function does
        nothing.
    """
    if verbose:
        typer.echo(message, err=True)
