"""
Site commands for the cnotes CLI.

    • cnotes get-sites
    • cnotes create-site <site_path> <name>
    • cnotes get-site <site_path>
    • cnotes update-site <site_path> [DATA] [--name ..] [--headline ..] ...
    • cnotes delete-site <site_path>
    • cnotes get-notes-for-site <site_path>
"""

import json
from typing import Any, Dict, Optional

import typer

from cnotes.cli.app import cli, dispatch, fail
from cnotes.errors import InputError


# ---------------------------------------------------------------------------
# Helper: build the update-site payload
# ---------------------------------------------------------------------------
def build_site_patch(
    data: Optional[str],
    name: Optional[str] = None,
    headline: Optional[str] = None,
    about: Optional[str] = None,
    domain: Optional[str] = None,
) -> Any:
    """
    Turn the update-site arguments into the JSON payload to send.

    `data` is parsed as JSON and otherwise left alone. Field options are
    layered on top of it, which only makes sense when `data` is an object;
    with no `data`, the field options alone form the payload.

    Raises
    ------
    InputError
        If `data` is not valid JSON, if field options are combined with a
        non-object `data`, or if there is nothing to send.
    """
    fields: Dict[str, str] = {
        key: value
        for key, value in (
            ("name", name),
            ("headline", headline),
            ("about", about),
            ("domain", domain),
        )
        if value is not None
    }

    if data is None:
        if not fields:
            raise InputError("Nothing to update: pass JSON data or at least one field option")
        return fields

    try:
        patch = json.loads(data)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON data for site update: {e}") from e

    if not fields:
        return patch

    if not isinstance(patch, dict):
        raise InputError("Field options can only be combined with a JSON object")

    return {**patch, **fields}


@cli.command("get-sites")
def get_sites(ctx: typer.Context) -> None:
    """Get all sites."""
    dispatch(ctx, lambda client: client.get_sites())


@cli.command("create-site")
def create_site(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help="Site path."),
    name: str = typer.Argument(..., help="Site name."),
) -> None:
    """Create a new site."""
    dispatch(ctx, lambda client: client.create_site(site_path, name))


@cli.command("get-site")
def get_site(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help="Site path."),
) -> None:
    """Get a specific site."""
    dispatch(ctx, lambda client: client.get_site(site_path))


@cli.command("update-site")
def update_site(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help="Site path."),
    data: Optional[str] = typer.Argument(
        None,
        help='JSON data to update the site, e.g. \'{"name": "My Site"}\'.',
    ),
    name: Optional[str] = typer.Option(None, "--name", help="New site name."),
    headline: Optional[str] = typer.Option(None, "--headline", help="New headline."),
    about: Optional[str] = typer.Option(None, "--about", help="New about text."),
    domain: Optional[str] = typer.Option(None, "--domain", help="Custom domain."),
) -> None:
    """Update a specific site."""
    try:
        patch = build_site_patch(data, name, headline, about, domain)
    except InputError as e:
        fail(e)

    dispatch(ctx, lambda client: client.update_site(site_path, patch))


@cli.command("delete-site")
def delete_site(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help="Site path."),
) -> None:
    """Delete a specific site."""
    dispatch(ctx, lambda client: client.delete_site(site_path))


@cli.command("get-notes-for-site")
def get_notes_for_site(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help="Site path."),
) -> None:
    """Get all notes for a specific site."""
    dispatch(ctx, lambda client: client.get_notes_for_site(site_path))
