"""
Note commands for the cnotes CLI.

Every command here addresses a note by its site path and note path. The
three rendering commands (HTML, Markdown, plain text) print the service's
raw text as a JSON string; everything else prints decoded records.
"""

import typer

from cnotes.cli.app import cli, dispatch

SITE_PATH_HELP = "Site path."
NOTE_PATH_HELP = "Note path."


@cli.command("create-note-for-site")
def create_note_for_site(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help=SITE_PATH_HELP),
    body: str = typer.Argument(..., help="Note body."),
    visibility: str = typer.Argument(..., help="Note visibility (e.g. public, private)."),
) -> None:
    """Create a note for a specific site."""
    dispatch(ctx, lambda client: client.create_note_for_site(site_path, body, visibility))


@cli.command("get-note-by-path")
def get_note_by_path(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help=SITE_PATH_HELP),
    note_path: str = typer.Argument(..., help=NOTE_PATH_HELP),
) -> None:
    """Get a specific note by path."""
    dispatch(ctx, lambda client: client.get_note_by_path(site_path, note_path))


@cli.command("update-note-by-path")
def update_note_by_path(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help=SITE_PATH_HELP),
    note_path: str = typer.Argument(..., help=NOTE_PATH_HELP),
    body: str = typer.Argument(..., help="Note body."),
    visibility: str = typer.Argument(..., help="Note visibility."),
) -> None:
    """Update a specific note by path."""
    dispatch(
        ctx,
        lambda client: client.update_note_by_path(site_path, note_path, body, visibility),
    )


@cli.command("delete-note-by-path")
def delete_note_by_path(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help=SITE_PATH_HELP),
    note_path: str = typer.Argument(..., help=NOTE_PATH_HELP),
) -> None:
    """Delete a specific note by path."""
    dispatch(ctx, lambda client: client.delete_note_by_path(site_path, note_path))


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


@cli.command("get-links-from-note")
def get_links_from_note(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help=SITE_PATH_HELP),
    note_path: str = typer.Argument(..., help=NOTE_PATH_HELP),
) -> None:
    """Get links from a specific note."""
    dispatch(ctx, lambda client: client.get_links_from_note(site_path, note_path))


@cli.command("get-note-body-as-html")
def get_note_body_as_html(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help=SITE_PATH_HELP),
    note_path: str = typer.Argument(..., help=NOTE_PATH_HELP),
) -> None:
    """Get the note body as HTML."""
    dispatch(ctx, lambda client: client.get_note_body_as_html(site_path, note_path))


@cli.command("get-note-as-markdown")
def get_note_as_markdown(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help=SITE_PATH_HELP),
    note_path: str = typer.Argument(..., help=NOTE_PATH_HELP),
) -> None:
    """Get the note as Markdown."""
    dispatch(ctx, lambda client: client.get_note_as_markdown(site_path, note_path))


@cli.command("get-note-as-plain-text")
def get_note_as_plain_text(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help=SITE_PATH_HELP),
    note_path: str = typer.Argument(..., help=NOTE_PATH_HELP),
) -> None:
    """Get the note as plain text."""
    dispatch(ctx, lambda client: client.get_note_as_plain_text(site_path, note_path))


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


@cli.command("search-notes")
def search_notes(
    ctx: typer.Context,
    site_path: str = typer.Argument(..., help=SITE_PATH_HELP),
    term: str = typer.Argument(..., help="Search term."),
    mode: str = typer.Option("exact", "--mode", help="Search mode (exact or semantic)."),
) -> None:
    """Search notes."""
    dispatch(ctx, lambda client: client.search_notes(site_path, term, mode))
