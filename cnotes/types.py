"""
cnotes/types.py

Centralized type definitions for the Collected Notes client.

The remote service owns the schema for sites and notes; the models here
simply mirror the fields this client reads. Keeping them in one place gives:

    • a single source of truth for response decoding
    • clear contracts between the client and the CLI layer
    • straightforward fixtures in tests

Records are constructed fresh from each response and never mutated, so the
models are frozen. Fields the service adds beyond these are ignored; the
fields read here are validated strictly, so "5" is not accepted as an id.
"""

from typing import Any, List, TypedDict

from pydantic import BaseModel, ConfigDict, TypeAdapter


# ---------------------------------------------------------------------------
# Site
# ---------------------------------------------------------------------------
# A top-level collection of notes. `site_path` is the stable routing key used
# in every URL; callers pass it, never the numeric id.
# ---------------------------------------------------------------------------
class Site(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    id: int
    name: str
    site_path: str


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------
# A single content item. `visibility` is a free-form tag (public, private,
# ...) whose value set belongs to the service and is not checked here.
# ---------------------------------------------------------------------------
class Note(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    id: int
    title: str
    body: str
    visibility: str


# ---------------------------------------------------------------------------
# SitePatch
# ---------------------------------------------------------------------------
# Payload for updating a site. The keys below are the ones the service is
# known to accept; total=False because every one of them is optional.
#
# This is a typing aid only. The client forwards whatever JSON the caller
# supplies, unmodified, and the service decides what is valid.
# ---------------------------------------------------------------------------
class SitePatch(TypedDict, total=False):
    site_path: str
    name: str
    headline: str
    about: str
    domain: str


# ---------------------------------------------------------------------------
# Response validators
# ---------------------------------------------------------------------------
# One adapter per response shape, built once at import. Each validates a raw
# JSON body straight into the typed result.
# ---------------------------------------------------------------------------
SiteAdapter: TypeAdapter[Site] = TypeAdapter(Site)
NoteAdapter: TypeAdapter[Note] = TypeAdapter(Note)
SiteListAdapter: TypeAdapter[List[Site]] = TypeAdapter(List[Site])
NoteListAdapter: TypeAdapter[List[Note]] = TypeAdapter(List[Note])
LinkListAdapter: TypeAdapter[List[str]] = TypeAdapter(List[str])


def to_jsonable(value: Any) -> Any:
    """
    Convert a client result into plain JSON-compatible Python data.

    Models become dicts, lists are converted element-wise, and everything
    else (strings, None) passes through unchanged.
    """
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value
