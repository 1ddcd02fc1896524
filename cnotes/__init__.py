"""
Public API for the Collected Notes command-line client.

Callers can rely on:

    from cnotes import CollectedNotesClient
    from cnotes import Site, Note
    from cnotes import CollectedNotesError

without needing to know anything about the internal module layout.
"""

from .client import CollectedNotesClient
from .errors import (
    CollectedNotesError,
    CredentialError,
    DecodeError,
    HttpStatusError,
    InputError,
    TransportError,
)
from .types import Note, Site, SitePatch

__version__ = "0.1.0"

__all__ = [
    "CollectedNotesClient",
    "CollectedNotesError",
    "CredentialError",
    "DecodeError",
    "HttpStatusError",
    "InputError",
    "Note",
    "Site",
    "SitePatch",
    "TransportError",
]
