"""
Typed HTTP client for the Collected Notes REST API.

Each public method maps one logical operation onto exactly one HTTP request
and one typed result:

    • sites   → list / create / get / update / delete
    • notes   → list / create / get / update / delete
    • render  → links, HTML body, Markdown, plain text
    • search  → notes matching a term within a site

Every request carries `Authorization: Bearer <token>`. Responses are checked
for a success status, then decoded with pydantic into Site / Note models, or
passed through as raw text for the rendering endpoints.

The client keeps no state beyond its configuration. A fresh httpx.Client is
opened for each call and closed once the single round trip completes.
"""

import json
from typing import Any, Dict, List, Optional, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from cnotes.errors import DecodeError, HttpStatusError, TransportError
from cnotes.logging_utils import log_verbose
from cnotes.types import (
    LinkListAdapter,
    Note,
    NoteAdapter,
    NoteListAdapter,
    Site,
    SiteAdapter,
    SiteListAdapter,
    SitePatch,
)

T = TypeVar("T")

JSON_ACCEPT = "application/json"
TEXT_ACCEPT = "text/plain"

# Marks a request that carries no body (distinct from a JSON `null` body).
_NO_BODY = object()


# ---------------------------------------------------------------------------
# Helper: decode a response body into a typed value
# ---------------------------------------------------------------------------


def _decode(response: httpx.Response, adapter: TypeAdapter[T]) -> T:
    """
    Validate a JSON response body against the expected shape.

    Raises DecodeError when the body is not valid JSON or does not match
    the model, with the pydantic error chained as the cause.
    """
    try:
        return adapter.validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(f"error decoding response body: {e}") from e


# ---------------------------------------------------------------------------
# Main client class
# ---------------------------------------------------------------------------


class CollectedNotesClient:
    """
    Client for the Collected Notes API.

    Parameters
    ----------
    base_url : str
        API root, e.g. "https://api.collectednotes.com". Stored verbatim;
        no trailing-slash normalization is applied.
    token : str
        Opaque bearer token sent on every request.
    timeout : float | None
        Request timeout in seconds. None (the default) waits indefinitely.
    transport : httpx.BaseTransport | None
        Optional transport override, used by tests to inject a mock service.
    verbose : bool
        Print request lines and response statuses to stderr.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        verbose: bool = False,
    ) -> None:
        self.base_url = base_url
        self.token = token
        self.timeout = timeout
        self.transport = transport
        self.verbose = verbose

    # -----------------------------------------------------------------------
    # Internal helper: perform one authenticated request
    # -----------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        payload: Any = _NO_BODY,
        params: Optional[Dict[str, str]] = None,
        accept: str = JSON_ACCEPT,
    ) -> httpx.Response:
        """
        Send one request and return the response once its status is known
        to be a success.

        Raises
        ------
        TransportError
            If the request could not be completed (connection refused,
            timeout, malformed URL, ...).
        HttpStatusError
            If the service answered with a non-2xx status.
        """
        url = f"{self.base_url}{path}"
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": accept,
        }

        content: Optional[bytes] = None
        if payload is not _NO_BODY:
            content = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"

        log_verbose(f"{method} {url}", self.verbose)

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as http:
                response = http.request(
                    method,
                    url,
                    content=content,
                    params=params,
                    headers=headers,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"error sending request for url ({url}): {e}") from e
        except UnicodeEncodeError as e:
            # Header values (the bearer token included) must be ASCII.
            raise TransportError(f"error building request for url ({url}): {e}") from e

        log_verbose(f"{response.status_code} {response.reason_phrase}", self.verbose)

        if not response.is_success:
            raise HttpStatusError(response.status_code, response.reason_phrase, response.text)

        return response

    # -----------------------------------------------------------------------
    # Sites
    # -----------------------------------------------------------------------

    def get_sites(self) -> List[Site]:
        """
        List the sites owned by the token holder.

        The service may answer a successful request with no body at all;
        that is treated as "no sites" rather than a decode failure.
        """
        response = self._request("GET", "/sites")
        if not response.text.strip():
            return []
        return _decode(response, SiteListAdapter)

    def create_site(self, site_path: str, name: str) -> Site:
        """
        Create a site and return it as echoed back by the service.

        Unlike get_sites, an empty success body is an error here: a created
        resource is always expected in the response.
        """
        response = self._request(
            "POST", "/sites", payload={"site_path": site_path, "name": name}
        )
        if not response.text.strip():
            raise DecodeError("Empty response body")
        return _decode(response, SiteAdapter)

    def get_site(self, site_path: str) -> Site:
        response = self._request("GET", f"/sites/{site_path}")
        return _decode(response, SiteAdapter)

    def update_site(self, site_path: str, data: SitePatch) -> Site:
        """
        Update a site with a caller-supplied JSON payload.

        `data` is sent exactly as given; the service is the authority on
        which fields are accepted.
        """
        response = self._request("PUT", f"/sites/{site_path}", payload=data)
        return _decode(response, SiteAdapter)

    def delete_site(self, site_path: str) -> None:
        self._request("DELETE", f"/sites/{site_path}")

    # -----------------------------------------------------------------------
    # Notes
    # -----------------------------------------------------------------------

    def get_notes_for_site(self, site_path: str) -> List[Note]:
        response = self._request("GET", f"/sites/{site_path}/notes")
        return _decode(response, NoteListAdapter)

    def create_note_for_site(self, site_path: str, body: str, visibility: str) -> Note:
        response = self._request(
            "POST",
            f"/sites/{site_path}/notes",
            payload={"body": body, "visibility": visibility},
        )
        return _decode(response, NoteAdapter)

    def get_note_by_path(self, site_path: str, note_path: str) -> Note:
        response = self._request("GET", f"/sites/{site_path}/notes/{note_path}")
        return _decode(response, NoteAdapter)

    def update_note_by_path(
        self, site_path: str, note_path: str, body: str, visibility: str
    ) -> Note:
        response = self._request(
            "PUT",
            f"/sites/{site_path}/notes/{note_path}",
            payload={"body": body, "visibility": visibility},
        )
        return _decode(response, NoteAdapter)

    def delete_note_by_path(self, site_path: str, note_path: str) -> None:
        self._request("DELETE", f"/sites/{site_path}/notes/{note_path}")

    # -----------------------------------------------------------------------
    # Rendering
    # -----------------------------------------------------------------------

    def get_links_from_note(self, site_path: str, note_path: str) -> List[str]:
        """Return the URLs referenced by a note, in document order."""
        response = self._request("GET", f"/sites/{site_path}/notes/{note_path}/links")
        return _decode(response, LinkListAdapter)

    def get_note_body_as_html(self, site_path: str, note_path: str) -> str:
        response = self._request("GET", f"/sites/{site_path}/notes/{note_path}/body")
        return response.text

    def get_note_as_markdown(self, site_path: str, note_path: str) -> str:
        response = self._request(
            "GET", f"/sites/{site_path}/notes/{note_path}.md", accept=TEXT_ACCEPT
        )
        return response.text

    def get_note_as_plain_text(self, site_path: str, note_path: str) -> str:
        response = self._request(
            "GET", f"/sites/{site_path}/notes/{note_path}.txt", accept=TEXT_ACCEPT
        )
        return response.text

    # -----------------------------------------------------------------------
    # Search
    # -----------------------------------------------------------------------

    def search_notes(self, site_path: str, term: str, mode: str = "exact") -> List[Note]:
        """
        Search a site's notes.

        `mode` is forwarded as-is; the service defines which modes exist
        (currently "exact" and "semantic").
        """
        response = self._request(
            "GET",
            f"/sites/{site_path}/notes/search",
            params={"term": term, "mode": mode},
        )
        return _decode(response, NoteListAdapter)
