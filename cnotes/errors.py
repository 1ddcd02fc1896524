"""
cnotes/errors.py

Failure types raised by the API client and the command dispatcher.

Every failure an invocation can end with is one of the classes below. They
share the CollectedNotesError base so the CLI can catch a single type at the
command boundary, while callers that need to branch can match on the class
(or on the `kind` tag) instead of parsing messages:

    • TransportError   → the request never produced a response
    • HttpStatusError  → the service answered with a non-2xx status
    • DecodeError      → the response body is not the expected shape
    • CredentialError  → no bearer token could be resolved
    • InputError       → malformed local input (e.g., invalid JSON)

None of these are retried. Each one is terminal for the current invocation.
"""


class CollectedNotesError(Exception):
    """Base class for every failure surfaced by cnotes."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Remote failures
# ---------------------------------------------------------------------------


class TransportError(CollectedNotesError):
    """
    Connection, timeout or protocol failure below the HTTP status layer.

    The originating httpx exception is chained as `__cause__`.
    """

    kind = "transport"


class HttpStatusError(CollectedNotesError):
    """
    The service returned a non-success HTTP status.

    Parameters
    ----------
    status_code : int
        Numeric HTTP status (e.g., 404).
    reason : str
        Reason phrase reported alongside the status (e.g., "Not Found").
    body : str
        Raw response body, kept verbatim.
    """

    kind = "http_status"

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        status = f"{status_code} {reason}".strip()
        super().__init__(f"HTTP error: {status}. Body: {body}")


class DecodeError(CollectedNotesError):
    """The response body could not be decoded into the expected type."""

    kind = "decode"


# ---------------------------------------------------------------------------
# Local failures (raised before any request is issued)
# ---------------------------------------------------------------------------


class CredentialError(CollectedNotesError):
    """No bearer token was supplied and none could be read from disk."""

    kind = "credential"


class InputError(CollectedNotesError):
    """Command-line input could not be turned into a request."""

    kind = "input"
