"""Public exceptions for the Catalog SDK."""

import json
from typing import Any, ClassVar, Literal

ErrorKind = Literal["bad_request", "not_found", "request_failed"]


def format_error_text(status_code: int | None, message: str) -> str:
    """Render the stable `{"status": <n>, "message": "<text>"}` error text."""
    return json.dumps({"status": status_code, "message": message}, ensure_ascii=False)


class CatalogError(Exception):
    """Base exception for all Catalog SDK errors."""


class CatalogAPIError(CatalogError):
    """Error from the catalog API or the transport in front of it.

    The structured fields are the primary contract. ``str(error)`` renders the
    same status/message pair as JSON text for callers that match on it.
    """

    kind: ClassVar[ErrorKind] = "request_failed"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        body: Any = None,
    ) -> None:
        super().__init__(format_error_text(status_code, message))
        self.message = message
        self.status_code = status_code
        self.body = body

    @property
    def status(self) -> int | None:
        return self.status_code


class BadRequestError(CatalogAPIError):
    """Malformed input, detected locally or answered with HTTP 400."""

    kind: ClassVar[ErrorKind] = "bad_request"


class NotFoundError(CatalogAPIError):
    """The identifier is well formed but no such resource exists (HTTP 404)."""

    kind: ClassVar[ErrorKind] = "not_found"


class RequestFailedError(CatalogAPIError):
    """Any other non-2xx response, or a transport-level failure."""

    kind: ClassVar[ErrorKind] = "request_failed"


class CatalogConfigError(CatalogError):
    """Configuration error (missing env vars, invalid config)."""
