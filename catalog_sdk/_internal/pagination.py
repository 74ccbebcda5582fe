"""Pagination window normalization for sub-resource listings."""

from pydantic import BaseModel, Field

from catalog_sdk.exceptions import BadRequestError

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 20
MAX_LIMIT = 50


class PaginationWindow(BaseModel):
    """Slice of an ordered sub-collection."""

    offset: int = Field(default=DEFAULT_OFFSET, ge=0)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)

    model_config = {"frozen": True}

    def as_params(self) -> dict[str, int]:
        return {"offset": self.offset, "limit": self.limit}


def normalize_window(offset: int | None = None, limit: int | None = None) -> PaginationWindow:
    """Apply defaults and bounds to a caller-supplied window.

    A missing or zero limit means the default page size. Out-of-range values
    raise BadRequestError so no request is sent.
    """
    if limit is None or limit == 0:
        limit = DEFAULT_LIMIT
    elif limit > MAX_LIMIT:
        raise BadRequestError(f"Invalid limit, cannot be greater than {MAX_LIMIT}", 400)
    elif limit < 0:
        raise BadRequestError("Invalid limit, cannot be negative", 400)

    if offset is None:
        offset = DEFAULT_OFFSET
    elif offset < 0:
        raise BadRequestError("Invalid offset, cannot be negative", 400)

    return PaginationWindow(offset=offset, limit=limit)
