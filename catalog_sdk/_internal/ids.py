"""Client-side identifier checks."""

import re
from collections.abc import Sequence

from catalog_sdk.exceptions import BadRequestError

ID_PATTERN = re.compile(r"[0-9A-Za-z]+")

INVALID_ID_MESSAGE = "invalid id"
BAD_REQUEST_MESSAGE = "bad request"


def is_valid_id(resource_id: object) -> bool:
    """Check that an identifier is a non-empty base62 string."""
    return isinstance(resource_id, str) and ID_PATTERN.fullmatch(resource_id) is not None


def validate_id(resource_id: str) -> None:
    """Raise BadRequestError("invalid id") for a malformed identifier."""
    if not is_valid_id(resource_id):
        raise BadRequestError(INVALID_ID_MESSAGE, 400)


def validate_ids(resource_ids: Sequence[str]) -> None:
    """Reject a batch containing any malformed identifier.

    A single malformed identifier is reported as "invalid id". Several of
    them make the whole batch ambiguous and are reported as "bad request".
    Both are the same error kind.
    """
    invalid = sum(1 for resource_id in resource_ids if not is_valid_id(resource_id))
    if invalid == 1:
        raise BadRequestError(INVALID_ID_MESSAGE, 400)
    if invalid > 1:
        raise BadRequestError(BAD_REQUEST_MESSAGE, 400)
