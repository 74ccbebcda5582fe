"""Resource client for catalog lookups."""

import sys
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from catalog_sdk._internal.auth import CredentialGuard
from catalog_sdk._internal.chunking import chunk
from catalog_sdk._internal.http import Transport, TransportResponse, error_for_response
from catalog_sdk._internal.ids import validate_id, validate_ids
from catalog_sdk._internal.pagination import normalize_window
from catalog_sdk.exceptions import RequestFailedError
from catalog_sdk.models import Album, Page, Track

MAX_IDS_PER_REQUEST = 20

ResourceT = TypeVar("ResourceT", bound=BaseModel)
ItemT = TypeVar("ItemT", bound=BaseModel)


class ResourceClient(Generic[ResourceT, ItemT]):
    """Lookups for one catalog resource type and its paginated sub-resource.

    Every request asks the credential guard for a live token first. Non-2xx
    responses are raised as BadRequestError, NotFoundError or
    RequestFailedError. Nothing is retried.
    """

    def __init__(
        self,
        transport: Transport,
        credentials: CredentialGuard,
        *,
        path: str,
        batch_key: str,
        resource_model: type[ResourceT],
        sub_path: str,
        item_model: type[ItemT],
        debug: bool = False,
    ) -> None:
        """Initialize the resource client.

        Args:
            transport: Transport used for every request.
            credentials: Guard handing out a live access token.
            path: Collection path, e.g. "/albums".
            batch_key: Key holding the resources in a batch response.
            resource_model: Model for a single resource.
            sub_path: Sub-collection path below a resource, e.g. "/tracks".
            item_model: Model for sub-collection items.
            debug: Enable debug logging to stderr.
        """
        self._transport = transport
        self._credentials = credentials
        self._path = path
        self._batch_key = batch_key
        self._resource_model = resource_model
        self._sub_path = sub_path
        self._item_model = item_model
        self._debug = debug

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[catalog-sdk:{self._batch_key}] {message}", file=sys.stderr)

    async def _request(self, path: str, params: dict[str, Any] | None = None) -> TransportResponse:
        """Send an authorized GET and raise the mapped error on non-2xx."""
        token = await self._credentials.access_token()
        self._log_debug(f"GET {path} {params or {}}")
        response = await self._transport.send(
            "GET",
            path,
            params=params,
            headers={"Authorization": f"Bearer {token}"},
        )
        if not response.ok:
            error = error_for_response(response)
            self._log_debug(f"GET {path} failed: {error}")
            raise error
        return response

    @staticmethod
    def _parse(model: type[Any], response: TransportResponse, payload: Any) -> Any:
        """Validate a 2xx payload, raising RequestFailedError when it does not fit."""
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise RequestFailedError(
                f"Malformed response: {e.error_count()} validation error(s)",
                response.status,
                body=response.body,
            ) from e

    @staticmethod
    def _with_market(params: dict[str, Any], market: str | None) -> dict[str, Any]:
        if market is not None:
            params["market"] = market
        return params

    async def get(self, resource_id: str, *, market: str | None = None) -> ResourceT:
        """Fetch a single resource.

        Args:
            resource_id: Base62 identifier of the resource.
            market: Optional ISO 3166-1 alpha-2 country code.

        Returns:
            The resource, including its first page of sub-resources.
        """
        validate_id(resource_id)
        response = await self._request(
            f"{self._path}/{resource_id}", self._with_market({}, market) or None
        )
        return self._parse(self._resource_model, response, response.body)

    async def list(
        self, resource_ids: Sequence[str], *, market: str | None = None
    ) -> list[ResourceT | None]:
        """Fetch several resources in input order.

        Any number of identifiers is accepted. They are sent in chunks of at
        most MAX_IDS_PER_REQUEST, one request per chunk, and the results are
        concatenated in input order. Duplicates are kept. The first failing
        chunk raises and no further chunks are sent.

        Args:
            resource_ids: Base62 identifiers, duplicates allowed.
            market: Optional ISO 3166-1 alpha-2 country code.

        Returns:
            One entry per identifier. Entries the service reports as null
            (well-formed but unknown identifiers) are None.
        """
        validate_ids(resource_ids)

        results: list[ResourceT | None] = []
        chunks = chunk(resource_ids, MAX_IDS_PER_REQUEST)
        for index, ids in enumerate(chunks):
            self._log_debug(f"Fetching chunk {index + 1}/{len(chunks)} ({len(ids)} ids)")
            params = self._with_market({"ids": ",".join(ids)}, market)
            response = await self._request(self._path, params)
            items = (
                response.body.get(self._batch_key) if isinstance(response.body, dict) else None
            )
            if not isinstance(items, list) or len(items) != len(ids):
                raise RequestFailedError(
                    f"Malformed batch response: expected {len(ids)} {self._batch_key}",
                    response.status,
                    body=response.body,
                )
            results.extend(
                None if item is None else self._parse(self._resource_model, response, item)
                for item in items
            )
        return results

    async def sub_resource(
        self,
        resource_id: str,
        *,
        offset: int | None = None,
        limit: int | None = None,
        market: str | None = None,
    ) -> Page[ItemT]:
        """Fetch one page of a resource's sub-collection.

        Args:
            resource_id: Base62 identifier of the parent resource.
            offset: Index of the first item, default 0.
            limit: Page size, 1 to 50. None or 0 means the default of 20.
            market: Optional ISO 3166-1 alpha-2 country code.

        Returns:
            The page exactly as reported by the service.
        """
        window = normalize_window(offset, limit)
        validate_id(resource_id)
        params = self._with_market(window.as_params(), market)
        response = await self._request(f"{self._path}/{resource_id}{self._sub_path}", params)
        page_model = Page[self._item_model]  # type: ignore[valid-type]
        return self._parse(page_model, response, response.body)


class AlbumsClient(ResourceClient[Album, Track]):
    """Album lookups: single, batched and track listings."""

    def __init__(
        self, transport: Transport, credentials: CredentialGuard, *, debug: bool = False
    ) -> None:
        super().__init__(
            transport,
            credentials,
            path="/albums",
            batch_key="albums",
            resource_model=Album,
            sub_path="/tracks",
            item_model=Track,
            debug=debug,
        )

    async def tracks(
        self,
        album_id: str,
        *,
        offset: int | None = None,
        limit: int | None = None,
        market: str | None = None,
    ) -> Page[Track]:
        """Fetch one page of an album's tracks. See `sub_resource`."""
        return await self.sub_resource(album_id, offset=offset, limit=limit, market=market)
