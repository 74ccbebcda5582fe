"""Credential state consumed by the catalog clients.

Token acquisition lives outside the SDK. The SDK only reads ``expires_at``
and asks the provider to refresh when it has passed.
"""

import asyncio
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

from pydantic import BaseModel, field_validator

from catalog_sdk.exceptions import CatalogConfigError

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class CredentialState(BaseModel):
    """Access token and the moment it stops being valid."""

    token: str
    expires_at: datetime

    model_config = {"frozen": True}

    @field_validator("expires_at")
    @classmethod
    def expires_at_aware(cls, v: datetime) -> datetime:
        # Naive timestamps are taken as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class CredentialProvider(Protocol):
    """Holder of the current credential state, owned by the auth collaborator."""

    @property
    def current(self) -> CredentialState: ...

    async def refresh(self) -> CredentialState: ...


class StaticCredentialProvider:
    """Pre-populated access token that cannot be refreshed."""

    def __init__(self, token: str, expires_at: datetime | None = None) -> None:
        self._state = CredentialState(
            token=token,
            expires_at=expires_at or datetime.max.replace(tzinfo=UTC),
        )

    @property
    def current(self) -> CredentialState:
        return self._state

    async def refresh(self) -> CredentialState:
        raise CatalogConfigError("Access token expired and no refresh is available")


class CredentialGuard:
    """Hands out a live access token before each dispatch.

    When the provider's state has expired, the first caller triggers a refresh
    and every concurrent caller waits for that same refresh instead of
    starting its own. A failed refresh fails every one of those callers.
    """

    def __init__(self, provider: CredentialProvider, *, clock: Clock = utc_now) -> None:
        self._provider = provider
        self._clock = clock
        self._refresh_task: asyncio.Task[CredentialState] | None = None

    @property
    def provider(self) -> CredentialProvider:
        return self._provider

    async def access_token(self) -> str:
        state = self._provider.current
        if not state.is_expired(self._clock()):
            return state.token

        # Concurrent callers await the same in-flight refresh and share its outcome
        if self._refresh_task is None:
            self._refresh_task = asyncio.ensure_future(self._refresh())
        state = await asyncio.shield(self._refresh_task)
        return state.token

    async def _refresh(self) -> CredentialState:
        try:
            return await self._provider.refresh()
        finally:
            self._refresh_task = None
