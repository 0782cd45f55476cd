"""
Access token cache

Daraja issues OAuth bearer tokens valid for about an hour. One TokenCache
owns a single slot holding the latest token, so a client that pushes many
payments authenticates once per token lifetime.
"""

import asyncio
import time
from typing import Callable, Dict, Optional, Tuple

import httpx

from daraja.errors import AuthenticationError
from daraja.models import CachedToken, Credentials, GrantType
from daraja.services.base import handle_response
from daraja.utils.logger import get_logger

logger = get_logger(__name__)


class TokenCache:
    """Single-slot, single-flight cache of Daraja access tokens."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        auth_url: str,
        timeout: float = 15.0,
        expiry_margin: int = 0,
        clock: Callable[[], float] = time.time,
    ):
        self._http = http_client
        self.auth_url = auth_url
        self.timeout = timeout
        self.expiry_margin = expiry_margin
        self._clock = clock

        self._cached: Optional[CachedToken] = None
        self._owner: Optional[str] = None
        # Refreshes in flight, keyed by consumer key
        self._pending: Dict[str, asyncio.Task] = {}

    @property
    def cached(self) -> Optional[CachedToken]:
        return self._cached

    def invalidate(self) -> None:
        """Drop the cached token; the next get_token() re-authenticates."""
        self._cached = None
        self._owner = None

    async def get_token(self, credentials: Credentials) -> str:
        """
        Return a valid access token, fetching a new one on a miss.

        Concurrent misses await the same refresh and receive its token or
        its error; a failed refresh is not retried for them.

        Raises:
            AuthenticationError: If the token exchange fails. The cache is
                left as it was.
        """
        token = self._lookup(credentials)
        if token:
            return token

        key = credentials.consumer_key
        refresh = self._pending.get(key)
        if refresh is None:
            refresh = asyncio.ensure_future(self._refresh(credentials))
            refresh.add_done_callback(_consume_exception)
            self._pending[key] = refresh

        # A cancelled waiter must not cancel the refresh other callers share
        return await asyncio.shield(refresh)

    def _lookup(self, credentials: Credentials) -> Optional[str]:
        if (
            self._cached is not None
            and self._owner == credentials.consumer_key
            and self._cached.is_valid(self._clock())
        ):
            return self._cached.value
        return None

    async def _refresh(self, credentials: Credentials) -> str:
        try:
            access_token, expires_in = await self._fetch_new_token(credentials)

            self._cached = CachedToken(
                value=access_token,
                expires_at=self._clock() + expires_in - self.expiry_margin,
            )
            self._owner = credentials.consumer_key

            logger.debug("Daraja access token refreshed (expires in %ds)", expires_in)
            return access_token
        finally:
            self._pending.pop(credentials.consumer_key, None)

    async def _fetch_new_token(self, credentials: Credentials) -> Tuple[str, int]:
        try:
            resp = await self._http.get(
                self.auth_url,
                params={"grant_type": GrantType.CLIENT_CREDENTIALS.value},
                auth=(credentials.consumer_key, credentials.consumer_secret),
                timeout=self.timeout,
            )
        except httpx.HTTPError as exc:
            logger.warning("Daraja token request failed: %s", exc)
            raise AuthenticationError(
                f"Error fetching access token: {str(exc) or type(exc).__name__}"
            ) from exc

        try:
            data = handle_response(resp, "oauth", AuthenticationError)
        except AuthenticationError as exc:
            logger.warning("Daraja token request rejected: %s", exc.message)
            raise AuthenticationError(
                f"Error fetching access token: {exc.message}",
                status_code=exc.status_code,
                response_data=exc.response_data,
            ) from exc

        if not isinstance(data, dict):
            raise AuthenticationError(
                "Error fetching access token: response body is not a JSON object",
                status_code=resp.status_code,
                response_data=data,
            )

        access_token = data.get("access_token")
        if not access_token:
            raise AuthenticationError(
                "Error fetching access token: response did not include an access_token",
                status_code=resp.status_code,
                response_data=data,
            )

        try:
            expires_in = int(data.get("expires_in", 0))
        except (TypeError, ValueError) as exc:
            raise AuthenticationError(
                f"Error fetching access token: invalid expires_in {data.get('expires_in')!r}",
                status_code=resp.status_code,
                response_data=data,
            ) from exc

        return access_token, expires_in


def _consume_exception(task: asyncio.Task) -> None:
    # Waiters may all have been cancelled; keep asyncio from logging the error
    if not task.cancelled():
        task.exception()
