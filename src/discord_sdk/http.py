"""HTTP client wrapping httpx with auth headers, rate limiting, and retry."""

from __future__ import annotations

import asyncio
import json as jsonlib
import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from discord_sdk.errors import DiscordHTTPError, DiscordNetworkError
from discord_sdk.models.errors import RateLimitResponse
from discord_sdk.rate_limit import RateLimiter
from discord_sdk.routes import Route

log = logging.getLogger(__name__)

API_BASE = "https://discord.com/api"
API_VERSION = 10
SDK_VERSION = "0.1.0"
USER_AGENT = f"DiscordBot (https://github.com/discord-sdk/discord-sdk, {SDK_VERSION})"

_MAX_RETRIES = 3
_BASE_RETRY_DELAY = 1.0
_RETRYABLE_STATUSES = {500, 502, 503, 504}


class HTTPClient:
    """Async HTTP client for the Discord REST API."""

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str = API_BASE,
        api_version: int = API_VERSION,
        timeout: float = 30.0,
        user_agent: str = USER_AGENT,
        rate_limiter: RateLimiter | None = None,
        max_retries: int = _MAX_RETRIES,
    ) -> None:
        self.base_url = f"{base_url.rstrip('/')}/v{api_version}"
        self._token = token
        self._user_agent = user_agent
        self._max_retries = max(1, max_retries)
        self.rate_limiter = rate_limiter if rate_limiter is not None else RateLimiter()
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
        )

    @property
    def token(self) -> str | None:
        return self._token

    @token.setter
    def token(self, value: str | None) -> None:
        self._token = value

    def _headers(self, reason: str | None = None) -> dict[str, str]:
        h: dict[str, str] = {"User-Agent": self._user_agent}
        if self._token:
            h["Authorization"] = f"Bot {self._token}"
        if reason is not None:
            h["X-Audit-Log-Reason"] = quote(reason, safe=" ")
        return h

    async def request(
        self,
        route: Route,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        files: list[tuple[str, bytes]] | None = None,
        reason: str | None = None,
    ) -> httpx.Response:
        """Send ``route`` through its rate-limit bucket, retrying 429s and 5xx."""
        headers = self._headers(reason)
        path = route.path
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        for attempt in range(self._max_retries):
            bucket = await self.rate_limiter.acquire(route.bucket_key)
            log.debug("%s %s (bucket %s)", route.method, path, bucket.key)

            try:
                response = await self._client.request(
                    route.method,
                    path,
                    params=params or None,
                    headers=headers,
                    **_body(json, files),
                )
            except httpx.TransportError as exc:
                bucket.release(None)
                raise DiscordNetworkError(str(exc)) from exc
            except BaseException:
                # Encoding errors, cancellation: no response, keep the state.
                bucket.release(None)
                raise

            bucket.release(response.headers)

            if response.status_code == 429:
                retry_after, is_global = _retry_after(response)
                log.warning(
                    "Rate limited on %s %s (global=%s), retrying in %.2fs",
                    route.method, path, is_global, retry_after,
                )
                if attempt < self._max_retries - 1:
                    if is_global:
                        self.rate_limiter.block_globally(retry_after)
                    else:
                        await asyncio.sleep(retry_after)
                    continue
                raise DiscordHTTPError.from_response(response)

            if response.status_code in _RETRYABLE_STATUSES:
                if attempt < self._max_retries - 1:
                    delay = _BASE_RETRY_DELAY * (2 ** attempt)
                    log.info(
                        "%s %s returned %d, retrying in %.1fs",
                        route.method, path, response.status_code, delay,
                    )
                    await asyncio.sleep(delay)
                    continue
                raise DiscordHTTPError.from_response(response)

            if response.status_code >= 400:
                raise DiscordHTTPError.from_response(response)

            return response

        # Should not reach here, but just in case
        raise DiscordHTTPError.from_response(response)  # type: ignore[possibly-undefined]

    async def close(self) -> None:
        await self._client.aclose()


def json_or_none(response: httpx.Response) -> Any:
    """Decoded JSON body, or ``None`` for empty (204) responses."""
    if response.status_code == 204 or not response.content:
        return None
    return response.json()


def _body(json: Any, files: list[tuple[str, bytes]] | None) -> dict[str, Any]:
    if not files:
        return {"json": json} if json is not None else {}
    multipart = {
        f"files[{i}]": (filename, content) for i, (filename, content) in enumerate(files)
    }
    data = {"payload_json": jsonlib.dumps(json)} if json is not None else None
    return {"files": multipart, "data": data}


def _retry_after(response: httpx.Response) -> tuple[float, bool]:
    """Delay and global flag of a 429, from the body or the Retry-After header."""
    try:
        body = RateLimitResponse.model_validate(response.json())
        return body.retry_after, body.global_
    except (ValueError, ValidationError):
        pass
    is_global = bool(response.headers.get("x-ratelimit-global"))
    ra_header = response.headers.get("retry-after")
    if ra_header:
        try:
            return float(ra_header), is_global
        except ValueError:
            log.warning("Unparseable Retry-After header: %r", ra_header)
    return _BASE_RETRY_DELAY, is_global
