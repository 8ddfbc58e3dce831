"""SDK exception hierarchy."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from discord_sdk.models.errors import ErrorResponse


class DiscordHTTPError(Exception):
    """Raised when the Discord API returns a non-2xx response."""

    def __init__(
        self,
        status: int,
        error: ErrorResponse | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.error = error
        self.response = response
        code = error.code if error else "UNKNOWN"
        msg = error.message if error else f"HTTP {status}"
        super().__init__(f"[{status}] {code}: {msg}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> DiscordHTTPError:
        """Build from an httpx response, attempting to parse the error body."""
        error: ErrorResponse | None = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and "message" in body:
            try:
                error = ErrorResponse.model_validate(body)
            except ValidationError:
                error = None
        return cls(status=response.status_code, error=error, response=response)

    @property
    def code(self) -> int | None:
        """Discord's JSON error code (e.g. 10008 for Unknown Message)."""
        return self.error.code if self.error else None

    @property
    def retry_after(self) -> float | None:
        if self.error:
            return self.error.retry_after
        return None


class DiscordNetworkError(Exception):
    """Raised when a transport-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class RateLimitHeaderError(ValueError):
    """A rate-limit response header could not be parsed.

    Usually means the API changed its header contract; the bucket that saw
    it keeps its previous state.
    """

    def __init__(self, header: str, value: str | None) -> None:
        self.header = header
        self.value = value
        super().__init__(f"Invalid {header} header: {value!r}")
