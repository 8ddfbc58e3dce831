"""Guild audit log API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from discord_sdk.models.audit_log import AuditLog
from discord_sdk.routes import Route

if TYPE_CHECKING:
    from discord_sdk.http import HTTPClient


class AuditLogAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def get(
        self,
        guild_id: int,
        *,
        user_id: int | None = None,
        action_type: int | None = None,
        before: int | None = None,
        after: int | None = None,
        limit: int = 50,
    ) -> AuditLog:
        if not 1 <= limit <= 100:
            raise ValueError(f"limit must be between 1 and 100, got {limit}")
        params: dict[str, Any] = {
            "user_id": user_id,
            "action_type": int(action_type) if action_type is not None else None,
            "before": before,
            "after": after,
            "limit": limit,
        }
        r = await self._http.request(
            Route("GET", "/guilds/{guild_id}/audit-logs", guild_id=guild_id), params=params
        )
        return AuditLog.model_validate(r.json())
