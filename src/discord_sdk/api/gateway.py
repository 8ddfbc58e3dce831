"""Gateway discovery endpoints (the websocket client itself is out of scope)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from discord_sdk.models.gateway import GatewayBotInfo, GatewayInfo
from discord_sdk.routes import Route

if TYPE_CHECKING:
    from discord_sdk.http import HTTPClient


class GatewayAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def get(self) -> GatewayInfo:
        r = await self._http.request(Route("GET", "/gateway"))
        return GatewayInfo.model_validate(r.json())

    async def get_bot(self) -> GatewayBotInfo:
        """Gateway URL plus recommended shard count and session start limits."""
        r = await self._http.request(Route("GET", "/gateway/bot"))
        return GatewayBotInfo.model_validate(r.json())
