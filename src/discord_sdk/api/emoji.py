"""Guild emoji API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from discord_sdk.models.guilds import Emoji
from discord_sdk.routes import Route

if TYPE_CHECKING:
    from discord_sdk.http import HTTPClient


class EmojiAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def list(self, guild_id: int) -> list[Emoji]:
        r = await self._http.request(Route("GET", "/guilds/{guild_id}/emojis", guild_id=guild_id))
        return [Emoji.model_validate(e) for e in r.json()]

    async def get(self, guild_id: int, emoji_id: int) -> Emoji:
        r = await self._http.request(
            Route("GET", "/guilds/{guild_id}/emojis/{emoji_id}", guild_id=guild_id, emoji_id=emoji_id)
        )
        return Emoji.model_validate(r.json())

    async def create(
        self,
        guild_id: int,
        name: str,
        image: str,
        *,
        roles: list[int] | None = None,
        reason: str | None = None,
    ) -> Emoji:
        """``image`` is a data URI (``data:image/png;base64,...``)."""
        payload: dict[str, Any] = {"name": name, "image": image}
        if roles is not None:
            payload["roles"] = [str(r) for r in roles]
        r = await self._http.request(
            Route("POST", "/guilds/{guild_id}/emojis", guild_id=guild_id),
            json=payload,
            reason=reason,
        )
        return Emoji.model_validate(r.json())

    async def modify(
        self,
        guild_id: int,
        emoji_id: int,
        *,
        name: str | None = None,
        roles: list[int] | None = None,
        reason: str | None = None,
    ) -> Emoji:
        payload: dict[str, Any] = {}
        if name is not None:
            payload["name"] = name
        if roles is not None:
            payload["roles"] = [str(r) for r in roles]
        r = await self._http.request(
            Route("PATCH", "/guilds/{guild_id}/emojis/{emoji_id}", guild_id=guild_id, emoji_id=emoji_id),
            json=payload,
            reason=reason,
        )
        return Emoji.model_validate(r.json())

    async def delete(self, guild_id: int, emoji_id: int, *, reason: str | None = None) -> None:
        await self._http.request(
            Route("DELETE", "/guilds/{guild_id}/emojis/{emoji_id}", guild_id=guild_id, emoji_id=emoji_id),
            reason=reason,
        )
