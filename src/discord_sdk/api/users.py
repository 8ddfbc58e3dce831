"""Users API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from discord_sdk.models.channels import Channel
from discord_sdk.models.guilds import GuildMember, PartialGuild
from discord_sdk.models.users import Connection, User
from discord_sdk.routes import Route

if TYPE_CHECKING:
    from discord_sdk.http import HTTPClient


class UsersAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def me(self) -> User:
        r = await self._http.request(Route("GET", "/users/@me"))
        return User.model_validate(r.json())

    async def get(self, user_id: int) -> User:
        r = await self._http.request(Route("GET", "/users/{user_id}", user_id=user_id))
        return User.model_validate(r.json())

    async def modify_me(
        self, *, username: str | None = None, avatar: str | None = None
    ) -> User:
        """``avatar`` is a data URI; pass an empty string to remove it."""
        payload: dict[str, Any] = {}
        if username is not None:
            payload["username"] = username
        if avatar is not None:
            payload["avatar"] = avatar or None
        r = await self._http.request(Route("PATCH", "/users/@me"), json=payload)
        return User.model_validate(r.json())

    async def my_guilds(
        self,
        *,
        before: int | None = None,
        after: int | None = None,
        limit: int = 200,
        with_counts: bool = False,
    ) -> list[PartialGuild]:
        params: dict[str, Any] = {"limit": limit, "before": before, "after": after}
        if with_counts:
            params["with_counts"] = True
        r = await self._http.request(Route("GET", "/users/@me/guilds"), params=params)
        return [PartialGuild.model_validate(g) for g in r.json()]

    async def my_member(self, guild_id: int) -> GuildMember:
        r = await self._http.request(
            Route("GET", "/users/@me/guilds/{guild_id}/member", guild_id=guild_id)
        )
        return GuildMember.model_validate(r.json())

    async def leave_guild(self, guild_id: int) -> None:
        await self._http.request(Route("DELETE", "/users/@me/guilds/{guild_id}", guild_id=guild_id))

    async def create_dm(self, recipient_id: int) -> Channel:
        r = await self._http.request(
            Route("POST", "/users/@me/channels"), json={"recipient_id": str(recipient_id)}
        )
        return Channel.model_validate(r.json())

    async def connections(self) -> list[Connection]:
        r = await self._http.request(Route("GET", "/users/@me/connections"))
        return [Connection.model_validate(c) for c in r.json()]
