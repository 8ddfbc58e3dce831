"""Guilds API methods: guild settings, channels, members, bans and roles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from discord_sdk.models.channels import Channel, ThreadList
from discord_sdk.models.guilds import Ban, Guild, GuildMember, GuildPreview, Role
from discord_sdk.routes import Route

if TYPE_CHECKING:
    from discord_sdk.http import HTTPClient


class GuildsAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def get(self, guild_id: int, *, with_counts: bool = False) -> Guild:
        params = {"with_counts": True} if with_counts else None
        r = await self._http.request(
            Route("GET", "/guilds/{guild_id}", guild_id=guild_id), params=params
        )
        return Guild.model_validate(r.json())

    async def preview(self, guild_id: int) -> GuildPreview:
        r = await self._http.request(Route("GET", "/guilds/{guild_id}/preview", guild_id=guild_id))
        return GuildPreview.model_validate(r.json())

    async def modify(self, guild_id: int, *, reason: str | None = None, **fields: Any) -> Guild:
        r = await self._http.request(
            Route("PATCH", "/guilds/{guild_id}", guild_id=guild_id), json=fields, reason=reason
        )
        return Guild.model_validate(r.json())

    async def delete(self, guild_id: int) -> None:
        await self._http.request(Route("DELETE", "/guilds/{guild_id}", guild_id=guild_id))

    # --- Channels ---

    async def channels(self, guild_id: int) -> list[Channel]:
        r = await self._http.request(Route("GET", "/guilds/{guild_id}/channels", guild_id=guild_id))
        return [Channel.model_validate(c) for c in r.json()]

    async def create_channel(
        self,
        guild_id: int,
        name: str,
        *,
        type: int = 0,
        reason: str | None = None,
        **fields: Any,
    ) -> Channel:
        payload: dict[str, Any] = {"name": name, "type": int(type), **fields}
        r = await self._http.request(
            Route("POST", "/guilds/{guild_id}/channels", guild_id=guild_id),
            json=payload,
            reason=reason,
        )
        return Channel.model_validate(r.json())

    async def active_threads(self, guild_id: int) -> ThreadList:
        r = await self._http.request(
            Route("GET", "/guilds/{guild_id}/threads/active", guild_id=guild_id)
        )
        return ThreadList.model_validate(r.json())

    # --- Members ---

    async def get_member(self, guild_id: int, user_id: int) -> GuildMember:
        r = await self._http.request(
            Route("GET", "/guilds/{guild_id}/members/{user_id}", guild_id=guild_id, user_id=user_id)
        )
        return GuildMember.model_validate(r.json())

    async def list_members(
        self, guild_id: int, *, limit: int = 1, after: int | None = None
    ) -> list[GuildMember]:
        r = await self._http.request(
            Route("GET", "/guilds/{guild_id}/members", guild_id=guild_id),
            params={"limit": limit, "after": after},
        )
        return [GuildMember.model_validate(m) for m in r.json()]

    async def search_members(self, guild_id: int, query: str, *, limit: int = 1) -> list[GuildMember]:
        r = await self._http.request(
            Route("GET", "/guilds/{guild_id}/members/search", guild_id=guild_id),
            params={"query": query, "limit": limit},
        )
        return [GuildMember.model_validate(m) for m in r.json()]

    async def modify_member(
        self, guild_id: int, user_id: int, *, reason: str | None = None, **fields: Any
    ) -> GuildMember:
        """Update nick, roles, mute, deaf, channel_id or communication_disabled_until."""
        r = await self._http.request(
            Route("PATCH", "/guilds/{guild_id}/members/{user_id}", guild_id=guild_id, user_id=user_id),
            json=fields,
            reason=reason,
        )
        return GuildMember.model_validate(r.json())

    async def add_member_role(
        self, guild_id: int, user_id: int, role_id: int, *, reason: str | None = None
    ) -> None:
        await self._http.request(
            Route(
                "PUT",
                "/guilds/{guild_id}/members/{user_id}/roles/{role_id}",
                guild_id=guild_id,
                user_id=user_id,
                role_id=role_id,
            ),
            reason=reason,
        )

    async def remove_member_role(
        self, guild_id: int, user_id: int, role_id: int, *, reason: str | None = None
    ) -> None:
        await self._http.request(
            Route(
                "DELETE",
                "/guilds/{guild_id}/members/{user_id}/roles/{role_id}",
                guild_id=guild_id,
                user_id=user_id,
                role_id=role_id,
            ),
            reason=reason,
        )

    async def remove_member(self, guild_id: int, user_id: int, *, reason: str | None = None) -> None:
        await self._http.request(
            Route("DELETE", "/guilds/{guild_id}/members/{user_id}", guild_id=guild_id, user_id=user_id),
            reason=reason,
        )

    # --- Bans ---

    async def bans(
        self,
        guild_id: int,
        *,
        limit: int = 1000,
        before: int | None = None,
        after: int | None = None,
    ) -> list[Ban]:
        r = await self._http.request(
            Route("GET", "/guilds/{guild_id}/bans", guild_id=guild_id),
            params={"limit": limit, "before": before, "after": after},
        )
        return [Ban.model_validate(b) for b in r.json()]

    async def get_ban(self, guild_id: int, user_id: int) -> Ban:
        r = await self._http.request(
            Route("GET", "/guilds/{guild_id}/bans/{user_id}", guild_id=guild_id, user_id=user_id)
        )
        return Ban.model_validate(r.json())

    async def create_ban(
        self,
        guild_id: int,
        user_id: int,
        *,
        delete_message_seconds: int | None = None,
        reason: str | None = None,
    ) -> None:
        payload: dict[str, Any] = {}
        if delete_message_seconds is not None:
            payload["delete_message_seconds"] = delete_message_seconds
        await self._http.request(
            Route("PUT", "/guilds/{guild_id}/bans/{user_id}", guild_id=guild_id, user_id=user_id),
            json=payload,
            reason=reason,
        )

    async def remove_ban(self, guild_id: int, user_id: int, *, reason: str | None = None) -> None:
        await self._http.request(
            Route("DELETE", "/guilds/{guild_id}/bans/{user_id}", guild_id=guild_id, user_id=user_id),
            reason=reason,
        )

    # --- Roles ---

    async def roles(self, guild_id: int) -> list[Role]:
        r = await self._http.request(Route("GET", "/guilds/{guild_id}/roles", guild_id=guild_id))
        return [Role.model_validate(role) for role in r.json()]

    async def create_role(
        self,
        guild_id: int,
        *,
        name: str | None = None,
        permissions: int | None = None,
        color: int | None = None,
        hoist: bool | None = None,
        mentionable: bool | None = None,
        reason: str | None = None,
    ) -> Role:
        payload: dict[str, Any] = {}
        if name is not None:
            payload["name"] = name
        if permissions is not None:
            payload["permissions"] = str(int(permissions))
        if color is not None:
            payload["color"] = color
        if hoist is not None:
            payload["hoist"] = hoist
        if mentionable is not None:
            payload["mentionable"] = mentionable
        r = await self._http.request(
            Route("POST", "/guilds/{guild_id}/roles", guild_id=guild_id),
            json=payload,
            reason=reason,
        )
        return Role.model_validate(r.json())

    async def modify_role(
        self, guild_id: int, role_id: int, *, reason: str | None = None, **fields: Any
    ) -> Role:
        if "permissions" in fields and fields["permissions"] is not None:
            fields["permissions"] = str(int(fields["permissions"]))
        r = await self._http.request(
            Route("PATCH", "/guilds/{guild_id}/roles/{role_id}", guild_id=guild_id, role_id=role_id),
            json=fields,
            reason=reason,
        )
        return Role.model_validate(r.json())

    async def delete_role(self, guild_id: int, role_id: int, *, reason: str | None = None) -> None:
        await self._http.request(
            Route("DELETE", "/guilds/{guild_id}/roles/{role_id}", guild_id=guild_id, role_id=role_id),
            reason=reason,
        )
