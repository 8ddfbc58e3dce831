"""Invites API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from discord_sdk.models.invites import Invite
from discord_sdk.routes import Route

if TYPE_CHECKING:
    from discord_sdk.http import HTTPClient


class InvitesAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def get(
        self,
        code: str,
        *,
        with_counts: bool = False,
        with_expiration: bool = False,
        guild_scheduled_event_id: int | None = None,
    ) -> Invite:
        params: dict[str, Any] = {"guild_scheduled_event_id": guild_scheduled_event_id}
        if with_counts:
            params["with_counts"] = True
        if with_expiration:
            params["with_expiration"] = True
        r = await self._http.request(Route("GET", "/invites/{code}", code=code), params=params)
        return Invite.model_validate(r.json())

    async def delete(self, code: str, *, reason: str | None = None) -> Invite:
        r = await self._http.request(Route("DELETE", "/invites/{code}", code=code), reason=reason)
        return Invite.model_validate(r.json())

    async def list_for_channel(self, channel_id: int) -> list[Invite]:
        r = await self._http.request(
            Route("GET", "/channels/{channel_id}/invites", channel_id=channel_id)
        )
        return [Invite.model_validate(i) for i in r.json()]

    async def create(
        self,
        channel_id: int,
        *,
        max_age: int | None = None,
        max_uses: int | None = None,
        temporary: bool | None = None,
        unique: bool | None = None,
        reason: str | None = None,
    ) -> Invite:
        """Create an invite; the API defaults to 24 hours and unlimited uses."""
        payload: dict[str, Any] = {}
        if max_age is not None:
            payload["max_age"] = max_age
        if max_uses is not None:
            payload["max_uses"] = max_uses
        if temporary is not None:
            payload["temporary"] = temporary
        if unique is not None:
            payload["unique"] = unique
        r = await self._http.request(
            Route("POST", "/channels/{channel_id}/invites", channel_id=channel_id),
            json=payload,
            reason=reason,
        )
        return Invite.model_validate(r.json())

    async def list_for_guild(self, guild_id: int) -> list[Invite]:
        r = await self._http.request(Route("GET", "/guilds/{guild_id}/invites", guild_id=guild_id))
        return [Invite.model_validate(i) for i in r.json()]
