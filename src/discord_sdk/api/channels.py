"""Channels API methods: channel settings, permissions, pins and threads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from discord_sdk.models.channels import Channel, FollowedChannel, ThreadMember
from discord_sdk.models.enums import OverwriteType
from discord_sdk.models.messages import Message
from discord_sdk.routes import Route

if TYPE_CHECKING:
    from discord_sdk.http import HTTPClient


class ChannelsAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def get(self, channel_id: int) -> Channel:
        r = await self._http.request(Route("GET", "/channels/{channel_id}", channel_id=channel_id))
        return Channel.model_validate(r.json())

    async def modify(self, channel_id: int, *, reason: str | None = None, **fields: Any) -> Channel:
        """Update channel settings; ``fields`` are sent as given (``None`` clears)."""
        r = await self._http.request(
            Route("PATCH", "/channels/{channel_id}", channel_id=channel_id),
            json=fields,
            reason=reason,
        )
        return Channel.model_validate(r.json())

    async def delete(self, channel_id: int, *, reason: str | None = None) -> Channel:
        r = await self._http.request(
            Route("DELETE", "/channels/{channel_id}", channel_id=channel_id), reason=reason
        )
        return Channel.model_validate(r.json())

    async def trigger_typing(self, channel_id: int) -> None:
        await self._http.request(Route("POST", "/channels/{channel_id}/typing", channel_id=channel_id))

    async def follow(self, channel_id: int, webhook_channel_id: int) -> FollowedChannel:
        r = await self._http.request(
            Route("POST", "/channels/{channel_id}/followers", channel_id=channel_id),
            json={"webhook_channel_id": str(webhook_channel_id)},
        )
        return FollowedChannel.model_validate(r.json())

    # --- Permission overwrites ---

    async def edit_permissions(
        self,
        channel_id: int,
        overwrite_id: int,
        *,
        type: OverwriteType,
        allow: int = 0,
        deny: int = 0,
        reason: str | None = None,
    ) -> None:
        await self._http.request(
            Route(
                "PUT",
                "/channels/{channel_id}/permissions/{overwrite_id}",
                channel_id=channel_id,
                overwrite_id=overwrite_id,
            ),
            json={"type": int(type), "allow": str(allow), "deny": str(deny)},
            reason=reason,
        )

    async def delete_permission(
        self, channel_id: int, overwrite_id: int, *, reason: str | None = None
    ) -> None:
        await self._http.request(
            Route(
                "DELETE",
                "/channels/{channel_id}/permissions/{overwrite_id}",
                channel_id=channel_id,
                overwrite_id=overwrite_id,
            ),
            reason=reason,
        )

    # --- Pins ---

    async def list_pins(self, channel_id: int) -> list[Message]:
        r = await self._http.request(Route("GET", "/channels/{channel_id}/pins", channel_id=channel_id))
        return [Message.model_validate(m) for m in r.json()]

    async def pin(self, channel_id: int, message_id: int, *, reason: str | None = None) -> None:
        await self._http.request(
            Route(
                "PUT",
                "/channels/{channel_id}/pins/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            ),
            reason=reason,
        )

    async def unpin(self, channel_id: int, message_id: int, *, reason: str | None = None) -> None:
        await self._http.request(
            Route(
                "DELETE",
                "/channels/{channel_id}/pins/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            ),
            reason=reason,
        )

    # --- Threads ---

    async def start_thread_from_message(
        self,
        channel_id: int,
        message_id: int,
        name: str,
        *,
        auto_archive_duration: int | None = None,
        rate_limit_per_user: int | None = None,
        reason: str | None = None,
    ) -> Channel:
        payload: dict[str, Any] = {"name": name}
        if auto_archive_duration is not None:
            payload["auto_archive_duration"] = auto_archive_duration
        if rate_limit_per_user is not None:
            payload["rate_limit_per_user"] = rate_limit_per_user
        r = await self._http.request(
            Route(
                "POST",
                "/channels/{channel_id}/messages/{message_id}/threads",
                channel_id=channel_id,
                message_id=message_id,
            ),
            json=payload,
            reason=reason,
        )
        return Channel.model_validate(r.json())

    async def start_thread(
        self,
        channel_id: int,
        name: str,
        *,
        type: int | None = None,
        auto_archive_duration: int | None = None,
        invitable: bool | None = None,
        rate_limit_per_user: int | None = None,
        reason: str | None = None,
    ) -> Channel:
        payload: dict[str, Any] = {"name": name}
        if type is not None:
            payload["type"] = int(type)
        if auto_archive_duration is not None:
            payload["auto_archive_duration"] = auto_archive_duration
        if invitable is not None:
            payload["invitable"] = invitable
        if rate_limit_per_user is not None:
            payload["rate_limit_per_user"] = rate_limit_per_user
        r = await self._http.request(
            Route("POST", "/channels/{channel_id}/threads", channel_id=channel_id),
            json=payload,
            reason=reason,
        )
        return Channel.model_validate(r.json())

    async def join_thread(self, channel_id: int) -> None:
        await self._http.request(
            Route("PUT", "/channels/{channel_id}/thread-members/@me", channel_id=channel_id)
        )

    async def leave_thread(self, channel_id: int) -> None:
        await self._http.request(
            Route("DELETE", "/channels/{channel_id}/thread-members/@me", channel_id=channel_id)
        )

    async def add_thread_member(self, channel_id: int, user_id: int) -> None:
        await self._http.request(
            Route(
                "PUT",
                "/channels/{channel_id}/thread-members/{user_id}",
                channel_id=channel_id,
                user_id=user_id,
            )
        )

    async def remove_thread_member(self, channel_id: int, user_id: int) -> None:
        await self._http.request(
            Route(
                "DELETE",
                "/channels/{channel_id}/thread-members/{user_id}",
                channel_id=channel_id,
                user_id=user_id,
            )
        )

    async def list_thread_members(
        self, channel_id: int, *, with_member: bool = False, after: int | None = None, limit: int = 100
    ) -> list[ThreadMember]:
        params: dict[str, Any] = {"limit": limit, "after": after}
        if with_member:
            params["with_member"] = True
        r = await self._http.request(
            Route("GET", "/channels/{channel_id}/thread-members", channel_id=channel_id),
            params=params,
        )
        return [ThreadMember.model_validate(m) for m in r.json()]
