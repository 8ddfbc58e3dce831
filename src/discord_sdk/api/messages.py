"""Messages API methods, including reactions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from discord_sdk.models.guilds import Emoji
from discord_sdk.models.messages import AllowedMentions, Embed, Message, MessageReference
from discord_sdk.models.users import User
from discord_sdk.routes import Route

if TYPE_CHECKING:
    from discord_sdk.http import HTTPClient


def message_payload(
    content: str | None = None,
    *,
    embeds: list[Embed] | None = None,
    allowed_mentions: AllowedMentions | None = None,
    components: list[dict[str, Any]] | None = None,
    flags: int | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Shared body of create/edit calls for messages and webhook messages."""
    payload: dict[str, Any] = {}
    if content is not None:
        payload["content"] = content
    if embeds is not None:
        payload["embeds"] = [e.to_payload() for e in embeds]
    if allowed_mentions is not None:
        payload["allowed_mentions"] = allowed_mentions.to_payload()
    if components is not None:
        payload["components"] = components
    if flags is not None:
        payload["flags"] = int(flags)
    payload.update({k: v for k, v in extra.items() if v is not None})
    return payload


def _emoji(emoji: str | Emoji) -> str:
    return emoji.api_name if isinstance(emoji, Emoji) else emoji


class MessagesAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def list(
        self,
        channel_id: int,
        *,
        around: int | None = None,
        before: int | None = None,
        after: int | None = None,
        limit: int = 50,
    ) -> list[Message]:
        params: dict[str, Any] = {"limit": limit, "around": around, "before": before, "after": after}
        r = await self._http.request(
            Route("GET", "/channels/{channel_id}/messages", channel_id=channel_id), params=params
        )
        return [Message.model_validate(m) for m in r.json()]

    async def get(self, channel_id: int, message_id: int) -> Message:
        r = await self._http.request(
            Route(
                "GET",
                "/channels/{channel_id}/messages/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            )
        )
        return Message.model_validate(r.json())

    async def create(
        self,
        channel_id: int,
        content: str | None = None,
        *,
        embeds: list[Embed] | None = None,
        reply_to: int | None = None,
        allowed_mentions: AllowedMentions | None = None,
        components: list[dict[str, Any]] | None = None,
        tts: bool | None = None,
        flags: int | None = None,
        files: list[tuple[str, bytes]] | None = None,
    ) -> Message:
        message_reference = None
        if reply_to is not None:
            message_reference = MessageReference(message_id=reply_to).to_payload()
        payload = message_payload(
            content,
            embeds=embeds,
            allowed_mentions=allowed_mentions,
            components=components,
            flags=flags,
            tts=tts,
            message_reference=message_reference,
        )
        r = await self._http.request(
            Route("POST", "/channels/{channel_id}/messages", channel_id=channel_id),
            json=payload,
            files=files,
        )
        return Message.model_validate(r.json())

    async def edit(
        self,
        channel_id: int,
        message_id: int,
        content: str | None = None,
        *,
        embeds: list[Embed] | None = None,
        allowed_mentions: AllowedMentions | None = None,
        components: list[dict[str, Any]] | None = None,
        flags: int | None = None,
    ) -> Message:
        payload = message_payload(
            content,
            embeds=embeds,
            allowed_mentions=allowed_mentions,
            components=components,
            flags=flags,
        )
        r = await self._http.request(
            Route(
                "PATCH",
                "/channels/{channel_id}/messages/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            ),
            json=payload,
        )
        return Message.model_validate(r.json())

    async def delete(self, channel_id: int, message_id: int, *, reason: str | None = None) -> None:
        await self._http.request(
            Route(
                "DELETE",
                "/channels/{channel_id}/messages/{message_id}",
                channel_id=channel_id,
                message_id=message_id,
            ),
            reason=reason,
        )

    async def bulk_delete(
        self, channel_id: int, message_ids: list[int], *, reason: str | None = None
    ) -> None:
        """Delete 2-100 messages not older than two weeks."""
        if not 2 <= len(message_ids) <= 100:
            raise ValueError("bulk_delete takes between 2 and 100 message ids")
        await self._http.request(
            Route("POST", "/channels/{channel_id}/messages/bulk-delete", channel_id=channel_id),
            json={"messages": [str(m) for m in message_ids]},
            reason=reason,
        )

    async def crosspost(self, channel_id: int, message_id: int) -> Message:
        r = await self._http.request(
            Route(
                "POST",
                "/channels/{channel_id}/messages/{message_id}/crosspost",
                channel_id=channel_id,
                message_id=message_id,
            )
        )
        return Message.model_validate(r.json())

    # --- Reactions ---

    async def add_reaction(self, channel_id: int, message_id: int, emoji: str | Emoji) -> None:
        await self._http.request(
            Route(
                "PUT",
                "/channels/{channel_id}/messages/{message_id}/reactions/{emoji}/@me",
                channel_id=channel_id,
                message_id=message_id,
                emoji=_emoji(emoji),
            )
        )

    async def remove_own_reaction(
        self, channel_id: int, message_id: int, emoji: str | Emoji
    ) -> None:
        await self._http.request(
            Route(
                "DELETE",
                "/channels/{channel_id}/messages/{message_id}/reactions/{emoji}/@me",
                channel_id=channel_id,
                message_id=message_id,
                emoji=_emoji(emoji),
            )
        )

    async def remove_user_reaction(
        self, channel_id: int, message_id: int, emoji: str | Emoji, user_id: int
    ) -> None:
        await self._http.request(
            Route(
                "DELETE",
                "/channels/{channel_id}/messages/{message_id}/reactions/{emoji}/{user_id}",
                channel_id=channel_id,
                message_id=message_id,
                emoji=_emoji(emoji),
                user_id=user_id,
            )
        )

    async def list_reactions(
        self,
        channel_id: int,
        message_id: int,
        emoji: str | Emoji,
        *,
        after: int | None = None,
        limit: int = 25,
    ) -> list[User]:
        r = await self._http.request(
            Route(
                "GET",
                "/channels/{channel_id}/messages/{message_id}/reactions/{emoji}",
                channel_id=channel_id,
                message_id=message_id,
                emoji=_emoji(emoji),
            ),
            params={"after": after, "limit": limit},
        )
        return [User.model_validate(u) for u in r.json()]

    async def clear_reactions(self, channel_id: int, message_id: int) -> None:
        await self._http.request(
            Route(
                "DELETE",
                "/channels/{channel_id}/messages/{message_id}/reactions",
                channel_id=channel_id,
                message_id=message_id,
            )
        )

    async def clear_emoji_reactions(
        self, channel_id: int, message_id: int, emoji: str | Emoji
    ) -> None:
        await self._http.request(
            Route(
                "DELETE",
                "/channels/{channel_id}/messages/{message_id}/reactions/{emoji}",
                channel_id=channel_id,
                message_id=message_id,
                emoji=_emoji(emoji),
            )
        )
