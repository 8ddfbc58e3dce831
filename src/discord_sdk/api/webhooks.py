"""Webhooks API methods."""

from __future__ import annotations

from typing import Any

from discord_sdk.api.messages import message_payload
from discord_sdk.http import HTTPClient, json_or_none
from discord_sdk.models.messages import AllowedMentions, Embed, Message
from discord_sdk.models.webhooks import Webhook
from discord_sdk.routes import Route

_WITH_TOKEN = "/webhooks/{webhook_id}/{webhook_token}"


class WebhooksAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def create(
        self,
        channel_id: int,
        name: str,
        *,
        avatar: str | None = None,
        reason: str | None = None,
    ) -> Webhook:
        payload: dict[str, Any] = {"name": name}
        if avatar is not None:
            payload["avatar"] = avatar
        r = await self._http.request(
            Route("POST", "/channels/{channel_id}/webhooks", channel_id=channel_id),
            json=payload,
            reason=reason,
        )
        return Webhook.model_validate(r.json())

    async def list_for_channel(self, channel_id: int) -> list[Webhook]:
        r = await self._http.request(
            Route("GET", "/channels/{channel_id}/webhooks", channel_id=channel_id)
        )
        return [Webhook.model_validate(w) for w in r.json()]

    async def list_for_guild(self, guild_id: int) -> list[Webhook]:
        r = await self._http.request(Route("GET", "/guilds/{guild_id}/webhooks", guild_id=guild_id))
        return [Webhook.model_validate(w) for w in r.json()]

    async def get(self, webhook_id: int) -> Webhook:
        r = await self._http.request(Route("GET", "/webhooks/{webhook_id}", webhook_id=webhook_id))
        return Webhook.model_validate(r.json())

    async def get_with_token(self, webhook_id: int, token: str) -> Webhook:
        r = await self._http.request(
            Route("GET", _WITH_TOKEN, webhook_id=webhook_id, webhook_token=token)
        )
        return Webhook.model_validate(r.json())

    async def modify(
        self,
        webhook_id: int,
        *,
        name: str | None = None,
        avatar: str | None = None,
        channel_id: int | None = None,
        reason: str | None = None,
    ) -> Webhook:
        payload: dict[str, Any] = {}
        if name is not None:
            payload["name"] = name
        if avatar is not None:
            payload["avatar"] = avatar
        if channel_id is not None:
            payload["channel_id"] = str(channel_id)
        r = await self._http.request(
            Route("PATCH", "/webhooks/{webhook_id}", webhook_id=webhook_id),
            json=payload,
            reason=reason,
        )
        return Webhook.model_validate(r.json())

    async def modify_with_token(
        self,
        webhook_id: int,
        token: str,
        *,
        name: str | None = None,
        avatar: str | None = None,
        reason: str | None = None,
    ) -> Webhook:
        payload: dict[str, Any] = {}
        if name is not None:
            payload["name"] = name
        if avatar is not None:
            payload["avatar"] = avatar
        r = await self._http.request(
            Route("PATCH", _WITH_TOKEN, webhook_id=webhook_id, webhook_token=token),
            json=payload,
            reason=reason,
        )
        return Webhook.model_validate(r.json())

    async def delete(self, webhook_id: int, *, reason: str | None = None) -> None:
        await self._http.request(
            Route("DELETE", "/webhooks/{webhook_id}", webhook_id=webhook_id), reason=reason
        )

    async def delete_with_token(
        self, webhook_id: int, token: str, *, reason: str | None = None
    ) -> None:
        await self._http.request(
            Route("DELETE", _WITH_TOKEN, webhook_id=webhook_id, webhook_token=token),
            reason=reason,
        )

    async def execute(
        self,
        webhook_id: int,
        token: str,
        content: str | None = None,
        *,
        embeds: list[Embed] | None = None,
        username: str | None = None,
        avatar_url: str | None = None,
        allowed_mentions: AllowedMentions | None = None,
        thread_id: int | None = None,
        wait: bool = False,
        files: list[tuple[str, bytes]] | None = None,
    ) -> Message | None:
        """Post a message as the webhook.

        The API only returns the created message when ``wait`` is true;
        otherwise this returns ``None``.
        """
        payload = message_payload(
            content,
            embeds=embeds,
            allowed_mentions=allowed_mentions,
            username=username,
            avatar_url=avatar_url,
        )
        params: dict[str, Any] = {"thread_id": thread_id}
        if wait:
            params["wait"] = True
        r = await self._http.request(
            Route("POST", _WITH_TOKEN, webhook_id=webhook_id, webhook_token=token),
            json=payload,
            params=params,
            files=files,
        )
        data = json_or_none(r)
        return Message.model_validate(data) if data is not None else None

    # --- Webhook messages ---

    async def get_message(
        self, webhook_id: int, token: str, message_id: int, *, thread_id: int | None = None
    ) -> Message:
        r = await self._http.request(
            Route(
                "GET",
                _WITH_TOKEN + "/messages/{message_id}",
                webhook_id=webhook_id,
                webhook_token=token,
                message_id=message_id,
            ),
            params={"thread_id": thread_id},
        )
        return Message.model_validate(r.json())

    async def edit_message(
        self,
        webhook_id: int,
        token: str,
        message_id: int,
        content: str | None = None,
        *,
        embeds: list[Embed] | None = None,
        allowed_mentions: AllowedMentions | None = None,
        thread_id: int | None = None,
    ) -> Message:
        payload = message_payload(content, embeds=embeds, allowed_mentions=allowed_mentions)
        r = await self._http.request(
            Route(
                "PATCH",
                _WITH_TOKEN + "/messages/{message_id}",
                webhook_id=webhook_id,
                webhook_token=token,
                message_id=message_id,
            ),
            json=payload,
            params={"thread_id": thread_id},
        )
        return Message.model_validate(r.json())

    async def delete_message(
        self, webhook_id: int, token: str, message_id: int, *, thread_id: int | None = None
    ) -> None:
        await self._http.request(
            Route(
                "DELETE",
                _WITH_TOKEN + "/messages/{message_id}",
                webhook_id=webhook_id,
                webhook_token=token,
                message_id=message_id,
            ),
            params={"thread_id": thread_id},
        )
