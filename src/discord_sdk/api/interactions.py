"""Interaction responses and followup messages.

Followups live under the application's webhook and are bucketed per
interaction token, so their routes name their major parameters explicitly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from discord_sdk.api.messages import message_payload
from discord_sdk.models.interactions import Interaction, InteractionResponse
from discord_sdk.models.messages import AllowedMentions, Embed, Message
from discord_sdk.routes import Route

if TYPE_CHECKING:
    from discord_sdk.http import HTTPClient

_FOLLOWUP_MAJOR = ("application_id", "interaction_token")


def callback_route(interaction: Interaction) -> Route:
    return Route(
        "POST",
        "/interactions/{interaction_id}/{interaction_token}/callback",
        interaction_id=interaction.id,
        interaction_token=interaction.token,
    )


def original_response_route(method: str, application_id: int, token: str) -> Route:
    return Route(
        method,
        "/webhooks/{application_id}/{interaction_token}/messages/@original",
        major_parameters=_FOLLOWUP_MAJOR,
        application_id=application_id,
        interaction_token=token,
    )


def followup_route(
    method: str, application_id: int, token: str, message_id: int | None = None
) -> Route:
    if message_id is None:
        return Route(
            method,
            "/webhooks/{application_id}/{interaction_token}",
            major_parameters=_FOLLOWUP_MAJOR,
            application_id=application_id,
            interaction_token=token,
        )
    return Route(
        method,
        "/webhooks/{application_id}/{interaction_token}/messages/{message_id}",
        major_parameters=_FOLLOWUP_MAJOR,
        application_id=application_id,
        interaction_token=token,
        message_id=message_id,
    )


class InteractionsAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def create_response(
        self, interaction: Interaction, response: InteractionResponse
    ) -> None:
        await self._http.request(callback_route(interaction), json=response.to_payload())

    async def get_original_response(self, application_id: int, token: str) -> Message:
        r = await self._http.request(original_response_route("GET", application_id, token))
        return Message.model_validate(r.json())

    async def edit_original_response(
        self,
        application_id: int,
        token: str,
        content: str | None = None,
        *,
        embeds: list[Embed] | None = None,
        allowed_mentions: AllowedMentions | None = None,
        components: list[dict[str, Any]] | None = None,
    ) -> Message:
        payload = message_payload(
            content, embeds=embeds, allowed_mentions=allowed_mentions, components=components
        )
        r = await self._http.request(
            original_response_route("PATCH", application_id, token), json=payload
        )
        return Message.model_validate(r.json())

    async def delete_original_response(self, application_id: int, token: str) -> None:
        await self._http.request(original_response_route("DELETE", application_id, token))

    async def create_followup(
        self,
        application_id: int,
        token: str,
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
        r = await self._http.request(followup_route("POST", application_id, token), json=payload)
        return Message.model_validate(r.json())

    async def get_followup(self, application_id: int, token: str, message_id: int) -> Message:
        r = await self._http.request(followup_route("GET", application_id, token, message_id))
        return Message.model_validate(r.json())

    async def edit_followup(
        self,
        application_id: int,
        token: str,
        message_id: int,
        content: str | None = None,
        *,
        embeds: list[Embed] | None = None,
        allowed_mentions: AllowedMentions | None = None,
        components: list[dict[str, Any]] | None = None,
    ) -> Message:
        payload = message_payload(
            content, embeds=embeds, allowed_mentions=allowed_mentions, components=components
        )
        r = await self._http.request(
            followup_route("PATCH", application_id, token, message_id), json=payload
        )
        return Message.model_validate(r.json())

    async def delete_followup(self, application_id: int, token: str, message_id: int) -> None:
        await self._http.request(followup_route("DELETE", application_id, token, message_id))
