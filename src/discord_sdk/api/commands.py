"""Application command registration, global and per guild."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from discord_sdk.models.applications import ApplicationCommand
from discord_sdk.routes import Route

if TYPE_CHECKING:
    from discord_sdk.http import HTTPClient

_GLOBAL = "/applications/{application_id}/commands"
_GUILD = "/applications/{application_id}/guilds/{guild_id}/commands"


class CommandsAPI:
    """Global commands when ``guild_id`` is ``None``, guild commands otherwise."""

    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    @staticmethod
    def _route(
        method: str, application_id: int, guild_id: int | None, command_id: int | None = None
    ) -> Route:
        path = _GLOBAL if guild_id is None else _GUILD
        params: dict[str, Any] = {"application_id": application_id}
        if guild_id is not None:
            params["guild_id"] = guild_id
        if command_id is not None:
            path += "/{command_id}"
            params["command_id"] = command_id
        return Route(method, path, **params)

    async def list(
        self,
        application_id: int,
        *,
        guild_id: int | None = None,
        with_localizations: bool = False,
    ) -> list[ApplicationCommand]:
        params = {"with_localizations": True} if with_localizations else None
        r = await self._http.request(self._route("GET", application_id, guild_id), params=params)
        return [ApplicationCommand.model_validate(c) for c in r.json()]

    async def create(
        self, application_id: int, command: ApplicationCommand, *, guild_id: int | None = None
    ) -> ApplicationCommand:
        """Create a command; an existing command with the same name is replaced."""
        r = await self._http.request(
            self._route("POST", application_id, guild_id), json=_command_payload(command)
        )
        return ApplicationCommand.model_validate(r.json())

    async def get(
        self, application_id: int, command_id: int, *, guild_id: int | None = None
    ) -> ApplicationCommand:
        r = await self._http.request(self._route("GET", application_id, guild_id, command_id))
        return ApplicationCommand.model_validate(r.json())

    async def edit(
        self,
        application_id: int,
        command_id: int,
        *,
        guild_id: int | None = None,
        **fields: Any,
    ) -> ApplicationCommand:
        r = await self._http.request(
            self._route("PATCH", application_id, guild_id, command_id), json=fields
        )
        return ApplicationCommand.model_validate(r.json())

    async def delete(
        self, application_id: int, command_id: int, *, guild_id: int | None = None
    ) -> None:
        await self._http.request(self._route("DELETE", application_id, guild_id, command_id))

    async def bulk_overwrite(
        self,
        application_id: int,
        commands: list[ApplicationCommand],
        *,
        guild_id: int | None = None,
    ) -> list[ApplicationCommand]:
        """Replace every command in scope with ``commands``."""
        r = await self._http.request(
            self._route("PUT", application_id, guild_id),
            json=[_command_payload(c) for c in commands],
        )
        return [ApplicationCommand.model_validate(c) for c in r.json()]


def _command_payload(command: ApplicationCommand) -> dict[str, Any]:
    return command.model_dump(
        mode="json",
        exclude_none=True,
        exclude={"id", "application_id", "guild_id", "version"},
    )
