"""High-level Discord client composing the HTTP layer and API groups."""

from __future__ import annotations

from typing import Any

from discord_sdk.http import HTTPClient
from discord_sdk.rate_limit import RateLimiter


class Client:
    """Top-level SDK client.

    Usage::

        async with Client("bot-token") as client:
            me = await client.users.me()
            msg = await client.messages.create(channel_id, "hello")

    Keyword arguments are passed through to :class:`HTTPClient`
    (``base_url``, ``api_version``, ``timeout``, ``user_agent``,
    ``rate_limiter``, ``max_retries``).
    """

    def __init__(self, token: str | None = None, **http_options: Any) -> None:
        self.http = HTTPClient(token, **http_options)

        # Lazily populated API groups
        self._gateway: Any = None
        self._users: Any = None
        self._channels: Any = None
        self._messages: Any = None
        self._guilds: Any = None
        self._webhooks: Any = None
        self._interactions: Any = None
        self._commands: Any = None
        self._emoji: Any = None
        self._invites: Any = None
        self._audit_log: Any = None

    @property
    def rate_limiter(self) -> RateLimiter:
        return self.http.rate_limiter

    # --- API group properties ---

    @property
    def gateway(self) -> Any:
        if self._gateway is None:
            from discord_sdk.api.gateway import GatewayAPI
            self._gateway = GatewayAPI(self.http)
        return self._gateway

    @property
    def users(self) -> Any:
        if self._users is None:
            from discord_sdk.api.users import UsersAPI
            self._users = UsersAPI(self.http)
        return self._users

    @property
    def channels(self) -> Any:
        if self._channels is None:
            from discord_sdk.api.channels import ChannelsAPI
            self._channels = ChannelsAPI(self.http)
        return self._channels

    @property
    def messages(self) -> Any:
        if self._messages is None:
            from discord_sdk.api.messages import MessagesAPI
            self._messages = MessagesAPI(self.http)
        return self._messages

    @property
    def guilds(self) -> Any:
        if self._guilds is None:
            from discord_sdk.api.guilds import GuildsAPI
            self._guilds = GuildsAPI(self.http)
        return self._guilds

    @property
    def webhooks(self) -> Any:
        if self._webhooks is None:
            from discord_sdk.api.webhooks import WebhooksAPI
            self._webhooks = WebhooksAPI(self.http)
        return self._webhooks

    @property
    def interactions(self) -> Any:
        if self._interactions is None:
            from discord_sdk.api.interactions import InteractionsAPI
            self._interactions = InteractionsAPI(self.http)
        return self._interactions

    @property
    def commands(self) -> Any:
        if self._commands is None:
            from discord_sdk.api.commands import CommandsAPI
            self._commands = CommandsAPI(self.http)
        return self._commands

    @property
    def emoji(self) -> Any:
        if self._emoji is None:
            from discord_sdk.api.emoji import EmojiAPI
            self._emoji = EmojiAPI(self.http)
        return self._emoji

    @property
    def invites(self) -> Any:
        if self._invites is None:
            from discord_sdk.api.invites import InvitesAPI
            self._invites = InvitesAPI(self.http)
        return self._invites

    @property
    def audit_log(self) -> Any:
        if self._audit_log is None:
            from discord_sdk.api.audit_log import AuditLogAPI
            self._audit_log = AuditLogAPI(self.http)
        return self._audit_log

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
