from datetime import datetime
from typing import Any

from pydantic import Field

from discord_sdk.models.base import DiscordModel, Snowflake
from discord_sdk.models.channels import Channel
from discord_sdk.models.guilds import Emoji
from discord_sdk.models.users import User


class Attachment(DiscordModel):
    id: Snowflake
    filename: str
    description: str | None = None
    content_type: str | None = None
    size: int = 0
    url: str
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None
    ephemeral: bool = False


class EmbedFooter(DiscordModel):
    text: str
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedMedia(DiscordModel):
    url: str | None = None
    proxy_url: str | None = None
    height: int | None = None
    width: int | None = None


class EmbedProvider(DiscordModel):
    name: str | None = None
    url: str | None = None


class EmbedAuthor(DiscordModel):
    name: str
    url: str | None = None
    icon_url: str | None = None
    proxy_icon_url: str | None = None


class EmbedField(DiscordModel):
    name: str
    value: str
    inline: bool = False


class Embed(DiscordModel):
    title: str | None = None
    type: str | None = None
    description: str | None = None
    url: str | None = None
    timestamp: datetime | None = None
    color: int | None = None
    footer: EmbedFooter | None = None
    image: EmbedMedia | None = None
    thumbnail: EmbedMedia | None = None
    video: EmbedMedia | None = None
    provider: EmbedProvider | None = None
    author: EmbedAuthor | None = None
    fields: list[EmbedField] | None = None


class Reaction(DiscordModel):
    count: int = 0
    me: bool = False
    emoji: Emoji


class MessageReference(DiscordModel):
    message_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    fail_if_not_exists: bool | None = None


class AllowedMentions(DiscordModel):
    parse: list[str] = Field(default_factory=list)
    roles: list[Snowflake] | None = None
    users: list[Snowflake] | None = None
    replied_user: bool | None = None

    @classmethod
    def none(cls) -> "AllowedMentions":
        """Suppress every mention in the message."""
        return cls(parse=[])


class Message(DiscordModel):
    id: Snowflake
    channel_id: Snowflake
    guild_id: Snowflake | None = None
    author: User | None = None
    content: str = ""
    timestamp: datetime
    edited_timestamp: datetime | None = None
    tts: bool = False
    mention_everyone: bool = False
    mentions: list[User] = []
    mention_roles: list[Snowflake] = []
    attachments: list[Attachment] = []
    embeds: list[Embed] = []
    reactions: list[Reaction] = []
    nonce: int | str | None = None
    pinned: bool = False
    webhook_id: Snowflake | None = None
    type: int = 0
    application_id: Snowflake | None = None
    message_reference: MessageReference | None = None
    flags: int = 0
    referenced_message: "Message | None" = None
    thread: Channel | None = None
    components: list[dict[str, Any]] = []

    @property
    def jump_url(self) -> str:
        guild = self.guild_id or "@me"
        return f"https://discord.com/channels/{guild}/{self.channel_id}/{self.id}"
