from typing import Any

from discord_sdk.models.base import DiscordModel, Snowflake
from discord_sdk.models.channels import Channel
from discord_sdk.models.enums import InteractionCallbackType, InteractionType
from discord_sdk.models.guilds import GuildMember
from discord_sdk.models.messages import AllowedMentions, Attachment, Embed, Message
from discord_sdk.models.users import User


class InteractionDataOption(DiscordModel):
    name: str
    type: int
    value: str | int | float | bool | None = None
    options: list["InteractionDataOption"] | None = None
    focused: bool | None = None


class InteractionData(DiscordModel):
    id: Snowflake | None = None
    name: str | None = None
    type: int | None = None
    resolved: dict[str, Any] | None = None
    options: list[InteractionDataOption] | None = None
    guild_id: Snowflake | None = None
    target_id: Snowflake | None = None
    custom_id: str | None = None
    component_type: int | None = None
    values: list[str] | None = None


class Interaction(DiscordModel):
    id: Snowflake
    application_id: Snowflake
    type: InteractionType
    data: InteractionData | None = None
    guild_id: Snowflake | None = None
    channel: Channel | None = None
    channel_id: Snowflake | None = None
    member: GuildMember | None = None
    user: User | None = None
    token: str
    version: int = 1
    message: Message | None = None
    app_permissions: str | None = None
    locale: str | None = None
    guild_locale: str | None = None

    @property
    def invoker(self) -> User | None:
        """The user who triggered the interaction, in a guild or a DM."""
        if self.member is not None and self.member.user is not None:
            return self.member.user
        return self.user


class InteractionCallbackData(DiscordModel):
    tts: bool | None = None
    content: str | None = None
    embeds: list[Embed] | None = None
    allowed_mentions: AllowedMentions | None = None
    flags: int | None = None
    components: list[dict[str, Any]] | None = None
    attachments: list[Attachment] | None = None
    # autocomplete result
    choices: list[dict[str, Any]] | None = None
    # modal
    custom_id: str | None = None
    title: str | None = None


class InteractionResponse(DiscordModel):
    type: InteractionCallbackType
    data: InteractionCallbackData | None = None
