"""SDK models mirroring the Discord API's JSON objects."""

from discord_sdk.models.base import DiscordModel, Snowflake
from discord_sdk.models.errors import ErrorResponse, RateLimitResponse

from discord_sdk.models.applications import (
    Application,
    ApplicationCommand,
    ApplicationCommandOption,
    ApplicationCommandOptionChoice,
)
from discord_sdk.models.audit_log import AuditLog, AuditLogChange, AuditLogEntry, AuditLogEntryInfo
from discord_sdk.models.channels import (
    Channel,
    FollowedChannel,
    Overwrite,
    ThreadList,
    ThreadMember,
    ThreadMetadata,
)
from discord_sdk.models.enums import (
    ApplicationCommandOptionType,
    ApplicationCommandType,
    AuditLogEvent,
    ChannelType,
    InteractionCallbackType,
    InteractionType,
    InviteTargetType,
    MessageFlags,
    MessageType,
    OverwriteType,
    PremiumType,
    UserFlags,
    WebhookType,
)
from discord_sdk.models.gateway import GatewayBotInfo, GatewayInfo, SessionStartLimit
from discord_sdk.models.guilds import (
    Ban,
    Emoji,
    Guild,
    GuildMember,
    GuildPreview,
    PartialGuild,
    Role,
)
from discord_sdk.models.interactions import (
    Interaction,
    InteractionCallbackData,
    InteractionData,
    InteractionDataOption,
    InteractionResponse,
)
from discord_sdk.models.invites import Invite
from discord_sdk.models.messages import (
    AllowedMentions,
    Attachment,
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedMedia,
    EmbedProvider,
    Message,
    MessageReference,
    Reaction,
)
from discord_sdk.models.users import Connection, User
from discord_sdk.models.webhooks import Webhook

__all__ = [
    "AllowedMentions",
    "Application",
    "ApplicationCommand",
    "ApplicationCommandOption",
    "ApplicationCommandOptionChoice",
    "ApplicationCommandOptionType",
    "ApplicationCommandType",
    "Attachment",
    "AuditLog",
    "AuditLogChange",
    "AuditLogEntry",
    "AuditLogEntryInfo",
    "AuditLogEvent",
    "Ban",
    "Channel",
    "ChannelType",
    "Connection",
    "DiscordModel",
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "EmbedMedia",
    "EmbedProvider",
    "Emoji",
    "ErrorResponse",
    "FollowedChannel",
    "GatewayBotInfo",
    "GatewayInfo",
    "Guild",
    "GuildMember",
    "GuildPreview",
    "Interaction",
    "InteractionCallbackData",
    "InteractionCallbackType",
    "InteractionData",
    "InteractionDataOption",
    "InteractionResponse",
    "InteractionType",
    "Invite",
    "InviteTargetType",
    "Message",
    "MessageFlags",
    "MessageReference",
    "MessageType",
    "Overwrite",
    "OverwriteType",
    "PartialGuild",
    "PremiumType",
    "RateLimitResponse",
    "Reaction",
    "Role",
    "SessionStartLimit",
    "Snowflake",
    "ThreadList",
    "ThreadMember",
    "ThreadMetadata",
    "User",
    "UserFlags",
    "Webhook",
    "WebhookType",
]
