from datetime import datetime

from discord_sdk.models.base import DiscordModel, Snowflake
from discord_sdk.models.users import User


class Role(DiscordModel):
    id: Snowflake
    name: str
    color: int = 0
    hoist: bool = False
    icon: str | None = None
    unicode_emoji: str | None = None
    position: int = 0
    permissions: str = "0"
    managed: bool = False
    mentionable: bool = False
    flags: int = 0


class Emoji(DiscordModel):
    id: Snowflake | None = None
    name: str | None = None
    roles: list[Snowflake] = []
    user: User | None = None
    require_colons: bool | None = None
    managed: bool | None = None
    animated: bool = False
    available: bool | None = None

    @property
    def api_name(self) -> str:
        """Form used in reaction routes: ``name:id`` or the unicode character."""
        if self.id is None:
            return self.name or ""
        return f"{self.name}:{self.id}"


class GuildMember(DiscordModel):
    user: User | None = None
    nick: str | None = None
    avatar: str | None = None
    roles: list[Snowflake] = []
    joined_at: datetime | None = None
    premium_since: datetime | None = None
    deaf: bool = False
    mute: bool = False
    flags: int = 0
    pending: bool | None = None
    permissions: str | None = None
    communication_disabled_until: datetime | None = None


class PartialGuild(DiscordModel):
    id: Snowflake
    name: str
    icon: str | None = None
    owner: bool = False
    permissions: str | None = None
    features: list[str] = []
    approximate_member_count: int | None = None
    approximate_presence_count: int | None = None


class Guild(DiscordModel):
    id: Snowflake
    name: str
    icon: str | None = None
    splash: str | None = None
    discovery_splash: str | None = None
    owner_id: Snowflake | None = None
    permissions: str | None = None
    afk_channel_id: Snowflake | None = None
    afk_timeout: int = 0
    verification_level: int = 0
    default_message_notifications: int = 0
    explicit_content_filter: int = 0
    roles: list[Role] = []
    emojis: list[Emoji] = []
    features: list[str] = []
    mfa_level: int = 0
    system_channel_id: Snowflake | None = None
    rules_channel_id: Snowflake | None = None
    max_members: int | None = None
    vanity_url_code: str | None = None
    description: str | None = None
    banner: str | None = None
    premium_tier: int = 0
    premium_subscription_count: int | None = None
    preferred_locale: str = "en-US"
    nsfw_level: int = 0
    approximate_member_count: int | None = None
    approximate_presence_count: int | None = None


class GuildPreview(DiscordModel):
    id: Snowflake
    name: str
    icon: str | None = None
    splash: str | None = None
    discovery_splash: str | None = None
    emojis: list[Emoji] = []
    features: list[str] = []
    approximate_member_count: int = 0
    approximate_presence_count: int = 0
    description: str | None = None


class Ban(DiscordModel):
    reason: str | None = None
    user: User
