from datetime import datetime

from discord_sdk.models.base import DiscordModel, Snowflake
from discord_sdk.models.enums import ChannelType, OverwriteType
from discord_sdk.models.guilds import GuildMember
from discord_sdk.models.users import User


class Overwrite(DiscordModel):
    id: Snowflake
    type: OverwriteType
    allow: str = "0"
    deny: str = "0"


class ThreadMetadata(DiscordModel):
    archived: bool = False
    auto_archive_duration: int = 1440
    archive_timestamp: datetime | None = None
    locked: bool = False
    invitable: bool | None = None
    create_timestamp: datetime | None = None


class ThreadMember(DiscordModel):
    id: Snowflake | None = None
    user_id: Snowflake | None = None
    join_timestamp: datetime | None = None
    flags: int = 0
    member: GuildMember | None = None


class Channel(DiscordModel):
    id: Snowflake
    # Kept as int: the API adds channel types faster than clients update.
    type: int
    guild_id: Snowflake | None = None
    position: int | None = None
    permission_overwrites: list[Overwrite] = []
    name: str | None = None
    topic: str | None = None
    nsfw: bool = False
    last_message_id: Snowflake | None = None
    bitrate: int | None = None
    user_limit: int | None = None
    rate_limit_per_user: int | None = None
    recipients: list[User] = []
    icon: str | None = None
    owner_id: Snowflake | None = None
    application_id: Snowflake | None = None
    parent_id: Snowflake | None = None
    last_pin_timestamp: datetime | None = None
    rtc_region: str | None = None
    video_quality_mode: int | None = None
    message_count: int | None = None
    member_count: int | None = None
    thread_metadata: ThreadMetadata | None = None
    member: ThreadMember | None = None
    default_auto_archive_duration: int | None = None
    permissions: str | None = None
    flags: int = 0
    total_message_sent: int | None = None

    @property
    def is_thread(self) -> bool:
        return self.type in (
            ChannelType.ANNOUNCEMENT_THREAD,
            ChannelType.PUBLIC_THREAD,
            ChannelType.PRIVATE_THREAD,
        )

    @property
    def mention(self) -> str:
        return f"<#{self.id}>"


class FollowedChannel(DiscordModel):
    channel_id: Snowflake
    webhook_id: Snowflake


class ThreadList(DiscordModel):
    threads: list[Channel] = []
    members: list[ThreadMember] = []
    has_more: bool = False
