from datetime import datetime

from discord_sdk.models.base import DiscordModel
from discord_sdk.models.channels import Channel
from discord_sdk.models.guilds import PartialGuild
from discord_sdk.models.users import User


class Invite(DiscordModel):
    """An invite code, with its metadata when fetched from a channel or guild listing."""

    code: str
    guild: PartialGuild | None = None
    channel: Channel | None = None
    inviter: User | None = None
    target_type: int | None = None
    target_user: User | None = None
    approximate_presence_count: int | None = None
    approximate_member_count: int | None = None
    expires_at: datetime | None = None
    # metadata
    uses: int | None = None
    max_uses: int | None = None
    max_age: int | None = None
    temporary: bool | None = None
    created_at: datetime | None = None

    @property
    def url(self) -> str:
        return f"https://discord.gg/{self.code}"
