from discord_sdk.models.base import DiscordModel, Snowflake
from discord_sdk.models.enums import WebhookType
from discord_sdk.models.users import User


class Webhook(DiscordModel):
    id: Snowflake
    type: WebhookType
    guild_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    user: User | None = None
    name: str | None = None
    avatar: str | None = None
    token: str | None = None
    application_id: Snowflake | None = None
    url: str | None = None
