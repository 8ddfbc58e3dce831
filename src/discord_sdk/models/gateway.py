from discord_sdk.models.base import DiscordModel


class GatewayInfo(DiscordModel):
    url: str


class SessionStartLimit(DiscordModel):
    total: int
    remaining: int
    reset_after: int
    max_concurrency: int = 1


class GatewayBotInfo(DiscordModel):
    url: str
    shards: int
    session_start_limit: SessionStartLimit
