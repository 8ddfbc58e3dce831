from discord_sdk.models.base import DiscordModel, Snowflake


class User(DiscordModel):
    id: Snowflake
    username: str
    discriminator: str = "0"
    global_name: str | None = None
    avatar: str | None = None
    bot: bool = False
    system: bool = False
    mfa_enabled: bool | None = None
    banner: str | None = None
    accent_color: int | None = None
    locale: str | None = None
    verified: bool | None = None
    email: str | None = None
    flags: int | None = None
    premium_type: int | None = None
    public_flags: int | None = None

    @property
    def display_name(self) -> str:
        return self.global_name or self.username

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"


class Connection(DiscordModel):
    id: str
    name: str
    type: str
    revoked: bool = False
    verified: bool = False
    friend_sync: bool = False
    show_activity: bool = False
    two_way_link: bool = False
    visibility: int = 0
