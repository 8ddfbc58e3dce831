from discord_sdk.models.base import DiscordModel, Snowflake
from discord_sdk.models.enums import ApplicationCommandOptionType, ApplicationCommandType
from discord_sdk.models.users import User


class Application(DiscordModel):
    id: Snowflake
    name: str
    icon: str | None = None
    description: str = ""
    bot_public: bool = False
    bot_require_code_grant: bool = False
    owner: User | None = None
    verify_key: str = ""
    guild_id: Snowflake | None = None
    flags: int = 0
    tags: list[str] = []
    custom_install_url: str | None = None
    approximate_guild_count: int | None = None


class ApplicationCommandOptionChoice(DiscordModel):
    name: str
    value: str | int | float
    name_localizations: dict[str, str] | None = None


class ApplicationCommandOption(DiscordModel):
    type: ApplicationCommandOptionType
    name: str
    description: str
    name_localizations: dict[str, str] | None = None
    description_localizations: dict[str, str] | None = None
    required: bool = False
    choices: list[ApplicationCommandOptionChoice] | None = None
    options: list["ApplicationCommandOption"] | None = None
    channel_types: list[int] | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None
    min_length: int | None = None
    max_length: int | None = None
    autocomplete: bool | None = None


class ApplicationCommand(DiscordModel):
    """A slash, user or message command.

    ``id``, ``application_id`` and ``version`` are assigned by the API and
    left unset when the model is built locally for a create request.
    """

    id: Snowflake | None = None
    type: ApplicationCommandType = ApplicationCommandType.CHAT_INPUT
    application_id: Snowflake | None = None
    guild_id: Snowflake | None = None
    name: str
    name_localizations: dict[str, str] | None = None
    description: str = ""
    description_localizations: dict[str, str] | None = None
    options: list[ApplicationCommandOption] | None = None
    default_member_permissions: str | None = None
    dm_permission: bool | None = None
    nsfw: bool | None = None
    version: Snowflake | None = None
