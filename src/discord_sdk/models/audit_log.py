from typing import Any

from discord_sdk.models.applications import ApplicationCommand
from discord_sdk.models.base import DiscordModel, Snowflake
from discord_sdk.models.channels import Channel
from discord_sdk.models.users import User
from discord_sdk.models.webhooks import Webhook


class AuditLogChange(DiscordModel):
    key: str
    # Any JSON type, depending on ``key``
    new_value: Any = None
    old_value: Any = None


class AuditLogEntryInfo(DiscordModel):
    application_id: Snowflake | None = None
    channel_id: Snowflake | None = None
    count: str | None = None
    delete_member_days: str | None = None
    id: Snowflake | None = None
    members_removed: str | None = None
    message_id: Snowflake | None = None
    role_name: str | None = None
    type: str | None = None


class AuditLogEntry(DiscordModel):
    id: Snowflake
    target_id: str | None = None
    changes: list[AuditLogChange] = []
    user_id: Snowflake | None = None
    # Kept as int: see AuditLogEvent for the known values.
    action_type: int
    options: AuditLogEntryInfo | None = None
    reason: str | None = None


class AuditLog(DiscordModel):
    audit_log_entries: list[AuditLogEntry] = []
    application_commands: list[ApplicationCommand] = []
    integrations: list[dict[str, Any]] = []
    threads: list[Channel] = []
    users: list[User] = []
    webhooks: list[Webhook] = []
