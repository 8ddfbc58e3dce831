from typing import Any

from pydantic import Field

from discord_sdk.models.base import DiscordModel


class ErrorResponse(DiscordModel):
    code: int = 0
    message: str
    errors: dict[str, Any] | None = None
    retry_after: float | None = None


class RateLimitResponse(DiscordModel):
    message: str = ""
    retry_after: float
    global_: bool = Field(False, alias="global")
    code: int | None = None
