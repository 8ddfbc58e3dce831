"""Discord SDK: typed Python client for the Discord REST API."""

from discord_sdk.client import Client
from discord_sdk.errors import DiscordHTTPError, DiscordNetworkError, RateLimitHeaderError
from discord_sdk.http import HTTPClient
from discord_sdk.permissions import Permissions
from discord_sdk.rate_limit import Bucket, CustomRateLimit, RateLimiter
from discord_sdk.routes import Route

__all__ = [
    "Bucket",
    "Client",
    "CustomRateLimit",
    "DiscordHTTPError",
    "DiscordNetworkError",
    "HTTPClient",
    "Permissions",
    "RateLimitHeaderError",
    "RateLimiter",
    "Route",
]
