"""HTTP method + path pairs and the rate-limit bucket key of each call."""

from __future__ import annotations

import string
from typing import Any
from urllib.parse import quote

# Parameters Discord buckets on separately: two calls that differ only in a
# major parameter never share a limit.
DEFAULT_MAJOR_PARAMETERS: tuple[str, ...] = (
    "channel_id",
    "guild_id",
    "webhook_id",
    "webhook_token",
    "interaction_id",
    "interaction_token",
)

_formatter = string.Formatter()


class Route:
    """One REST call: method, path template and its parameters.

    The bucket key keeps the template shape and fills in only the major
    parameters, so ``GET /channels/1/messages/2`` and
    ``GET /channels/1/messages/3`` share a bucket while the same call on
    channel 4 gets its own. Endpoints that are bucketed differently pass
    ``major_parameters`` explicitly.

    Usage::

        route = Route("GET", "/channels/{channel_id}/messages/{message_id}",
                      channel_id=1, message_id=2)
        route.path        # "/channels/1/messages/2"
        route.bucket_key  # "GET /channels/1/messages/{message_id}"
    """

    __slots__ = ("method", "template", "params", "major_parameters")

    def __init__(
        self,
        method: str,
        path: str,
        *,
        major_parameters: tuple[str, ...] = DEFAULT_MAJOR_PARAMETERS,
        **params: Any,
    ) -> None:
        self.method = method.upper()
        self.template = path
        self.params = params
        self.major_parameters = major_parameters

    @property
    def placeholders(self) -> list[str]:
        return [name for _, name, _, _ in _formatter.parse(self.template) if name]

    @property
    def path(self) -> str:
        """The template with every parameter URL-quoted and filled in."""
        values = {}
        for name in self.placeholders:
            if name not in self.params:
                raise KeyError(f"Missing route parameter {name!r} for {self.template}")
            values[name] = quote(str(self.params[name]), safe="")
        return self.template.format(**values)

    def url(self, base: str) -> str:
        return base.rstrip("/") + self.path

    @property
    def bucket_key(self) -> str:
        values = {}
        for name in self.placeholders:
            if name in self.major_parameters and name in self.params:
                values[name] = str(self.params[name])
            else:
                values[name] = "{" + name + "}"
        return f"{self.method} {self.template.format(**values)}"

    def __repr__(self) -> str:
        return f"<Route {self.method} {self.template} {self.params}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return (self.method, self.template, self.params) == (other.method, other.template, other.params)

    def __hash__(self) -> int:
        return hash((self.method, self.template, tuple(sorted(self.params.items()))))
