"""Permission bit flags and helpers for Discord guilds and channels.

Provides a :class:`Permissions` wrapper for convenient bitfield manipulation
and the guild/channel permission computation Discord documents for members.
The API transports permission sets as decimal strings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from discord_sdk.models.enums import OverwriteType

if TYPE_CHECKING:
    from discord_sdk.models.channels import Channel
    from discord_sdk.models.guilds import Guild, GuildMember


CREATE_INSTANT_INVITE      = 1 << 0
KICK_MEMBERS               = 1 << 1
BAN_MEMBERS                = 1 << 2
ADMINISTRATOR              = 1 << 3
MANAGE_CHANNELS            = 1 << 4
MANAGE_GUILD               = 1 << 5
ADD_REACTIONS              = 1 << 6
VIEW_AUDIT_LOG             = 1 << 7
PRIORITY_SPEAKER           = 1 << 8
STREAM                     = 1 << 9
VIEW_CHANNEL               = 1 << 10
SEND_MESSAGES              = 1 << 11
SEND_TTS_MESSAGES          = 1 << 12
MANAGE_MESSAGES            = 1 << 13
EMBED_LINKS                = 1 << 14
ATTACH_FILES               = 1 << 15
READ_MESSAGE_HISTORY       = 1 << 16
MENTION_EVERYONE           = 1 << 17
USE_EXTERNAL_EMOJIS        = 1 << 18
VIEW_GUILD_INSIGHTS        = 1 << 19
CONNECT                    = 1 << 20
SPEAK                      = 1 << 21
MUTE_MEMBERS               = 1 << 22
DEAFEN_MEMBERS             = 1 << 23
MOVE_MEMBERS               = 1 << 24
USE_VAD                    = 1 << 25
CHANGE_NICKNAME            = 1 << 26
MANAGE_NICKNAMES           = 1 << 27
MANAGE_ROLES               = 1 << 28
MANAGE_WEBHOOKS            = 1 << 29
MANAGE_GUILD_EXPRESSIONS   = 1 << 30
USE_APPLICATION_COMMANDS   = 1 << 31
REQUEST_TO_SPEAK           = 1 << 32
MANAGE_EVENTS              = 1 << 33
MANAGE_THREADS             = 1 << 34
CREATE_PUBLIC_THREADS      = 1 << 35
CREATE_PRIVATE_THREADS     = 1 << 36
USE_EXTERNAL_STICKERS      = 1 << 37
SEND_MESSAGES_IN_THREADS   = 1 << 38
USE_EMBEDDED_ACTIVITIES    = 1 << 39
MODERATE_MEMBERS           = 1 << 40
USE_SOUNDBOARD             = 1 << 42
SEND_VOICE_MESSAGES        = 1 << 46

# Reverse lookup: bit value -> name
_BIT_NAMES: dict[int, str] = {
    CREATE_INSTANT_INVITE: "CREATE_INSTANT_INVITE",
    KICK_MEMBERS: "KICK_MEMBERS",
    BAN_MEMBERS: "BAN_MEMBERS",
    ADMINISTRATOR: "ADMINISTRATOR",
    MANAGE_CHANNELS: "MANAGE_CHANNELS",
    MANAGE_GUILD: "MANAGE_GUILD",
    ADD_REACTIONS: "ADD_REACTIONS",
    VIEW_AUDIT_LOG: "VIEW_AUDIT_LOG",
    PRIORITY_SPEAKER: "PRIORITY_SPEAKER",
    STREAM: "STREAM",
    VIEW_CHANNEL: "VIEW_CHANNEL",
    SEND_MESSAGES: "SEND_MESSAGES",
    SEND_TTS_MESSAGES: "SEND_TTS_MESSAGES",
    MANAGE_MESSAGES: "MANAGE_MESSAGES",
    EMBED_LINKS: "EMBED_LINKS",
    ATTACH_FILES: "ATTACH_FILES",
    READ_MESSAGE_HISTORY: "READ_MESSAGE_HISTORY",
    MENTION_EVERYONE: "MENTION_EVERYONE",
    USE_EXTERNAL_EMOJIS: "USE_EXTERNAL_EMOJIS",
    VIEW_GUILD_INSIGHTS: "VIEW_GUILD_INSIGHTS",
    CONNECT: "CONNECT",
    SPEAK: "SPEAK",
    MUTE_MEMBERS: "MUTE_MEMBERS",
    DEAFEN_MEMBERS: "DEAFEN_MEMBERS",
    MOVE_MEMBERS: "MOVE_MEMBERS",
    USE_VAD: "USE_VAD",
    CHANGE_NICKNAME: "CHANGE_NICKNAME",
    MANAGE_NICKNAMES: "MANAGE_NICKNAMES",
    MANAGE_ROLES: "MANAGE_ROLES",
    MANAGE_WEBHOOKS: "MANAGE_WEBHOOKS",
    MANAGE_GUILD_EXPRESSIONS: "MANAGE_GUILD_EXPRESSIONS",
    USE_APPLICATION_COMMANDS: "USE_APPLICATION_COMMANDS",
    REQUEST_TO_SPEAK: "REQUEST_TO_SPEAK",
    MANAGE_EVENTS: "MANAGE_EVENTS",
    MANAGE_THREADS: "MANAGE_THREADS",
    CREATE_PUBLIC_THREADS: "CREATE_PUBLIC_THREADS",
    CREATE_PRIVATE_THREADS: "CREATE_PRIVATE_THREADS",
    USE_EXTERNAL_STICKERS: "USE_EXTERNAL_STICKERS",
    SEND_MESSAGES_IN_THREADS: "SEND_MESSAGES_IN_THREADS",
    USE_EMBEDDED_ACTIVITIES: "USE_EMBEDDED_ACTIVITIES",
    MODERATE_MEMBERS: "MODERATE_MEMBERS",
    USE_SOUNDBOARD: "USE_SOUNDBOARD",
    SEND_VOICE_MESSAGES: "SEND_VOICE_MESSAGES",
}

ALL_PERMISSIONS = 0
for _bit in _BIT_NAMES:
    ALL_PERMISSIONS |= _bit
del _bit


class Permissions:
    """Wraps a permission bitfield with convenient accessors.

    Can be constructed from a raw ``int``, from the API's decimal string, from
    keyword flags, or by combining instances with ``|``, ``&``, ``~``, ``-``.

    Examples::

        from discord_sdk.permissions import Permissions, SEND_MESSAGES, ATTACH_FILES

        perms = Permissions(role.permissions)      # "2048" from the API
        if perms.has(SEND_MESSAGES):
            ...

        perms = Permissions.from_kwargs(send_messages=True, attach_files=True)
        payload["permissions"] = str(perms)        # back to the wire form
    """

    __slots__ = ("_value",)

    def __init__(self, value: int | str = 0) -> None:
        self._value = int(value)

    # --- Factories ---

    @classmethod
    def none(cls) -> Permissions:
        """Return an empty permission set."""
        return cls(0)

    @classmethod
    def all(cls) -> Permissions:
        """Return a permission set with every known bit set."""
        return cls(ALL_PERMISSIONS)

    @classmethod
    def from_kwargs(cls, **flags: bool) -> Permissions:
        """Build from keyword arguments matching flag names (lowercase)."""
        _name_to_bit = {name.lower(): bit for bit, name in _BIT_NAMES.items()}
        value = 0
        for key, enabled in flags.items():
            if key not in _name_to_bit:
                raise ValueError(f"Unknown permission flag: {key!r}")
            if enabled:
                value |= _name_to_bit[key]
        return cls(value)

    # --- Core accessors ---

    @property
    def value(self) -> int:
        """The raw integer bitfield."""
        return self._value

    def has(self, permissions: int | Permissions) -> bool:
        """Return ``True`` if *all* bits in ``permissions`` are set.

        If the ADMINISTRATOR bit is set, always returns ``True``.
        """
        if self._value & ADMINISTRATOR:
            return True
        required = int(permissions)
        return (self._value & required) == required

    def has_any(self, permissions: int | Permissions) -> bool:
        """Return ``True`` if *any* bit in ``permissions`` is set."""
        if self._value & ADMINISTRATOR:
            return True
        return bool(self._value & int(permissions))

    # --- Bitwise operators ---

    def __or__(self, other: int | Permissions) -> Permissions:
        return Permissions(self._value | int(other))

    def __and__(self, other: int | Permissions) -> Permissions:
        return Permissions(self._value & int(other))

    def __sub__(self, other: int | Permissions) -> Permissions:
        """Remove bits: ``perms - SEND_MESSAGES``."""
        return Permissions(self._value & ~int(other))

    def __invert__(self) -> Permissions:
        return Permissions(~self._value & ALL_PERMISSIONS)

    def __contains__(self, flag: int) -> bool:
        """Support ``SEND_MESSAGES in perms``."""
        return self.has(flag)

    def apply_overwrite(self, *, allow: int | str | Permissions, deny: int | str | Permissions) -> Permissions:
        """``(base & ~deny) | allow``, the order Discord applies overwrites in."""
        return Permissions((self._value & ~int(deny)) | int(allow))

    # --- Iteration & display ---

    def __iter__(self):
        """Yield the name of each set permission flag."""
        for bit, name in _BIT_NAMES.items():
            if self._value & bit:
                yield name

    def __repr__(self) -> str:
        if self._value == 0:
            return "Permissions(0)"
        names = list(self)
        if len(names) <= 5:
            return f"Permissions({' | '.join(names)})"
        return f"Permissions({' | '.join(names[:4])} | ... +{len(names) - 4} more)"

    def __str__(self) -> str:
        """Decimal string, as the API expects in payloads."""
        return str(self._value)

    def to_list(self) -> list[str]:
        return list(self)

    # --- Equality & hashing ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Permissions):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0


# --- Member permission computation ---

def base_permissions(guild: Guild, member: GuildMember) -> Permissions:
    """Guild-level permissions of ``member``: @everyone plus each of their roles."""
    if member.user is not None and guild.owner_id == member.user.id:
        return Permissions.all()

    roles = {role.id: role for role in guild.roles}
    everyone = roles.get(guild.id)
    if everyone is None:
        return Permissions.none()

    perms = Permissions(everyone.permissions)
    for role_id in member.roles:
        role = roles.get(role_id)
        if role is not None:
            perms |= Permissions(role.permissions)

    if perms.value & ADMINISTRATOR:
        return Permissions.all()
    return perms


def channel_permissions(guild: Guild, member: GuildMember, channel: Channel) -> Permissions:
    """Permissions of ``member`` in ``channel`` after all overwrites.

    Overwrites are applied in order: @everyone, then the member's roles
    combined, then the member itself.
    """
    perms = base_permissions(guild, member)
    if perms.value & ADMINISTRATOR:
        return perms

    overwrites = {(o.type, o.id): o for o in channel.permission_overwrites}

    everyone = overwrites.get((OverwriteType.ROLE, guild.id))
    if everyone is not None:
        perms = perms.apply_overwrite(allow=everyone.allow, deny=everyone.deny)

    allow = deny = 0
    for role_id in member.roles:
        overwrite = overwrites.get((OverwriteType.ROLE, role_id))
        if overwrite is not None:
            allow |= int(overwrite.allow)
            deny |= int(overwrite.deny)
    perms = perms.apply_overwrite(allow=allow, deny=deny)

    if member.user is not None:
        own = overwrites.get((OverwriteType.MEMBER, member.user.id))
        if own is not None:
            perms = perms.apply_overwrite(allow=own.allow, deny=own.deny)

    return perms
