"""Unit tests for the API groups: URLs, methods, payloads, return types and buckets."""

from __future__ import annotations

import httpx
import pytest

from discord_sdk.api.audit_log import AuditLogAPI
from discord_sdk.api.channels import ChannelsAPI
from discord_sdk.api.commands import CommandsAPI
from discord_sdk.api.emoji import EmojiAPI
from discord_sdk.api.gateway import GatewayAPI
from discord_sdk.api.guilds import GuildsAPI
from discord_sdk.api.interactions import InteractionsAPI, followup_route
from discord_sdk.api.invites import InvitesAPI
from discord_sdk.api.messages import MessagesAPI, message_payload
from discord_sdk.api.users import UsersAPI
from discord_sdk.api.webhooks import WebhooksAPI
from discord_sdk.models import (
    AllowedMentions,
    ApplicationCommand,
    AuditLog,
    AuditLogEvent,
    Channel,
    Embed,
    Emoji,
    GatewayInfo,
    Guild,
    Interaction,
    InteractionCallbackData,
    InteractionCallbackType,
    InteractionResponse,
    Invite,
    Message,
    OverwriteType,
    Role,
    User,
    Webhook,
)

MESSAGE = {"id": "3", "channel_id": "2", "content": "hi", "timestamp": "2024-01-01T00:00:00+00:00"}
USER = {"id": "9", "username": "a"}
CHANNEL = {"id": "2", "type": 0, "name": "general"}


# --- Gateway API ---

class TestGatewayAPI:
    @pytest.mark.asyncio
    async def test_get(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json={"url": "wss://gateway.discord.gg"})
        result = await GatewayAPI(client).get()
        assert calls[0]["path"] == "/api/v10/gateway"
        assert isinstance(result, GatewayInfo)

    @pytest.mark.asyncio
    async def test_get_bot(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json={
            "url": "wss://gateway.discord.gg", "shards": 1,
            "session_start_limit": {"total": 1000, "remaining": 1000, "reset_after": 0},
        })
        result = await GatewayAPI(client).get_bot()
        assert calls[0]["path"] == "/api/v10/gateway/bot"
        assert result.shards == 1


# --- Users API ---

class TestUsersAPI:
    @pytest.mark.asyncio
    async def test_me(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=USER)
        result = await UsersAPI(client).me()
        assert calls[0]["path"] == "/api/v10/users/@me"
        assert isinstance(result, User)

    @pytest.mark.asyncio
    async def test_modify_me_clears_avatar(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=USER)
        await UsersAPI(client).modify_me(avatar="")
        assert calls[0]["method"] == "PATCH"
        assert calls[0]["body"] == {"avatar": None}

    @pytest.mark.asyncio
    async def test_my_guilds_params(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=[{"id": "1", "name": "g"}])
        result = await UsersAPI(client).my_guilds(after=5, limit=10)
        assert "after=5" in calls[0]["url"]
        assert "limit=10" in calls[0]["url"]
        assert "before" not in calls[0]["url"]
        assert result[0].name == "g"

    @pytest.mark.asyncio
    async def test_create_dm(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json={"id": "7", "type": 1})
        result = await UsersAPI(client).create_dm(42)
        assert calls[0]["path"] == "/api/v10/users/@me/channels"
        assert calls[0]["body"] == {"recipient_id": "42"}
        assert isinstance(result, Channel)

    @pytest.mark.asyncio
    async def test_leave_guild(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        await UsersAPI(client).leave_guild(5)
        assert calls[0]["method"] == "DELETE"
        assert calls[0]["path"] == "/api/v10/users/@me/guilds/5"


# --- Channels API ---

class TestChannelsAPI:
    @pytest.mark.asyncio
    async def test_get(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=CHANNEL)
        result = await ChannelsAPI(client).get(2)
        assert calls[0]["path"] == "/api/v10/channels/2"
        assert result.name == "general"

    @pytest.mark.asyncio
    async def test_modify_with_reason(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=CHANNEL)
        await ChannelsAPI(client).modify(2, name="renamed", topic=None, reason="cleanup")
        assert calls[0]["method"] == "PATCH"
        assert calls[0]["body"] == {"name": "renamed", "topic": None}
        assert calls[0]["headers"]["x-audit-log-reason"] == "cleanup"

    @pytest.mark.asyncio
    async def test_edit_permissions(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        await ChannelsAPI(client).edit_permissions(2, 9, type=OverwriteType.MEMBER, allow=2048)
        assert calls[0]["method"] == "PUT"
        assert calls[0]["path"] == "/api/v10/channels/2/permissions/9"
        assert calls[0]["body"] == {"type": 1, "allow": "2048", "deny": "0"}

    @pytest.mark.asyncio
    async def test_list_pins(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=[MESSAGE])
        result = await ChannelsAPI(client).list_pins(2)
        assert calls[0]["path"] == "/api/v10/channels/2/pins"
        assert isinstance(result[0], Message)

    @pytest.mark.asyncio
    async def test_join_thread(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        await ChannelsAPI(client).join_thread(11)
        assert calls[0]["method"] == "PUT"
        assert calls[0]["path"] == "/api/v10/channels/11/thread-members/@me"


# --- Messages API ---

class TestMessagesAPI:
    @pytest.mark.asyncio
    async def test_list_params(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=[MESSAGE])
        result = await MessagesAPI(client).list(2, before=100, limit=25)
        assert calls[0]["method"] == "GET"
        assert calls[0]["path"] == "/api/v10/channels/2/messages"
        assert "before=100" in calls[0]["url"]
        assert "limit=25" in calls[0]["url"]
        assert "around" not in calls[0]["url"]
        assert result[0].id == 3

    @pytest.mark.asyncio
    async def test_create_minimal(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=MESSAGE)
        result = await MessagesAPI(client).create(2, "hello")
        assert calls[0]["method"] == "POST"
        assert calls[0]["body"] == {"content": "hello"}
        assert isinstance(result, Message)

    @pytest.mark.asyncio
    async def test_create_reply_with_embed(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=MESSAGE)
        await MessagesAPI(client).create(
            2, "re", reply_to=1, embeds=[Embed(title="t")], allowed_mentions=AllowedMentions.none()
        )
        body = calls[0]["body"]
        assert body["message_reference"] == {"message_id": 1}
        assert body["embeds"] == [{"title": "t"}]
        assert body["allowed_mentions"] == {"parse": []}

    @pytest.mark.asyncio
    async def test_messages_share_channel_bucket(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=MESSAGE)
        api = MessagesAPI(client)
        await api.get(2, 3)
        await api.get(2, 4)
        await api.get(5, 3)
        keys = set(client.rate_limiter._buckets)
        assert "GET /channels/2/messages/{message_id}" in keys
        assert "GET /channels/5/messages/{message_id}" in keys

    @pytest.mark.asyncio
    async def test_bulk_delete(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        await MessagesAPI(client).bulk_delete(2, [10, 11], reason="spam")
        assert calls[0]["path"] == "/api/v10/channels/2/messages/bulk-delete"
        assert calls[0]["body"] == {"messages": ["10", "11"]}

    @pytest.mark.asyncio
    async def test_bulk_delete_bounds(self, http_client):
        client, transport, calls = http_client
        with pytest.raises(ValueError):
            await MessagesAPI(client).bulk_delete(2, [10])
        assert calls == []

    @pytest.mark.asyncio
    async def test_add_reaction_uses_reaction_rule(self, http_client, fake_sleep):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        api = MessagesAPI(client)
        await api.add_reaction(2, 3, Emoji(id=55, name="blob"))
        await api.add_reaction(2, 3, Emoji(id=55, name="blob"))
        assert calls[0]["method"] == "PUT"
        assert calls[0]["path"] == "/api/v10/channels/2/messages/3/reactions/blob:55/@me"
        bucket = client.rate_limiter.get_bucket(
            "PUT /channels/2/messages/{message_id}/reactions/{emoji}/@me"
        )
        assert bucket.custom_limit is not None
        # Second reaction waited out the 200ms window.
        assert fake_sleep == [pytest.approx(0.2)]

    @pytest.mark.asyncio
    async def test_list_reactions(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=[USER])
        result = await MessagesAPI(client).list_reactions(2, 3, "blob:55", limit=10)
        assert calls[0]["path"] == "/api/v10/channels/2/messages/3/reactions/blob:55"
        assert "limit=10" in calls[0]["url"]
        assert isinstance(result[0], User)

    def test_message_payload_extra_drops_none(self):
        assert message_payload("x", tts=None, username="bot") == {"content": "x", "username": "bot"}


# --- Guilds API ---

class TestGuildsAPI:
    @pytest.mark.asyncio
    async def test_get_with_counts(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json={"id": "1", "name": "g"})
        result = await GuildsAPI(client).get(1, with_counts=True)
        assert calls[0]["path"] == "/api/v10/guilds/1"
        assert "with_counts=true" in calls[0]["url"]
        assert isinstance(result, Guild)

    @pytest.mark.asyncio
    async def test_create_channel(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(201, json=CHANNEL)
        await GuildsAPI(client).create_channel(1, "general", topic="hi")
        assert calls[0]["body"] == {"name": "general", "type": 0, "topic": "hi"}

    @pytest.mark.asyncio
    async def test_create_ban(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        await GuildsAPI(client).create_ban(1, 9, reason="rules")
        assert calls[0]["method"] == "PUT"
        assert calls[0]["path"] == "/api/v10/guilds/1/bans/9"
        assert calls[0]["headers"]["x-audit-log-reason"] == "rules"

    @pytest.mark.asyncio
    async def test_create_role_permissions_as_string(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json={"id": "5", "name": "mod", "permissions": "4"})
        result = await GuildsAPI(client).create_role(1, name="mod", permissions=4)
        assert calls[0]["body"]["permissions"] == "4"
        assert isinstance(result, Role)

    @pytest.mark.asyncio
    async def test_add_member_role(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        await GuildsAPI(client).add_member_role(1, 9, 5)
        assert calls[0]["method"] == "PUT"
        assert calls[0]["path"] == "/api/v10/guilds/1/members/9/roles/5"


# --- Webhooks API ---

class TestWebhooksAPI:
    WEBHOOK = {"id": "8", "type": 1, "token": "secret"}

    @pytest.mark.asyncio
    async def test_create(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=self.WEBHOOK)
        result = await WebhooksAPI(client).create(2, "hook")
        assert calls[0]["path"] == "/api/v10/channels/2/webhooks"
        assert calls[0]["body"] == {"name": "hook"}
        assert isinstance(result, Webhook)

    @pytest.mark.asyncio
    async def test_execute_without_wait(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        result = await WebhooksAPI(client).execute(8, "secret", "hi", username="bot")
        assert calls[0]["path"] == "/api/v10/webhooks/8/secret"
        assert calls[0]["body"] == {"content": "hi", "username": "bot"}
        assert "wait" not in calls[0]["url"]
        assert result is None

    @pytest.mark.asyncio
    async def test_execute_wait_returns_message(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=MESSAGE)
        result = await WebhooksAPI(client).execute(8, "secret", "hi", wait=True, thread_id=11)
        assert "wait=true" in calls[0]["url"]
        assert "thread_id=11" in calls[0]["url"]
        assert isinstance(result, Message)

    @pytest.mark.asyncio
    async def test_token_is_major_parameter(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        api = WebhooksAPI(client)
        await api.delete_with_token(8, "a")
        await api.delete_with_token(8, "b")
        assert "DELETE /webhooks/8/a" in client.rate_limiter._buckets
        assert "DELETE /webhooks/8/b" in client.rate_limiter._buckets


# --- Interactions API ---

class TestInteractionsAPI:
    INTERACTION = Interaction.model_validate({"id": "1", "application_id": "2", "type": 2, "token": "tok"})

    @pytest.mark.asyncio
    async def test_create_response(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        await InteractionsAPI(client).create_response(
            self.INTERACTION,
            InteractionResponse(
                type=InteractionCallbackType.CHANNEL_MESSAGE_WITH_SOURCE,
                data=InteractionCallbackData(content="pong", flags=64),
            ),
        )
        assert calls[0]["method"] == "POST"
        assert calls[0]["path"] == "/api/v10/interactions/1/tok/callback"
        assert calls[0]["body"] == {"type": 4, "data": {"content": "pong", "flags": 64}}

    @pytest.mark.asyncio
    async def test_edit_original_response(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=MESSAGE)
        result = await InteractionsAPI(client).edit_original_response(2, "tok", "done")
        assert calls[0]["method"] == "PATCH"
        assert calls[0]["path"] == "/api/v10/webhooks/2/tok/messages/@original"
        assert isinstance(result, Message)

    @pytest.mark.asyncio
    async def test_create_followup(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=MESSAGE)
        await InteractionsAPI(client).create_followup(2, "tok", "more", flags=64)
        assert calls[0]["path"] == "/api/v10/webhooks/2/tok"
        assert calls[0]["body"] == {"content": "more", "flags": 64}

    def test_followup_bucket(self):
        route = followup_route("PATCH", 2, "tok", 5)
        assert route.bucket_key == "PATCH /webhooks/2/tok/messages/{message_id}"


# --- Commands API ---

class TestCommandsAPI:
    COMMAND = {"id": "10", "application_id": "2", "name": "ping", "description": "Ping", "type": 1, "version": "1"}

    @pytest.mark.asyncio
    async def test_list_global(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=[self.COMMAND])
        result = await CommandsAPI(client).list(2)
        assert calls[0]["path"] == "/api/v10/applications/2/commands"
        assert result[0].name == "ping"

    @pytest.mark.asyncio
    async def test_create_guild_command(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(201, json=self.COMMAND)
        await CommandsAPI(client).create(2, ApplicationCommand(name="ping", description="Ping"), guild_id=1)
        assert calls[0]["path"] == "/api/v10/applications/2/guilds/1/commands"
        assert calls[0]["body"] == {"type": 1, "name": "ping", "description": "Ping"}

    @pytest.mark.asyncio
    async def test_bulk_overwrite(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=[self.COMMAND])
        command = ApplicationCommand.model_validate(self.COMMAND)
        result = await CommandsAPI(client).bulk_overwrite(2, [command])
        assert calls[0]["method"] == "PUT"
        assert calls[0]["body"] == [{"type": 1, "name": "ping", "description": "Ping"}]
        assert isinstance(result[0], ApplicationCommand)

    @pytest.mark.asyncio
    async def test_delete(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        await CommandsAPI(client).delete(2, 10, guild_id=1)
        assert calls[0]["method"] == "DELETE"
        assert calls[0]["path"] == "/api/v10/applications/2/guilds/1/commands/10"


# --- Emoji API ---

class TestEmojiAPI:
    EMOJI = {"id": "55", "name": "blob", "roles": [], "animated": False}

    @pytest.mark.asyncio
    async def test_list(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=[self.EMOJI])
        result = await EmojiAPI(client).list(1)
        assert calls[0]["path"] == "/api/v10/guilds/1/emojis"
        assert isinstance(result[0], Emoji)
        assert result[0].id == 55

    @pytest.mark.asyncio
    async def test_create_roles_as_strings(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(201, json=self.EMOJI)
        await EmojiAPI(client).create(
            1, "blob", "data:image/png;base64,AAAA", roles=[7, 8], reason="new emoji"
        )
        assert calls[0]["method"] == "POST"
        assert calls[0]["body"] == {
            "name": "blob", "image": "data:image/png;base64,AAAA", "roles": ["7", "8"],
        }
        assert calls[0]["headers"]["x-audit-log-reason"] == "new emoji"

    @pytest.mark.asyncio
    async def test_modify_only_sends_given_fields(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=self.EMOJI)
        await EmojiAPI(client).modify(1, 55, name="blob2")
        assert calls[0]["method"] == "PATCH"
        assert calls[0]["path"] == "/api/v10/guilds/1/emojis/55"
        assert calls[0]["body"] == {"name": "blob2"}

    @pytest.mark.asyncio
    async def test_delete(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(204)
        await EmojiAPI(client).delete(1, 55, reason="cleanup")
        assert calls[0]["method"] == "DELETE"
        assert calls[0]["path"] == "/api/v10/guilds/1/emojis/55"
        assert calls[0]["headers"]["x-audit-log-reason"] == "cleanup"

    @pytest.mark.asyncio
    async def test_emoji_routes_share_guild_bucket(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=self.EMOJI)
        api = EmojiAPI(client)
        await api.get(1, 55)
        await api.get(1, 56)
        assert len(client.rate_limiter._buckets) == 1
        assert "GET /guilds/1/emojis/{emoji_id}" in client.rate_limiter._buckets


# --- Invites API ---

class TestInvitesAPI:
    INVITE = {"code": "abc", "channel": CHANNEL, "uses": 0, "max_uses": 5}

    @pytest.mark.asyncio
    async def test_get_with_counts(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json={**self.INVITE, "approximate_member_count": 10})
        result = await InvitesAPI(client).get("abc", with_counts=True)
        assert calls[0]["path"] == "/api/v10/invites/abc"
        assert "with_counts=true" in calls[0]["url"]
        assert "with_expiration" not in calls[0]["url"]
        assert "guild_scheduled_event_id" not in calls[0]["url"]
        assert isinstance(result, Invite)
        assert result.approximate_member_count == 10
        assert result.url == "https://discord.gg/abc"

    @pytest.mark.asyncio
    async def test_delete_returns_invite(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=self.INVITE)
        result = await InvitesAPI(client).delete("abc", reason="expired")
        assert calls[0]["method"] == "DELETE"
        assert calls[0]["headers"]["x-audit-log-reason"] == "expired"
        assert result.code == "abc"

    @pytest.mark.asyncio
    async def test_create(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=self.INVITE)
        result = await InvitesAPI(client).create(2, max_age=0, max_uses=5, unique=True)
        assert calls[0]["method"] == "POST"
        assert calls[0]["path"] == "/api/v10/channels/2/invites"
        assert calls[0]["body"] == {"max_age": 0, "max_uses": 5, "unique": True}
        assert result.max_uses == 5

    @pytest.mark.asyncio
    async def test_create_defaults_to_empty_body(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=self.INVITE)
        await InvitesAPI(client).create(2)
        assert calls[0]["body"] == {}

    @pytest.mark.asyncio
    async def test_list_for_channel(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=[self.INVITE])
        result = await InvitesAPI(client).list_for_channel(2)
        assert calls[0]["path"] == "/api/v10/channels/2/invites"
        assert result[0].channel.name == "general"

    @pytest.mark.asyncio
    async def test_list_for_guild(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=[self.INVITE])
        result = await InvitesAPI(client).list_for_guild(1)
        assert calls[0]["path"] == "/api/v10/guilds/1/invites"
        assert isinstance(result[0], Invite)


# --- Audit Log API ---

class TestAuditLogAPI:
    AUDIT_LOG = {
        "audit_log_entries": [{
            "id": "100",
            "target_id": "9",
            "user_id": "3",
            "action_type": 22,
            "reason": "spam",
            "changes": [{"key": "nick", "old_value": "a", "new_value": "b"}],
        }],
        "users": [USER],
        "webhooks": [],
        "threads": [],
        "integrations": [],
        "application_commands": [],
    }

    @pytest.mark.asyncio
    async def test_get(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json=self.AUDIT_LOG)
        result = await AuditLogAPI(client).get(1, action_type=AuditLogEvent.MEMBER_BAN_ADD, limit=10)
        assert calls[0]["path"] == "/api/v10/guilds/1/audit-logs"
        assert "action_type=22" in calls[0]["url"]
        assert "limit=10" in calls[0]["url"]
        assert "user_id" not in calls[0]["url"]
        assert isinstance(result, AuditLog)
        entry = result.audit_log_entries[0]
        assert entry.action_type == AuditLogEvent.MEMBER_BAN_ADD
        assert entry.changes[0].new_value == "b"
        assert result.users[0].username == "a"

    @pytest.mark.asyncio
    async def test_get_filters(self, http_client):
        client, transport, calls = http_client
        transport.response = httpx.Response(200, json={"audit_log_entries": []})
        await AuditLogAPI(client).get(1, user_id=3, before=500)
        assert "user_id=3" in calls[0]["url"]
        assert "before=500" in calls[0]["url"]
        assert "limit=50" in calls[0]["url"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, 101])
    async def test_limit_bounds(self, http_client, limit):
        client, transport, calls = http_client
        with pytest.raises(ValueError):
            await AuditLogAPI(client).get(1, limit=limit)
        assert calls == []
