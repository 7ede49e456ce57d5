"""Unit tests for JIDs and payload models."""

import pytest

from wa_groupstatus.errors import InvalidJIDError
from wa_groupstatus.models.group import GroupInfo
from wa_groupstatus.models.jid import (
    DEFAULT_USER_SERVER,
    GROUP_SERVER,
    JID,
    STATUS_BROADCAST_JID,
    parse_jid,
)
from wa_groupstatus.models.message import FutureProofMessage, Message, MessageContextInfo
from wa_groupstatus.models.send import SendRequestExtra
from tests.conftest import b64decode


class TestParseJID:
    def test_user(self):
        jid = parse_jid("15551230001@s.whatsapp.net")
        assert jid.user == "15551230001"
        assert jid.server == DEFAULT_USER_SERVER
        assert jid.device == 0
        assert not jid.is_group

    def test_group(self):
        jid = parse_jid("120363025246125486@g.us")
        assert jid.server == GROUP_SERVER
        assert jid.is_group
        assert str(jid) == "120363025246125486@g.us"

    def test_device_and_agent(self):
        jid = parse_jid("15551230001.1:12@s.whatsapp.net")
        assert (jid.user, jid.agent, jid.device) == ("15551230001", 1, 12)
        assert str(jid) == "15551230001.1:12@s.whatsapp.net"
        assert jid.to_non_ad() == parse_jid("15551230001@s.whatsapp.net")

    def test_device_only(self):
        jid = parse_jid("15551230001:3@s.whatsapp.net")
        assert jid.device == 3
        assert str(jid) == "15551230001:3@s.whatsapp.net"

    def test_server_only(self):
        jid = parse_jid("s.whatsapp.net")
        assert jid.user == ""
        assert str(jid) == "s.whatsapp.net"

    def test_status_broadcast(self):
        assert parse_jid("status@broadcast") == STATUS_BROADCAST_JID
        assert str(STATUS_BROADCAST_JID) == "status@broadcast"
        assert not STATUS_BROADCAST_JID.is_group
        assert not STATUS_BROADCAST_JID.is_broadcast_list

    @pytest.mark.parametrize("raw", ["", "a@b@c", "user@", "15551230001:x@s.whatsapp.net"])
    def test_malformed(self, raw):
        with pytest.raises(InvalidJIDError):
            parse_jid(raw)

    def test_hashable(self):
        a = parse_jid("15551230001@s.whatsapp.net")
        b = parse_jid("15551230001@s.whatsapp.net")
        assert {a: 1}[b] == 1


class TestSerialisation:
    def test_jid_fields_accept_strings_and_dump_as_strings(self):
        info = GroupInfo.model_validate({
            "jid": "120363025246125486@g.us",
            "participants": [{"jid": "15551230001@s.whatsapp.net", "is_admin": True}],
        })
        assert info.jid == parse_jid("120363025246125486@g.us")
        assert info.participants[0].jid.user == "15551230001"
        dumped = info.model_dump(mode="json")
        assert dumped["jid"] == "120363025246125486@g.us"
        assert dumped["participants"][0]["jid"] == "15551230001@s.whatsapp.net"

    def test_python_dump_keeps_fields(self):
        assert parse_jid("1:2@s.whatsapp.net").model_dump() == {"user": "1", "server": "s.whatsapp.net", "agent": 0, "device": 2}

    def test_secret_dumps_as_base64(self):
        secret = bytes(range(32))
        inner = Message(conversation="hi", message_context_info=MessageContextInfo(message_secret=secret))
        wrapped = Message(
            message_context_info=MessageContextInfo(message_secret=secret),
            group_status_message_v2=FutureProofMessage(message=inner),
        )
        dumped = wrapped.model_dump(mode="json", exclude_none=True)
        encoded = dumped["message_context_info"]["message_secret"]
        assert b64decode(encoded) == secret
        assert dumped["group_status_message_v2"]["message"]["conversation"] == "hi"
        assert "conversation" not in dumped

    def test_unknown_content_fields_preserved(self):
        msg = Message.model_validate({"poll_creation_message": {"name": "Lunch?"}})
        assert msg.model_dump(exclude_none=True) == {"poll_creation_message": {"name": "Lunch?"}}

    def test_send_extra_json(self):
        extra = SendRequestExtra(status_recipients=[parse_jid("1@s.whatsapp.net")])
        assert extra.model_dump(mode="json", exclude_none=True) == {
            "peer": False,
            "status_recipients": ["1@s.whatsapp.net"],
        }


def test_jid_is_frozen():
    jid = JID(user="1", server=GROUP_SERVER)
    with pytest.raises(Exception):
        jid.server = DEFAULT_USER_SERVER  # type: ignore[misc]
