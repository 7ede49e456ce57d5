"""Shared test fixtures and in-memory collaborators."""
from __future__ import annotations

import base64
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

import pytest

from wa_groupstatus.models.group import GroupInfo, GroupParticipant
from wa_groupstatus.models.jid import JID, parse_jid
from wa_groupstatus.models.message import Message
from wa_groupstatus.models.send import SendRequestExtra, SendResponse

GROUP = parse_jid("120363025246125486@g.us")
ALICE = parse_jid("15551230001@s.whatsapp.net")
BOB = parse_jid("15551230002@s.whatsapp.net")
CAROL = parse_jid("15551230003@s.whatsapp.net")


def make_group_info(*members: JID, jid: JID = GROUP) -> GroupInfo:
    return GroupInfo(
        jid=jid,
        name="Book club",
        participants=[GroupParticipant(jid=m) for m in members],
    )


@dataclass
class FakeSender:
    error: Optional[Exception] = None
    calls: list[tuple[JID, Message, Optional[SendRequestExtra]]] = field(default_factory=list)

    async def send_message(
        self, to: JID, message: Message, extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse:
        self.calls.append((to, message, extra))
        if self.error is not None:
            raise self.error
        return SendResponse(
            id=f"3EB0{len(self.calls):012d}",
            timestamp=datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc),
        )


@dataclass
class FakeGroups:
    groups: dict[JID, GroupInfo] = field(default_factory=dict)
    error: Optional[Exception] = None
    calls: list[JID] = field(default_factory=list)

    def add(self, info: GroupInfo) -> None:
        self.groups[info.jid] = info

    async def get_group_info(self, jid: JID) -> GroupInfo:
        self.calls.append(jid)
        if self.error is not None:
            raise self.error
        try:
            return self.groups[jid]
        except KeyError:
            raise LookupError(f"item-not-found: {jid}")


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()


@pytest.fixture
def groups() -> FakeGroups:
    fake = FakeGroups()
    fake.add(make_group_info(ALICE, BOB, CAROL))
    return fake


def response_json(**overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {"id": "3EB0C0FFEE", "timestamp": "2025-06-01T12:00:00Z", "server_id": 42}
    body.update(overrides)
    return body


def b64decode(value: str) -> bytes:
    """Decode standard or URL-safe base64, padded or not."""
    return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
