"""
Collaborator contracts. The strategies in group_status only talk to these.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from wa_groupstatus.models.group import GroupInfo
from wa_groupstatus.models.jid import JID
from wa_groupstatus.models.message import Message
from wa_groupstatus.models.send import SendRequestExtra, SendResponse

# (n) -> n random bytes
RandomSource = Callable[[int], bytes]


class MessageSender(Protocol):
    async def send_message(
        self, to: JID, message: Message, extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse: ...


class GroupInfoProvider(Protocol):
    async def get_group_info(self, jid: JID) -> GroupInfo: ...
