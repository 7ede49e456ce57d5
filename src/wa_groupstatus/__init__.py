"""
wa-groupstatus — group-scoped WhatsApp status updates for Python.

Posts a status that only the members of one group can see, either through
the native groupStatusMessageV2 wrapper or the legacy status@broadcast
recipient list.
"""

from wa_groupstatus.client import GroupStatusClient, AsyncGroupStatusClient
from wa_groupstatus.group_status import GroupStatusSender
from wa_groupstatus.errors import (
    GroupStatusError,
    InvalidJIDError,
    GroupInfoError,
    EmptyGroupError,
    GatewayError,
)
from wa_groupstatus.models.jid import JID, GROUP_SERVER, STATUS_BROADCAST_JID, parse_jid
from wa_groupstatus.models.message import Message, MessageContextInfo, FutureProofMessage
from wa_groupstatus.models.group import GroupInfo, GroupParticipant
from wa_groupstatus.models.send import SendRequestExtra, SendResponse

__version__ = "0.1.0"
__all__ = [
    "GroupStatusClient",
    "AsyncGroupStatusClient",
    "GroupStatusSender",
    "GroupStatusError",
    "InvalidJIDError",
    "GroupInfoError",
    "EmptyGroupError",
    "GatewayError",
    "JID",
    "GROUP_SERVER",
    "STATUS_BROADCAST_JID",
    "parse_jid",
    "Message",
    "MessageContextInfo",
    "FutureProofMessage",
    "GroupInfo",
    "GroupParticipant",
    "SendRequestExtra",
    "SendResponse",
]
