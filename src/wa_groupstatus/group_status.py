"""
Group-scoped status delivery.

Two ways to post a status that only one group's members can see:

- send_group_status: native protocol. The content is wrapped in a
  groupStatusMessageV2 envelope sharing a fresh message secret with the
  inner message, and sent straight to the group JID. Members don't need the
  sender's number saved.
- send_status_to_group: legacy. The unwrapped message goes to
  status@broadcast with status_recipients pinned to the group's current
  participants.

Neither strategy retries; collaborator errors surface to the caller.
"""

import logging
import secrets
from typing import Optional

from wa_groupstatus.errors import EmptyGroupError, GroupInfoError, InvalidJIDError
from wa_groupstatus.models.group import GroupInfo
from wa_groupstatus.models.jid import GROUP_SERVER, JID, STATUS_BROADCAST_JID
from wa_groupstatus.models.message import (
    MESSAGE_SECRET_LENGTH,
    FutureProofMessage,
    Message,
    MessageContextInfo,
)
from wa_groupstatus.models.send import SendRequestExtra, SendResponse
from wa_groupstatus.ports import GroupInfoProvider, MessageSender, RandomSource

logger = logging.getLogger(__name__)


def require_group_jid(jid: JID) -> None:
    if jid.server != GROUP_SERVER:
        logger.debug("Rejected %s: not a group JID", jid)
        raise InvalidJIDError(f"requires group JID, got {jid.server}", details={"server": jid.server})


class GroupStatusSender:
    def __init__(
        self,
        sender: MessageSender,
        groups: GroupInfoProvider,
        random_bytes: RandomSource = secrets.token_bytes,
    ):
        self._sender = sender
        self._groups = groups
        self._random_bytes = random_bytes

    async def send_group_status(
        self,
        group_jid: JID,
        inner_message: Message,
        extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse:
        """Send a status visible only to members of group_jid (native protocol).

        inner_message is modified in place: its message_context_info gets the
        generated message secret, so the caller can read it back afterwards.
        """
        require_group_jid(group_jid)

        message_secret = self._random_bytes(MESSAGE_SECRET_LENGTH)

        if inner_message.message_context_info is None:
            inner_message.message_context_info = MessageContextInfo()
        inner_message.message_context_info.message_secret = message_secret

        wrapped = Message(
            message_context_info=MessageContextInfo(message_secret=message_secret),
            group_status_message_v2=FutureProofMessage(message=inner_message),
        )

        logger.debug("Sending native group status to %s", group_jid)
        return await self._sender.send_message(group_jid, wrapped, extra)

    async def send_status_to_group(
        self,
        group_jid: JID,
        message: Message,
        extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse:
        """Send a status to status@broadcast restricted to group_jid's members.

        Deprecated in favour of send_group_status. Fields set on extra are kept;
        only status_recipients is replaced. extra itself is not modified.
        """
        require_group_jid(group_jid)

        participants = (await self._fetch_group_info(group_jid)).participant_jids()
        if not participants:
            raise EmptyGroupError()

        base = extra if extra is not None else SendRequestExtra()
        req = base.model_copy(update={"status_recipients": participants})

        logger.debug(
            "Sending legacy group status for %s to %s (%d recipients)",
            group_jid, STATUS_BROADCAST_JID, len(participants),
        )
        return await self._sender.send_message(STATUS_BROADCAST_JID, message, req)

    async def get_group_member_jids(self, group_jid: JID) -> list[JID]:
        """JIDs of all current members of group_jid. An empty group yields []."""
        require_group_jid(group_jid)
        return (await self._fetch_group_info(group_jid)).participant_jids()

    async def _fetch_group_info(self, group_jid: JID) -> GroupInfo:
        try:
            info = await self._groups.get_group_info(group_jid)
        except Exception as e:
            raise GroupInfoError(f"failed to get group info: {e}", details={"jid": str(group_jid)}) from e
        logger.debug("Group %s has %d participants", group_jid, len(info.participants))
        return info
