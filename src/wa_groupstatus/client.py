"""
GroupStatusClient / AsyncGroupStatusClient — main SDK clients.
"""

import asyncio
from typing import Any, Optional, Union

from wa_groupstatus.group_status import GroupStatusSender
from wa_groupstatus.models.group import GroupInfo
from wa_groupstatus.models.jid import JID, parse_jid
from wa_groupstatus.models.message import Message
from wa_groupstatus.models.send import SendRequestExtra, SendResponse
from wa_groupstatus.ports import GroupInfoProvider, MessageSender
from wa_groupstatus.transport.http import DEFAULT_BASE_URL, HttpGateway

JIDLike = Union[JID, str]


def _to_jid(value: JIDLike) -> JID:
    return value if isinstance(value, JID) else parse_jid(value)


class AsyncGroupStatusClient:
    """Async client (primary).

    By default talks to an HTTP gateway. Pass ``sender`` and ``groups`` to
    plug in any other MessageSender / GroupInfoProvider instead.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: Optional[str] = None,
        *,
        sender: Optional[MessageSender] = None,
        groups: Optional[GroupInfoProvider] = None,
    ):
        self.gateway: Optional[HttpGateway] = None
        if sender is None or groups is None:
            self.gateway = HttpGateway(base_url=base_url, token=token)
        self._sender: MessageSender = sender or self.gateway  # type: ignore[assignment]
        self._groups: GroupInfoProvider = groups or self.gateway  # type: ignore[assignment]
        self.status = GroupStatusSender(self._sender, self._groups)

    async def __aenter__(self) -> "AsyncGroupStatusClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def send_group_status(
        self, group_jid: JIDLike, message: Message, extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse:
        """Post a status only the group's members can see (native protocol)."""
        return await self.status.send_group_status(_to_jid(group_jid), message, extra)

    async def send_status_to_group(
        self, group_jid: JIDLike, message: Message, extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse:
        """Deprecated: use send_group_status. Broadcasts with status_recipients set to the group's members."""
        return await self.status.send_status_to_group(_to_jid(group_jid), message, extra)

    async def get_group_member_jids(self, group_jid: JIDLike) -> list[JID]:
        return await self.status.get_group_member_jids(_to_jid(group_jid))

    async def get_group_info(self, group_jid: JIDLike) -> GroupInfo:
        return await self._groups.get_group_info(_to_jid(group_jid))

    async def send_message(
        self, to: JIDLike, message: Message, extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse:
        return await self._sender.send_message(_to_jid(to), message, extra)

    async def close(self) -> None:
        if self.gateway is not None:
            await self.gateway.aclose()


class GroupStatusClient:
    """Sync wrapper around AsyncGroupStatusClient. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncGroupStatusClient(**kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    def __enter__(self) -> "GroupStatusClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def send_group_status(
        self, group_jid: JIDLike, message: Message, extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse:
        return self._run(self._async.send_group_status(group_jid, message, extra))

    def send_status_to_group(
        self, group_jid: JIDLike, message: Message, extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse:
        return self._run(self._async.send_status_to_group(group_jid, message, extra))

    def get_group_member_jids(self, group_jid: JIDLike) -> list[JID]:
        return self._run(self._async.get_group_member_jids(group_jid))

    def get_group_info(self, group_jid: JIDLike) -> GroupInfo:
        return self._run(self._async.get_group_info(group_jid))

    def send_message(
        self, to: JIDLike, message: Message, extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse:
        return self._run(self._async.send_message(to, message, extra))

    def close(self) -> None:
        if self._loop.is_closed():
            return
        self._run(self._async.close())
        self._loop.close()
