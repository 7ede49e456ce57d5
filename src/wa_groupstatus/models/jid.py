"""
JIDs — the addresses of users, groups and broadcast lists.

A JID renders as ``user@server``, or ``user.agent:device@server`` for a
specific device. The server part tells what kind of entity it is.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializationInfo, model_serializer, model_validator

from wa_groupstatus.errors import InvalidJIDError

DEFAULT_USER_SERVER = "s.whatsapp.net"
GROUP_SERVER = "g.us"
BROADCAST_SERVER = "broadcast"
HIDDEN_USER_SERVER = "lid"
NEWSLETTER_SERVER = "newsletter"

# Servers whose user part may carry an agent/device suffix
AD_SERVERS = {DEFAULT_USER_SERVER, HIDDEN_USER_SERVER}


def _split(value: str) -> dict[str, Any]:
    if not value:
        raise InvalidJIDError("empty JID")
    parts = value.split("@")
    if len(parts) == 1:
        return {"user": "", "server": parts[0]}
    if len(parts) != 2 or not parts[1]:
        raise InvalidJIDError(f"malformed JID {value!r}", details={"jid": value})

    user, server = parts
    if server not in AD_SERVERS or (":" not in user and "." not in user):
        return {"user": user, "server": server}

    agent = device = 0
    try:
        if ":" in user:
            user, raw_device = user.split(":", 1)
            device = int(raw_device)
        if "." in user:
            user, raw_agent = user.split(".", 1)
            agent = int(raw_agent)
    except ValueError:
        raise InvalidJIDError(f"malformed device suffix in JID {value!r}", details={"jid": value})
    return {"user": user, "server": server, "agent": agent, "device": device}


class JID(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: str = ""
    server: str
    agent: int = 0
    device: int = 0

    @model_validator(mode="before")
    @classmethod
    def _accept_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return _split(data)
        return data

    @model_serializer(mode="wrap")
    def _to_string_in_json(self, handler: Any, info: SerializationInfo) -> Any:
        if info.mode_is_json():
            return str(self)
        return handler(self)

    @property
    def is_group(self) -> bool:
        return self.server == GROUP_SERVER

    @property
    def is_broadcast_list(self) -> bool:
        return self.server == BROADCAST_SERVER and self.user != "status"

    def to_non_ad(self) -> "JID":
        """Strip the agent/device part, leaving the account-level JID."""
        return JID(user=self.user, server=self.server)

    def __str__(self) -> str:
        if self.agent:
            return f"{self.user}.{self.agent}:{self.device}@{self.server}"
        if self.device:
            return f"{self.user}:{self.device}@{self.server}"
        if self.user:
            return f"{self.user}@{self.server}"
        return self.server


def parse_jid(value: str) -> JID:
    """Parse a JID string. Raises InvalidJIDError on malformed input."""
    return JID(**_split(value))


STATUS_BROADCAST_JID = JID(user="status", server=BROADCAST_SERVER)
