"""
Group metadata models — a read-only snapshot as returned by the gateway.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from wa_groupstatus.models.jid import JID


class GroupParticipant(BaseModel):
    jid: JID
    lid: Optional[JID] = None
    is_admin: bool = False
    is_super_admin: bool = False
    display_name: Optional[str] = None


class GroupInfo(BaseModel):
    jid: JID
    name: str = ""
    topic: str = ""
    owner_jid: Optional[JID] = None
    participants: list[GroupParticipant] = []
    created_at: Optional[datetime] = None

    def participant_jids(self) -> list[JID]:
        """Participant JIDs in the order the server listed them."""
        return [p.jid for p in self.participants]
