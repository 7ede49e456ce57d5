"""
Send options and response.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from wa_groupstatus.models.jid import JID


class SendRequestExtra(BaseModel):
    """Optional knobs for a single send. Every field defaults to "not set"."""

    id: Optional[str] = None               # Message ID; the gateway generates one when unset
    peer: bool = False                     # Send as a peer (own-device) message
    timeout: Optional[float] = None        # Seconds; forwarded to the transport
    media_handle: Optional[str] = None     # Handle from a prior newsletter media upload
    status_recipients: Optional[list[JID]] = None  # Restricts who can see a status@broadcast message


class SendResponse(BaseModel):
    id: str
    timestamp: datetime
    server_id: Optional[int] = None
    sender: Optional[JID] = None
