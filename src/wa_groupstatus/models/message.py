"""
Message payloads — the subset of the E2E message schema this SDK touches.

Content fields are free-form; anything not modelled here is kept as an
extra field and sent through untouched.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

MESSAGE_SECRET_LENGTH = 32

_PAYLOAD_CONFIG = ConfigDict(extra="allow", ser_json_bytes="base64", val_json_bytes="base64")


class MessageContextInfo(BaseModel):
    model_config = _PAYLOAD_CONFIG

    message_secret: Optional[bytes] = None
    device_list_metadata: Optional[dict[str, Any]] = None


class Message(BaseModel):
    model_config = _PAYLOAD_CONFIG

    conversation: Optional[str] = None
    extended_text_message: Optional[dict[str, Any]] = None
    image_message: Optional[dict[str, Any]] = None
    video_message: Optional[dict[str, Any]] = None
    audio_message: Optional[dict[str, Any]] = None
    document_message: Optional[dict[str, Any]] = None
    message_context_info: Optional[MessageContextInfo] = None
    group_status_message_v2: Optional[FutureProofMessage] = None


class FutureProofMessage(BaseModel):
    """Wrapper whose only content is a reference to another message."""

    model_config = _PAYLOAD_CONFIG

    message: Message


Message.model_rebuild()
