"""
Group status error types.
"""

from typing import Any, Optional


class GroupStatusError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class InvalidJIDError(GroupStatusError):
    """Target JID is malformed or not on the expected server. Raised before any network call."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("invalid_jid", message, details)


class GroupInfoError(GroupStatusError):
    """Group metadata lookup failed. The original exception is chained as __cause__."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("group_info_error", message, details)


class EmptyGroupError(GroupStatusError):
    def __init__(self, message: str = "group has no participants"):
        super().__init__("empty_group", message)


class GatewayError(GroupStatusError):
    def __init__(self, message: str, code: str = "http_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)
