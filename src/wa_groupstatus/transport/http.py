"""
REST gateway client — implements MessageSender and GroupInfoProvider on top
of an HTTP bridge that owns the WhatsApp session, encryption and retries.

Routes:
  POST /v1/messages        {"to", "message", "extra"} -> SendResponse
  GET  /v1/groups/{jid}    -> GroupInfo
"""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from wa_groupstatus.errors import GatewayError
from wa_groupstatus.models.group import GroupInfo
from wa_groupstatus.models.jid import JID
from wa_groupstatus.models.message import Message
from wa_groupstatus.models.send import SendRequestExtra, SendResponse

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT_S = 30.0

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


class HttpGateway:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": "wa-groupstatus/0.1.0", "Accept": "application/json"},
            timeout=DEFAULT_TIMEOUT_S,
            transport=transport,
        )

    def _auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    @staticmethod
    def _unwrap(json_data: Any) -> Any:
        """Unwrap the gateway envelope: { "status": "success", "data": <actual_data> }"""
        if isinstance(json_data, dict) and "status" in json_data and "data" in json_data:
            return json_data["data"]
        return json_data

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            resp = await self._client.request(method, path, headers=self._auth_headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise GatewayError(f"Gateway unreachable: {e}", code="connection_error") from e
        if resp.status_code >= 400:
            logger.error(f"{method} {path} returned HTTP {resp.status_code}")
            raise GatewayError(
                f"HTTP {resp.status_code}: {resp.text[:200]}",
                details={"status_code": resp.status_code},
            )
        try:
            return self._unwrap(resp.json())
        except ValueError as e:
            logger.error(f"{method} {path} returned a non-JSON body")
            raise GatewayError(f"Invalid gateway response: {resp.text[:200]}", code="invalid_response") from e

    @staticmethod
    def _parse(model: type[_M], data: Any) -> _M:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise GatewayError(f"Invalid gateway response for {model.__name__}: {e}", code="invalid_response") from e

    async def send_message(
        self, to: JID, message: Message, extra: Optional[SendRequestExtra] = None,
    ) -> SendResponse:
        body = {
            "to": str(to),
            "message": message.model_dump(mode="json", exclude_none=True),
            "extra": extra.model_dump(mode="json", exclude_none=True) if extra is not None else None,
        }
        kwargs: dict[str, Any] = {"json": body}
        if extra is not None and extra.timeout is not None:
            kwargs["timeout"] = extra.timeout
        data = await self._request("POST", "/v1/messages", **kwargs)
        return self._parse(SendResponse, data)

    async def get_group_info(self, jid: JID) -> GroupInfo:
        data = await self._request("GET", f"/v1/groups/{jid}")
        return self._parse(GroupInfo, data)

    async def aclose(self) -> None:
        await self._client.aclose()
