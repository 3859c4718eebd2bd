from dataclasses import dataclass
from typing import Any, Mapping, Optional

import httpx

from conversation_summaries.core.logger import get_logger
from conversation_summaries.errors import TransportFault


logger = get_logger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    ok: bool
    status: int
    body: Any = None


class HttpTransport:
    """Issues GET requests against the API base URL.

    Non-2xx answers come back as `TransportResponse(ok=False)`; only
    network errors, timeouts and undecodable bodies raise `TransportFault`.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @classmethod
    def create(cls, base_url: str, timeout: float = 10.0) -> "HttpTransport":
        return cls(httpx.AsyncClient(base_url=base_url, timeout=timeout))

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def get(self, path: str, options: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        try:
            response = await self._client.get(path, **dict(options or {}))
        except httpx.HTTPError as exc:
            logger.warning(f"GET {path} failed: {exc!r}")
            raise TransportFault(f"Request to {path} failed") from exc

        if not response.is_success:
            return TransportResponse(ok=False, status=response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            raise TransportFault(f"Malformed response body from {path}") from exc
        return TransportResponse(ok=True, status=response.status_code, body=body)

    async def aclose(self) -> None:
        await self._client.aclose()
