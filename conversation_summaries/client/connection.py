from typing import Optional

from conversation_summaries.client.http_transport import HttpTransport
from conversation_summaries.core.config import settings
from conversation_summaries.core.logger import get_logger


logger = get_logger(__name__)

_transport: Optional[HttpTransport] = None


async def connect_api_client(transport: Optional[HttpTransport] = None) -> HttpTransport:
    global _transport
    if _transport is not None:
        return _transport
    _transport = transport or HttpTransport.create(settings.API_BASE_URL, timeout=settings.REQUEST_TIMEOUT)
    logger.info(f"API client ready for {settings.API_BASE_URL}")
    return _transport


async def close_api_client() -> None:
    global _transport
    if _transport is None:
        return
    await _transport.aclose()
    _transport = None


def get_api_client() -> HttpTransport:
    if _transport is None:
        raise RuntimeError("API client is not connected")
    return _transport


async def api_client_dependency() -> HttpTransport:
    return get_api_client()
