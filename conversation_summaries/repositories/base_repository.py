from typing import Any, Callable, Mapping, Optional, Protocol

from conversation_summaries.client.http_transport import TransportResponse
from conversation_summaries.core.logger import get_logger
from conversation_summaries.errors import InvalidArgument, TransportFailure
from conversation_summaries.utils.error_classifier import on_error, show_error


logger = get_logger(__name__)


class Transport(Protocol):

    async def get(self, path: str, options: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        ...


class BaseRepository:

    def __init__(self, transport: Transport, surface: Callable[[str], None] = show_error) -> None:
        self._transport = transport
        self._surface = surface

    async def get_data(self, path: str, options: Optional[Mapping[str, Any]] = None) -> Any:
        if not path:
            raise InvalidArgument("Url should be provided")

        logger.debug(f"GET {path}")
        response = await self._transport.get(path, options)
        if not response.ok:
            category = on_error(response.status, self._surface)
            raise TransportFailure(response.status, category, path=path)
        return response.body
