from typing import Any, List

from conversation_summaries.models.message import MessageDocument
from conversation_summaries.repositories.base_repository import BaseRepository
from conversation_summaries.utils.identifiers import NumericId


class MessageRepository(BaseRepository):

    async def fetch_messages(self, conversation_id: Any) -> List[MessageDocument]:
        """Messages of one conversation, latest first."""
        conversation_id = NumericId.parse(conversation_id)
        return await self.get_data(f"conversations/{conversation_id}/messages")
