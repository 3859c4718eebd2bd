from typing import List

from conversation_summaries.models.conversation import ConversationDocument
from conversation_summaries.repositories.base_repository import BaseRepository


class ConversationRepository(BaseRepository):

    async def fetch_conversations(self) -> List[ConversationDocument]:
        return await self.get_data("conversations")
