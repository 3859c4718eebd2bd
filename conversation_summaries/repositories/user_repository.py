from typing import Any

from conversation_summaries.models.user import UserDocument
from conversation_summaries.repositories.base_repository import BaseRepository
from conversation_summaries.utils.identifiers import NumericId


class UserRepository(BaseRepository):

    async def fetch_user(self, user_id: Any) -> UserDocument:
        user_id = NumericId.parse(user_id)
        return await self.get_data(f"users/{user_id}")
