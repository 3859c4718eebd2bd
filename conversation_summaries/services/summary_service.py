from typing import List

from conversation_summaries.core.logger import get_logger
from conversation_summaries.schemas.summary import ConversationSummary
from conversation_summaries.services.summary_stages import SummaryStages


logger = get_logger(__name__)


class SummaryService:

    def __init__(self, stages: SummaryStages) -> None:
        self._stages = stages

    async def get_recent_conversation_summaries(self) -> List[ConversationSummary]:
        """Latest message of every conversation, most recently active first."""
        conversations = await self._stages.get_conversations()
        messages = await self._stages.get_messages_for_conversations(conversations)
        latest_messages = self._stages.get_latest_messages(messages)
        summaries = await self._stages.map_result(latest_messages)
        result = self._stages.sort_by_recency(summaries)
        logger.info(f"Built {len(result)} conversation summaries")
        return result
