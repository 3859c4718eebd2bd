from typing import Any, List, Optional, Protocol

from conversation_summaries.errors import InvalidArgument
from conversation_summaries.models.conversation import (
    ConversationDocument,
    ConversationMessages,
    LatestMessageEntry,
)
from conversation_summaries.models.user import UserDocument
from conversation_summaries.repositories.conversation_repository import ConversationRepository
from conversation_summaries.repositories.message_repository import MessageRepository
from conversation_summaries.repositories.user_repository import UserRepository
from conversation_summaries.schemas.summary import ConversationSummary, FromUser, LatestMessage
from conversation_summaries.utils.concurrency import gather_all
from conversation_summaries.utils.timestamps import parse_timestamp


class SummaryStages(Protocol):
    """One method per pipeline stage, each replaceable on its own."""

    async def get_conversations(self) -> List[ConversationDocument]:
        ...

    async def get_messages_for_conversations(self, conversations: Any) -> List[ConversationMessages]:
        ...

    def get_latest_messages(self, entries: Any) -> List[LatestMessageEntry]:
        ...

    async def map_result(self, entries: Any) -> List[ConversationSummary]:
        ...

    def sort_by_recency(self, summaries: List[ConversationSummary]) -> List[ConversationSummary]:
        ...


def get_latest_messages(entries: Any) -> List[LatestMessageEntry]:
    if not isinstance(entries, list):
        raise InvalidArgument("Messages should be an array")

    latest: List[LatestMessageEntry] = []
    for entry in entries:
        messages = entry["messages"]
        if not messages:
            raise InvalidArgument(f"Conversation {entry['id']} has no messages")
        # the API returns the newest message first
        latest.append({"id": entry["id"], "latest_message": messages[0]})
    return latest


def sort_by_recency(summaries: List[ConversationSummary]) -> List[ConversationSummary]:
    # reverse=True keeps equal timestamps in input order
    return sorted(
        summaries,
        key=lambda summary: parse_timestamp(summary.latest_message.created_at),
        reverse=True,
    )


def build_summary(entry: LatestMessageEntry, profile: UserDocument) -> ConversationSummary:
    message = entry["latest_message"]
    if not isinstance(message.get("created_at"), str):
        raise InvalidArgument("argument should be a string")
    return ConversationSummary(
        id=entry["id"],
        latest_message=LatestMessage(
            id=message["id"],
            body=message["body"],
            created_at=message["created_at"],
            from_user=FromUser(id=profile["id"], avatar_url=profile["avatar_url"]),
        ),
    )


class ApiSummaryStages:

    def __init__(
        self,
        conversation_repo: ConversationRepository,
        message_repo: MessageRepository,
        user_repo: UserRepository,
        max_concurrency: Optional[int] = None,
    ) -> None:
        self._conversation_repo = conversation_repo
        self._message_repo = message_repo
        self._user_repo = user_repo
        self._max_concurrency = max_concurrency

    async def get_conversations(self) -> List[ConversationDocument]:
        return await self._conversation_repo.fetch_conversations()

    async def get_messages_for_conversations(self, conversations: Any) -> List[ConversationMessages]:
        if not isinstance(conversations, list):
            raise InvalidArgument("Conversations should be an array")

        async def _load(conversation: ConversationDocument) -> ConversationMessages:
            conversation_id = conversation.get("id")
            messages = await self._message_repo.fetch_messages(conversation_id)
            return {"id": conversation_id, "messages": messages}

        return await gather_all((_load(c) for c in conversations), limit=self._max_concurrency)

    def get_latest_messages(self, entries: Any) -> List[LatestMessageEntry]:
        return get_latest_messages(entries)

    async def map_result(self, entries: Any) -> List[ConversationSummary]:
        if not isinstance(entries, list):
            raise InvalidArgument("Latest messages should be an array")

        async def _enrich(entry: LatestMessageEntry) -> ConversationSummary:
            profile = await self._user_repo.fetch_user(entry["latest_message"].get("from_user_id"))
            return build_summary(entry, profile)

        return await gather_all((_enrich(e) for e in entries), limit=self._max_concurrency)

    def sort_by_recency(self, summaries: List[ConversationSummary]) -> List[ConversationSummary]:
        return sort_by_recency(summaries)
