from typing import List, TypedDict

from conversation_summaries.models.message import MessageDocument


class ConversationDocument(TypedDict, total=False):
    # the API may send more fields; only id is read
    id: str


class ConversationMessages(TypedDict):
    id: str
    messages: List[MessageDocument]


class LatestMessageEntry(TypedDict):
    id: str
    latest_message: MessageDocument
