from typing import TypedDict


class MessageDocument(TypedDict, total=False):
    id: str
    body: str
    # ISO-8601
    created_at: str
    from_user_id: str
