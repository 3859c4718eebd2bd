"""
Shared fixtures: an in-memory transport and the five-conversation dataset
served by the chat API.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

import pytest

from conversation_summaries.client.http_transport import TransportResponse


class FakeTransport:
    """Answers GETs from a path -> (status, body) table and records every call."""

    def __init__(self, routes: Dict[str, Tuple[int, Any]]) -> None:
        self.routes = routes
        self.calls: List[Tuple[str, Optional[Mapping[str, Any]]]] = []

    async def get(self, path: str, options: Optional[Mapping[str, Any]] = None) -> TransportResponse:
        self.calls.append((path, options))
        if path not in self.routes:
            return TransportResponse(ok=False, status=404)
        status, body = self.routes[path]
        if not 200 <= status < 300:
            return TransportResponse(ok=False, status=status)
        return TransportResponse(ok=True, status=status, body=body)

    @property
    def paths(self) -> List[str]:
        return [path for path, _ in self.calls]


USERS = {
    "1": {"id": "1", "avatar_url": "http://placekitten.com/g/300/300", "username": "john"},
    "2": {"id": "2", "avatar_url": "http://placekitten.com/g/301/301", "username": "amy"},
    "3": {"id": "3", "avatar_url": "http://placekitten.com/g/302/302", "username": "jeremy"},
    "5": {"id": "5", "avatar_url": "http://placekitten.com/g/304/304", "username": "ken"},
    "6": {"id": "6", "avatar_url": "http://placekitten.com/g/305/305", "username": "jessie"},
}

# conversation id -> messages, newest first
MESSAGES = {
    "1": [
        {"id": "1", "body": "Moi!", "created_at": "2016-08-25T10:15:00.670Z", "from_user_id": "1"},
        {"id": "11", "body": "Hei", "created_at": "2016-08-20T10:15:00.670Z", "from_user_id": "2"},
    ],
    "2": [
        {"id": "2", "body": "Hello!", "created_at": "2016-08-24T10:15:00.670Z", "from_user_id": "3"},
    ],
    "3": [
        {"id": "3", "body": "Hi!", "created_at": "2016-08-23T10:15:00.670Z", "from_user_id": "1"},
        {"id": "13", "body": "Yo", "created_at": "2016-08-01T10:15:00.670Z", "from_user_id": "3"},
    ],
    "4": [
        {"id": "4", "body": "Morning!", "created_at": "2016-08-22T10:15:00.670Z", "from_user_id": "5"},
    ],
    "5": [
        {"id": "5", "body": "Pleep!", "created_at": "2016-08-21T10:15:00.670Z", "from_user_id": "6"},
    ],
}

EXPECTED_SUMMARIES = [
    {
        "id": "1",
        "latest_message": {
            "id": "1",
            "body": "Moi!",
            "from_user": {"id": "1", "avatar_url": "http://placekitten.com/g/300/300"},
            "created_at": "2016-08-25T10:15:00.670Z",
        },
    },
    {
        "id": "2",
        "latest_message": {
            "id": "2",
            "body": "Hello!",
            "from_user": {"id": "3", "avatar_url": "http://placekitten.com/g/302/302"},
            "created_at": "2016-08-24T10:15:00.670Z",
        },
    },
    {
        "id": "3",
        "latest_message": {
            "id": "3",
            "body": "Hi!",
            "from_user": {"id": "1", "avatar_url": "http://placekitten.com/g/300/300"},
            "created_at": "2016-08-23T10:15:00.670Z",
        },
    },
    {
        "id": "4",
        "latest_message": {
            "id": "4",
            "body": "Morning!",
            "from_user": {"id": "5", "avatar_url": "http://placekitten.com/g/304/304"},
            "created_at": "2016-08-22T10:15:00.670Z",
        },
    },
    {
        "id": "5",
        "latest_message": {
            "id": "5",
            "body": "Pleep!",
            "from_user": {"id": "6", "avatar_url": "http://placekitten.com/g/305/305"},
            "created_at": "2016-08-21T10:15:00.670Z",
        },
    },
]


def build_routes(conversation_order=("3", "1", "5", "2", "4")) -> Dict[str, Tuple[int, Any]]:
    routes: Dict[str, Tuple[int, Any]] = {
        "conversations": (200, [{"id": cid, "title": f"chat {cid}"} for cid in conversation_order]),
    }
    for cid, messages in MESSAGES.items():
        routes[f"conversations/{cid}/messages"] = (200, messages)
    for uid, user in USERS.items():
        routes[f"users/{uid}"] = (200, user)
    return routes


@pytest.fixture
def routes():
    return build_routes()


@pytest.fixture
def transport(routes):
    return FakeTransport(routes)
