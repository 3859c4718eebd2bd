from typing import TypedDict


class UserDocument(TypedDict, total=False):

    id: str
    avatar_url: str
