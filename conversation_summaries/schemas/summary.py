from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, StrictStr


def _number_to_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# the API may send ids as numbers; the output shape keeps them as strings
IdStr = Annotated[str, BeforeValidator(_number_to_str)]


class FromUser(BaseModel):

    id: IdStr
    avatar_url: str


class LatestMessage(BaseModel):

    id: IdStr
    body: str
    created_at: StrictStr
    from_user: FromUser


class ConversationSummary(BaseModel):

    id: IdStr
    latest_message: LatestMessage
