import math
import re
from typing import Any

from conversation_summaries.errors import InvalidArgument


_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class NumericId(str):
    """A resource id that is a string on the wire but must read as a finite number."""

    @classmethod
    def parse(cls, value: Any) -> "NumericId":
        if isinstance(value, NumericId):
            return value
        if isinstance(value, bool) or value is None:
            raise InvalidArgument("Invalid id provided")
        if isinstance(value, (int, float)):
            if not math.isfinite(value):
                raise InvalidArgument("Invalid id provided")
            return cls(int(value)) if float(value).is_integer() else cls(value)
        if not isinstance(value, str):
            raise InvalidArgument("Invalid id provided")
        text = value.strip()
        if not _NUMBER.fullmatch(text) or not math.isfinite(float(text)):
            raise InvalidArgument("Invalid id provided")
        return cls(text)
