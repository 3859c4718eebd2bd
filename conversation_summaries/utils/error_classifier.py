from typing import Callable, Dict

from conversation_summaries.core.logger import get_logger


logger = get_logger(__name__)

ERRORS: Dict[int, str] = {
    400: "Bad request",
    404: "Not found",
    405: "Method not allowed",
    500: "Internal server error",
    503: "Service unavailable",
}

UNKNOWN_ERROR = "Unknown error"


def show_error(message: str) -> None:
    logger.error(message)


def classify_status(status: int) -> str:
    return ERRORS.get(status, UNKNOWN_ERROR)


def on_error(status: int, surface: Callable[[str], None] = show_error) -> str:
    """Report the category for a failed response and hand it back to the caller."""
    category = classify_status(status)
    surface(category)
    return category
