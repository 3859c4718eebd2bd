class ConversationSummariesError(Exception):
    """Base class for every error raised while building summaries."""


class InvalidArgument(ConversationSummariesError, ValueError):
    """A caller passed a malformed value. Raised before any request is made."""


class ParseError(ConversationSummariesError, ValueError):
    """A timestamp string could not be read as a date."""


class TransportFailure(ConversationSummariesError):
    """The API answered with a non-success status."""

    def __init__(self, status: int, category: str, path: str | None = None) -> None:
        self.status = status
        self.category = category
        self.path = path
        where = f" for {path}" if path else ""
        super().__init__(f"{category} ({status}){where}")


class TransportFault(ConversationSummariesError):
    """The request could not complete: network error, timeout or a body that is not JSON."""
