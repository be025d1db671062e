"""Errors raised by the Helius client."""


class HeliusError(Exception):
    """Base class for all client errors."""


class InvalidQueryError(HeliusError):
    """Raised when a collection query is missing or names both/neither selector."""


class CapacityExceededError(HeliusError):
    """Raised when a webhook address set would grow past the service limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"a single webhook cannot contain more than {limit:,} addresses "
            f"(got {size:,})"
        )


class RemoteCallFailedError(HeliusError):
    """Raised when a call to the Helius service fails for any reason."""

    def __init__(self, operation: str, detail: str, status_code: int | None = None):
        self.operation = operation
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"error during {operation}: {detail}")


class WebhookNotFoundError(RemoteCallFailedError):
    """Raised when a webhook ID does not exist (404)."""


class PageLimitExceededError(HeliusError):
    """Raised when a mintlist drain needs more pages than allowed."""

    def __init__(self, max_pages: int):
        self.max_pages = max_pages
        super().__init__(f"mintlist still paginating after {max_pages} pages")
