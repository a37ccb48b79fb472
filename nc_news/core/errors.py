"""
Classified failures raised by validators and resource handlers.

Each error carries the HTTP status and the client-facing message it maps to.
The error middleware in nc_news.api.errors is the only consumer.
No framework imports allowed.
"""


class NewsApiError(Exception):
    """Base error for every classified failure."""

    status_code = 500
    default_msg = "Internal server error"

    def __init__(self, msg: str | None = None) -> None:
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class BadRequest(NewsApiError):
    """Raised when the client sent structurally invalid input."""

    status_code = 400
    default_msg = "Bad request"

    def __init__(self, reason: str | None = None) -> None:
        super().__init__()
        # Kept for the logs only; never sent to the client.
        self.reason = reason


class NotFound(NewsApiError):
    """Raised when well-formed input references an entity that does not exist."""

    status_code = 404

    def __init__(self, msg: str) -> None:
        super().__init__(msg)


class InternalError(NewsApiError):
    """Raised when a collaborator failed for reasons the client did not cause."""

    status_code = 500
