"""Exceptions for the pygaggiuino package."""


class GaggiuinoError(Exception):
    """Base exception for the Gaggiuino package."""


class InvalidConfiguration(GaggiuinoError):
    """Error to indicate the base address can't form a request URL."""


class ConnectionFailed(GaggiuinoError):
    """Error to indicate a transport failure or a non successful status."""

    def __init__(self, detail: str) -> None:
        """Initialize the exception."""
        super().__init__(f"Connection failed: {detail}")
        self.detail = detail


class RequestTimeout(GaggiuinoError):
    """Error to indicate the request timed out."""


class NotFound(GaggiuinoError):
    """Error to indicate the machine answered with a 404."""


class InvalidResponse(GaggiuinoError):
    """Error to indicate a successful response had an unexpected shape."""


class DecodingFailed(GaggiuinoError):
    """Error to indicate a response body couldn't be decoded."""

    def __init__(self, detail: str, field: str | None = None) -> None:
        """Initialize the exception."""
        if field:
            super().__init__(f"Failed to decode field '{field}': {detail}")
        else:
            super().__init__(f"Failed to decode response: {detail}")
        self.detail = detail
        self.field = field
