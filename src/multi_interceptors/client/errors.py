class ClientError(Exception):
    """Base class for HTTP client errors."""


class ClientHTTPError(ClientError):
    """Raised when the request fails at the transport or HTTP status level."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP Error {status_code}: {message}")
