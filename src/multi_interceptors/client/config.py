import dataclasses

import httpx


@dataclasses.dataclass
class ClientConfig:
    """Client configuration class."""

    name: str
    """Logical client name, used in logs."""

    base_url: str
    """Base URL prepended to every request path."""

    timeout: float | None = 60.0
    """Request timeout (seconds) for the httpx client created when none is supplied."""

    # If provided, caller owns lifecycle and the client never closes it.
    httpx_client: httpx.AsyncClient | None = None
    """Http client used to send requests."""

    default_headers: dict[str, str] = dataclasses.field(default_factory=dict)
    """Headers placed on every request before interceptors run."""
