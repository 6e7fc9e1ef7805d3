from .config import ClientConfig
from .errors import ClientError
from .errors import ClientHTTPError
from .base_client import InterceptingHttpClient
from .foo_client import FooClient
from .configuration import FooClientConfiguration
from .configuration import build_composite_interceptor

__all__ = [
    "ClientConfig",
    "ClientError",
    "ClientHTTPError",
    "InterceptingHttpClient",
    "FooClient",
    "FooClientConfiguration",
    "build_composite_interceptor",
]
