"""Initialize the module."""

from .clients import GaggiuinoClient
from .exceptions import (
    ConnectionFailed,
    DecodingFailed,
    GaggiuinoError,
    InvalidConfiguration,
    InvalidResponse,
    NotFound,
    RequestTimeout,
)

__all__ = [
    "ConnectionFailed",
    "DecodingFailed",
    "GaggiuinoClient",
    "GaggiuinoError",
    "InvalidConfiguration",
    "InvalidResponse",
    "NotFound",
    "RequestTimeout",
]
