"""Initialize the client."""

from ._local import GaggiuinoClient

__all__ = [
    "GaggiuinoClient",
]
