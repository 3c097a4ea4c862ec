"""gptzator package."""

from typing import Any

__all__ = ["GptzatorClient", "__version__"]
__version__ = "0.1.0"


def __getattr__(name: str) -> Any:
    if name == "GptzatorClient":
        from .sdk import GptzatorClient

        return GptzatorClient
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
