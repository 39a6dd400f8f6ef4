from .models import BrowserStatement, ReleaseStatement
from .registry import RuntimeReleaseRegistry
from .loader import get_release_registry, load_release_registry

__all__ = [
    "BrowserStatement",
    "ReleaseStatement",
    "RuntimeReleaseRegistry",
    "get_release_registry",
    "load_release_registry",
]
