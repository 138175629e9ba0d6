"""Mock providers for testing."""

from .firebase import MockFirebaseProvider
from .notion import MockNotionProvider
from .container import build_test_container

__all__ = [
    "MockFirebaseProvider",
    "MockNotionProvider",
    "build_test_container",
]
