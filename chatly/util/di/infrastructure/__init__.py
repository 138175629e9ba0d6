"""Infrastructure providers."""

# Import bases
from .firebase import FirebaseProvider
from .notion import NotionProvider

# Import implementations (needed for __subclasses__())
from .firebase import ProdFirebaseProvider  # noqa: F401
from .notion import ProdNotionProvider  # noqa: F401

__all__ = [
    "FirebaseProvider",
    "NotionProvider",
    "ProdFirebaseProvider",
    "ProdNotionProvider",
]
