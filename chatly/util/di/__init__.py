"""Dependency injection module."""

from typing import Type

from chatly.util.di.application import ProdApplicationProvider
from chatly.util.di.base import Component, ProviderBase
from chatly.util.di.core import ProdConfigProvider
from chatly.util.di.domain import ProdDomainProvider
from chatly.util.di.infrastructure import (
    FirebaseProvider,
    NotionProvider,
    ProdFirebaseProvider,
    ProdNotionProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    NotionProvider,
    FirebaseProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for one entry of PROVIDERS.

    Entries without subclasses (config, domain, application) are used as-is.
    Infrastructure bases ("notion", "firebase") have a production subclass
    and, once tests/di is imported, a mock subclass; the one whose
    ``__is_mock__`` matches ``use_mock`` is returned.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    implementations = {
        getattr(c, "__is_mock__", False): c for c in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}") from None


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "FirebaseProvider",
    "NotionProvider",
    # Infrastructure implementations
    "ProdFirebaseProvider",
    "ProdNotionProvider",
]
