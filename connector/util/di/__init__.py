"""Dependency injection module."""

from typing import Type

from connector.util.di.application import ProdApplicationProvider
from connector.util.di.base import Component, ProviderBase
from connector.util.di.core import ProdConfigProvider
from connector.util.di.domain import ProdDomainProvider
from connector.util.di.infrastructure import (
    GithubProvider,
    PersistenceProvider,
    ProdGithubProvider,
    ProdPersistenceProvider,
)
from connector.util.di.interface import ProdInterfaceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ProdInterfaceProvider,
    # Infrastructure components (mockable)
    GithubProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    A provider without subclasses is concrete and used as-is. A provider
    with subclasses is a mockable component; the subclass whose
    ``__is_mock__`` matches ``use_mock`` is selected.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdInterfaceProvider",
    # Infrastructure base classes
    "GithubProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdGithubProvider",
    "ProdPersistenceProvider",
]
