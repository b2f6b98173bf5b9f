"""Dependency injection wiring.

Every provider is listed in ``PROVIDERS``. A provider with subclasses is
a mockable component: its subclasses are the production and mock
implementations, told apart by ``__is_mock__``. Mock implementations
live with the tests and are only registered once the tests import them.
"""

from typing import Type

from hackers.util.di.application import ProdApplicationProvider
from hackers.util.di.base import Component, ProviderBase
from hackers.util.di.core import ProdConfigProvider
from hackers.util.di.domain import ProdDomainProvider
from hackers.util.di.infrastructure import HackerNewsProvider, ProdHackerNewsProvider
from hackers.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    HackerNewsProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to register for an entry of ``PROVIDERS``.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        ``base`` itself if it is concrete, else the matching subclass

    Raises:
        DependencyInjectionError: If the component has no implementation
            of the requested kind
    """
    implementations = {
        getattr(subclass, "__is_mock__", False): subclass
        for subclass in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        component = base.__mock_component__ or base.__name__
        kind = "mock" if use_mock else "production"
        raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "HackerNewsProvider",
    "ProdHackerNewsProvider",
]
