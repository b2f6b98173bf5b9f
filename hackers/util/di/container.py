"""Production container."""

from dishka import AsyncContainer, make_async_container

from hackers.config import Settings
from hackers.util.di import PROVIDERS, ProdConfigProvider, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the production container.

    Args:
        settings: Settings to use; loaded from the environment if omitted

    Returns:
        Container with the production implementation of every component.
        Close it to close the Hacker News HTTP client.
    """
    providers = [
        ProdConfigProvider(settings)
        if base is ProdConfigProvider
        else get_provider(base, use_mock=False)()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)
