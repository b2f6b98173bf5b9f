"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have a mock implementation for tests
Component = Literal["hackernews"]


class ProviderBase(Provider):
    """Base of every provider in ``PROVIDERS``.

    Attributes:
        __mock_component__: Name of the mockable component this provider
            belongs to, None for concrete providers
        __is_mock__: Set on the mock implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
