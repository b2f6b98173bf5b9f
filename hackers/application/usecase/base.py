"""Use case base."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """One user-facing operation, run with ``execute``."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        """Run the operation for a request model and return its response."""
