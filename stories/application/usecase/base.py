"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base for use cases that orchestrate several domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        """Run the use case for one request model and return its response."""
