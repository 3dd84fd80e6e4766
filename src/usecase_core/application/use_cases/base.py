"""
Base class for use cases in the application layer.
"""

from abc import ABC, abstractmethod


class BaseUseCase[TRequest, TResponse](ABC):
    """
    Base class for all use cases following the Command Handler pattern.

    A use case maps one request type to one response type. Concrete use cases
    receive their collaborators (repositories, gateways, publishers) in
    ``__init__`` and orchestrate them in ``execute``. Failures are reported
    either by returning a failure ``ResultCase`` or by raising.
    """

    @abstractmethod
    async def execute(self, request: TRequest) -> TResponse:
        """Execute the use case with the given request."""
        pass
