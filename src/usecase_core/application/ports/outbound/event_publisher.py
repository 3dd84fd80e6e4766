from abc import ABC, abstractmethod

from usecase_core.domain.events import DomainEvent


class DomainEventPublisher(ABC):
    """Outbound port for publishing domain events.

    Ordering, retries and delivery semantics (at-least-once, at-most-once)
    are defined entirely by the concrete publisher.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Publish ``event``; return once publishing has completed."""
        raise NotImplementedError
