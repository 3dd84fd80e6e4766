"""Conventions for structuring application use cases.

Public API:
    - BaseUseCase: single-method async contract mapping a request to a response
    - ResultCase: immutable success/failure envelope with a status code
    - UseCaseDispatcher: pass-through invoker, the extension point for
      cross-cutting behavior
    - DomainEvent / DomainEventPublisher: domain event scaffolding
"""

from usecase_core.application.ports.outbound.event_publisher import (
    DomainEventPublisher,
)
from usecase_core.application.use_cases import (
    BaseUseCase,
    ResultCase,
    UseCaseDispatcher,
)
from usecase_core.domain.events import DomainEvent, SystemClock
from usecase_core.domain.protocols import Clock

__all__ = [
    "BaseUseCase",
    "Clock",
    "DomainEvent",
    "DomainEventPublisher",
    "ResultCase",
    "SystemClock",
    "UseCaseDispatcher",
]
