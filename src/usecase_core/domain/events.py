"""Domain event base type.

A domain event is an immutable record of something that already happened.
Concrete events subclass ``DomainEvent`` and add their own fields; the base
only fixes when the event occurred.

Examples:
    ```python
    @dataclass(frozen=True)
    class OrderPlaced(DomainEvent):
        order_id: str

    # Stamped with the current UTC instant
    event = OrderPlaced("o-1")

    # Stamped by an injected clock
    event = OrderPlaced.record("o-1", clock=clock)

    # Explicit timestamp
    event = OrderPlaced("o-1", occurred_on=datetime(2024, 1, 1, tzinfo=UTC))
    ```
"""

import abc
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Self, final

from usecase_core.domain.protocols import Clock


@final
class SystemClock:
    """Clock returning the current timezone-aware UTC instant."""

    def now(self) -> datetime:
        return datetime.now(UTC)


SYSTEM_CLOCK = SystemClock()


def _utc_now() -> datetime:
    return SYSTEM_CLOCK.now()


@dataclass(frozen=True)
class DomainEvent(abc.ABC):
    """Base class for all domain events.

    Attributes:
        occurred_on: Instant the event was created. Keyword-only so that
            subclasses may declare required positional fields.
    """

    occurred_on: datetime = field(default_factory=_utc_now, kw_only=True)

    def __post_init__(self) -> None:
        if type(self) is DomainEvent:
            raise TypeError("DomainEvent is abstract; subclass it to define an event")

    @classmethod
    def record(cls, *args: Any, clock: Clock = SYSTEM_CLOCK, **kwargs: Any) -> Self:
        """Create an event stamped with ``clock.now()``.

        An explicit ``occurred_on`` keyword takes precedence over the clock.
        """
        if "occurred_on" not in kwargs:
            kwargs["occurred_on"] = clock.now()
        return cls(*args, **kwargs)
