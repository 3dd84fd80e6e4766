"""Opt-in dispatcher decorators.

Each decorator is itself a UseCaseDispatcher wrapping another one, so they
stack:

    ```python
    from usecase_core.infrastructure.dispatchers import (
        LoggingDispatcher,
        StatsTrackingDispatcher,
    )

    stats = StatsTrackingDispatcher()
    dispatcher = LoggingDispatcher(stats)
    ```
"""

from usecase_core.infrastructure.dispatchers.logging_dispatcher import (
    LoggingDispatcher,
)
from usecase_core.infrastructure.dispatchers.stats_dispatcher import (
    DispatcherStats,
    StatsTrackingDispatcher,
)

__all__ = [
    "LoggingDispatcher",
    "DispatcherStats",
    "StatsTrackingDispatcher",
]
