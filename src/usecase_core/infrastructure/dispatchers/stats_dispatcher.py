"""Dispatcher decorator that counts use case executions."""

import asyncio
from typing import TypedDict, final, override

from usecase_core.application.use_cases.base import BaseUseCase
from usecase_core.application.use_cases.dispatcher import UseCaseDispatcher
from usecase_core.application.use_cases.result import ResultCase


class DispatcherStats(TypedDict):
    """Statistics tracked by StatsTrackingDispatcher."""

    calls: int
    errors: int
    failures: int
    cancellations: int


def _create_stats() -> DispatcherStats:
    return DispatcherStats(calls=0, errors=0, failures=0, cancellations=0)


@final
class StatsTrackingDispatcher(UseCaseDispatcher):
    """
    Decorator that tracks execution statistics for any UseCaseDispatcher.

    Stats Tracking:
        calls: every dispatch, successful or not
        errors: dispatches where the use case raised
        failures: dispatches that returned a ResultCase with success=False
        cancellations: dispatches cancelled while awaiting the use case

    Counters belong to the instance; share one instance to aggregate across
    callers.
    """

    def __init__(self, dispatcher: UseCaseDispatcher | None = None):
        self._dispatcher = dispatcher or UseCaseDispatcher()
        self._stats = _create_stats()

    @override
    async def dispatch[TRequest, TResponse](
        self,
        use_case: BaseUseCase[TRequest, TResponse],
        request: TRequest,
    ) -> TResponse:
        self._stats["calls"] += 1
        try:
            response = await self._dispatcher.dispatch(use_case, request)
        except asyncio.CancelledError:
            self._stats["cancellations"] += 1
            raise
        except Exception:
            self._stats["errors"] += 1
            raise

        if isinstance(response, ResultCase) and response.failed:
            self._stats["failures"] += 1
        return response

    @property
    def stats(self) -> DispatcherStats:
        """Get a copy of current dispatcher statistics."""
        return DispatcherStats(**self._stats)

    @property
    def wrapped_dispatcher(self) -> UseCaseDispatcher:
        """Access the underlying dispatcher."""
        return self._dispatcher

    def clear_stats(self) -> None:
        """Reset dispatcher statistics."""
        self._stats = _create_stats()
