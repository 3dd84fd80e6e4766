"""Dispatcher decorator that logs every use case execution."""

import asyncio
import time
from typing import Any, final, override

from usecase_core.application.use_cases.base import BaseUseCase
from usecase_core.application.use_cases.dispatcher import UseCaseDispatcher
from usecase_core.application.use_cases.result import ResultCase
from usecase_core.shared.logger import Logger, get_logger


@final
class LoggingDispatcher(UseCaseDispatcher):
    """
    Decorator that adds structured logging to any UseCaseDispatcher.

    Each dispatch logs the use case name and duration. ``ResultCase``
    responses additionally contribute their status code and success flag.
    Cancellations are logged as warnings. Responses are returned unchanged
    and exceptions (cancellation included) are re-raised after
    being logged.

    Example:
        ```python
        dispatcher = LoggingDispatcher(StatsTrackingDispatcher())
        result = await dispatcher.dispatch(create_order, request)
        ```
    """

    def __init__(
        self,
        dispatcher: UseCaseDispatcher | None = None,
        logger: Logger | None = None,
    ):
        """
        Initialize the logging dispatcher.

        Args:
            dispatcher: Dispatcher to delegate to, a plain UseCaseDispatcher by default
            logger: Logger to emit to, a logger named after this module by default
        """
        self._dispatcher = dispatcher or UseCaseDispatcher()
        self._logger = logger if logger is not None else get_logger(__name__)

    @override
    async def dispatch[TRequest, TResponse](
        self,
        use_case: BaseUseCase[TRequest, TResponse],
        request: TRequest,
    ) -> TResponse:
        use_case_name = type(use_case).__name__
        self._logger.debug("Dispatching use case", use_case=use_case_name)

        start_time = time.perf_counter()
        try:
            response = await self._dispatcher.dispatch(use_case, request)
        except asyncio.CancelledError:
            self._logger.warning(
                "Use case cancelled",
                use_case=use_case_name,
                duration_ms=_elapsed_ms(start_time),
            )
            raise
        except Exception as e:
            self._logger.error(
                "Use case raised",
                use_case=use_case_name,
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=_elapsed_ms(start_time),
            )
            raise

        self._logger.info(
            "Use case completed",
            use_case=use_case_name,
            duration_ms=_elapsed_ms(start_time),
            **_describe_response(response),
        )
        return response

    @property
    def wrapped_dispatcher(self) -> UseCaseDispatcher:
        """Access the underlying dispatcher."""
        return self._dispatcher


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


def _describe_response(response: object) -> dict[str, Any]:
    if isinstance(response, ResultCase):
        return {"status_code": response.status_code, "success": response.success}
    return {}
