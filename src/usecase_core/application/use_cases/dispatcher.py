from usecase_core.application.use_cases.base import BaseUseCase


class UseCaseDispatcher:
    """
    Entry point for running use cases.

    The default implementation awaits ``use_case.execute(request)`` and hands
    back its response untouched; exceptions propagate unchanged. Cross-cutting
    behavior (logging, metrics, retries, event publication) is added by
    dispatchers that wrap another dispatcher, see
    ``usecase_core.infrastructure.dispatchers``.
    """

    async def dispatch[TRequest, TResponse](
        self,
        use_case: BaseUseCase[TRequest, TResponse],
        request: TRequest,
    ) -> TResponse:
        return await use_case.execute(request)
