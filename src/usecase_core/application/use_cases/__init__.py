"""Use case contract, result envelope and dispatcher."""

from usecase_core.application.use_cases.base import BaseUseCase
from usecase_core.application.use_cases.dispatcher import UseCaseDispatcher
from usecase_core.application.use_cases.result import ResultCase

__all__ = [
    "BaseUseCase",
    "ResultCase",
    "UseCaseDispatcher",
]
