import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import final, override

import pytest

from usecase_core.application.use_cases.base import BaseUseCase
from usecase_core.application.use_cases.result import ResultCase


@dataclass(frozen=True)
class GetItemRequest:
    item_id: str


@dataclass(frozen=True)
class Item:
    item_id: str
    name: str


@final
class GetItem(BaseUseCase[GetItemRequest, ResultCase[Item]]):
    """Looks items up in an in-memory mapping."""

    def __init__(self, items: dict[str, Item]):
        self.items = items
        self.calls = 0

    @override
    async def execute(self, request: GetItemRequest) -> ResultCase[Item]:
        self.calls += 1
        item = self.items.get(request.item_id)
        if item is None:
            return ResultCase[Item].not_found(f"item {request.item_id} missing")
        return ResultCase[Item].ok(item)


@final
class ExplodingUseCase(BaseUseCase[GetItemRequest, ResultCase[Item]]):
    """Always raises from execute."""

    @override
    async def execute(self, request: GetItemRequest) -> ResultCase[Item]:
        raise RuntimeError(f"storage unavailable for {request.item_id}")


@final
class BlockingUseCase(BaseUseCase[GetItemRequest, ResultCase[Item]]):
    """Waits until released; lets tests cancel an in-flight dispatch."""

    def __init__(self):
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    @override
    async def execute(self, request: GetItemRequest) -> ResultCase[Item]:
        self.started.set()
        await self.release.wait()
        return ResultCase[Item].no_content()


@final
class FixedClock:
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


@pytest.fixture
def sample_item() -> Item:
    return Item(item_id="i-1", name="Widget")


@pytest.fixture
def get_item(sample_item: Item) -> GetItem:
    return GetItem({sample_item.item_id: sample_item})


@pytest.fixture
def exploding_use_case() -> ExplodingUseCase:
    return ExplodingUseCase()


@pytest.fixture
def fixed_instant() -> datetime:
    return datetime(2024, 5, 17, 12, 30, tzinfo=UTC)


@pytest.fixture
def fixed_clock(fixed_instant: datetime) -> FixedClock:
    return FixedClock(fixed_instant)


@pytest.fixture
def existing_request(sample_item: Item) -> GetItemRequest:
    return GetItemRequest(item_id=sample_item.item_id)


@pytest.fixture
def missing_request() -> GetItemRequest:
    return GetItemRequest(item_id="i-404")


@pytest.fixture
def blocking_use_case() -> BlockingUseCase:
    return BlockingUseCase()
