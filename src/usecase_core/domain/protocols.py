from datetime import datetime
from typing import runtime_checkable, Protocol


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime: ...
