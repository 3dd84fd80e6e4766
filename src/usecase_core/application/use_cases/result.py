"""Standard success/failure envelope returned by use cases.

``ResultCase`` carries an HTTP-inspired status code together with either a
value or an error description. The status code is only a convention: mapping
it onto a transport (HTTP response, CLI exit code, ...) is left to the caller.

Instances are immutable and should be built through the named factories:

    ```python
    ResultCase[Order].ok(order)
    ResultCase[Order].created(order, location=f"/orders/{order.id}")
    ResultCase[Order].not_found("order o-1 does not exist")
    ResultCase[None].custom(202, message="queued")
    ```
"""

from dataclasses import dataclass, field
from typing import Self

from usecase_core.shared.constants import (
    HTTP_BAD_REQUEST,
    HTTP_CREATED,
    HTTP_NO_CONTENT,
    HTTP_NOT_FOUND,
    HTTP_OK,
    HTTP_SERVER_ERROR,
    NOT_FOUND_ERROR,
    SERVER_ERROR,
    SUCCESS_STATUS_RANGE,
)


@dataclass(frozen=True)
class ResultCase[T]:
    """Outcome of a use case execution.

    Attributes:
        success: Derived from ``status_code``; True only for 2xx codes
        value: Payload of a successful outcome, ``None`` otherwise
        error: Failure description, empty on success
        status_code: HTTP-like outcome code
        message: Free-form annotation
        created_location: Locator of a newly created resource
    """

    success: bool = field(init=False)
    value: T | None
    error: str
    status_code: int = HTTP_OK
    message: str = ""
    created_location: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "success", self.status_code in SUCCESS_STATUS_RANGE
        )

    @classmethod
    def ok(cls, value: T, message: str = "") -> Self:
        return cls(value, "", HTTP_OK, message)

    @classmethod
    def created(cls, value: T, location: str, message: str = "") -> Self:
        return cls(value, "", HTTP_CREATED, message, location)

    @classmethod
    def no_content(cls, message: str = "") -> Self:
        return cls(None, "", HTTP_NO_CONTENT, message)

    @classmethod
    def fail(cls, error: str, message: str = "") -> Self:
        return cls(None, error, HTTP_BAD_REQUEST, message)

    @classmethod
    def not_found(cls, message: str = "") -> Self:
        return cls(None, NOT_FOUND_ERROR, HTTP_NOT_FOUND, message)

    @classmethod
    def server_error(cls, message: str = "") -> Self:
        return cls(None, SERVER_ERROR, HTTP_SERVER_ERROR, message)

    @classmethod
    def custom(
        cls,
        status_code: int,
        value: T | None = None,
        error: str = "",
        message: str = "",
        location: str = "",
    ) -> Self:
        """Build a result with an arbitrary status code.

        ``success`` is derived from the code alone: 200-299 succeed, anything
        else (including 1xx and 3xx) fails, whatever ``value`` or ``error``
        were passed.
        """
        return cls(value, error, status_code, message, location)

    @property
    def failed(self) -> bool:
        """Whether the outcome is a failure (non-2xx status code)."""
        return not self.success

    @property
    def has_value(self) -> bool:
        """Whether a payload is attached."""
        return self.value is not None
