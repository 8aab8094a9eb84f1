import dataclasses as dt

from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(Enum):
    """
    Enum representing why a flag lookup or conversion failed.
    """

    MISSING_VALUE = "missing-value"
    INVALID_VALUE = "invalid-value"
    NOT_FOUND = "not-found"
    TYPE_MISMATCH = "type-mismatch"


class FlagError(RuntimeError):
    def __init__(self, err: "Err"):
        super().__init__(err.message)
        self.err = err

    @property
    def kind(self) -> ErrorKind:
        return self.err.kind


@dt.dataclass(frozen=True)
class Ok(Generic[T]):
    """
    A successful outcome.
    """

    value: T

    def isOk(self) -> bool:
        return True

    def isErr(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrapOr(self, default: Any) -> T:
        return self.value


@dt.dataclass(frozen=True)
class Err:
    """
    A failed outcome.

    Attributes:
        message: Error text, surfaced to callers verbatim.
        kind: Category of the failure.
    """

    message: str
    kind: ErrorKind = ErrorKind.INVALID_VALUE

    def isOk(self) -> bool:
        return False

    def isErr(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """
        Raises:
            FlagError: Always, carrying this error.
        """
        raise FlagError(self)

    def unwrapOr(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]
