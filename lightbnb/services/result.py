from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class QueryError(Exception):
    """Raised when the data of a failed query is requested."""


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """
    Outcome of a single query-layer call.

    A success may still carry no data (``None`` or an empty list), which
    means "nothing found". A failure carries an error message instead.
    """

    ok: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: Any = None) -> "QueryResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "QueryResult":
        return cls(ok=False, error=error)

    @property
    def found(self) -> bool:
        return self.ok and self.data is not None

    def unwrap(self) -> Optional[T]:
        if not self.ok:
            raise QueryError(self.error)
        return self.data

    def __bool__(self) -> bool:
        return self.ok and bool(self.data)
