from typing import Generic, TypeVar, Optional, Callable, cast
from dataclasses import dataclass

T = TypeVar('T')
E = TypeVar('E', bound=Exception)
U = TypeVar('U')


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Outcome of a load: either a complete value or the error that aborted it.

    Loaders never return partial data, so a failed Result carries no value.
    """
    _value: Optional[T] = None
    _error: Optional[E] = None

    def __post_init__(self):
        if (self._value is None) == (self._error is None):
            raise ValueError("Result must have exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> 'Result[T, E]':
        """Create a successful result"""
        return cls(_value=value)

    @classmethod
    def failure(cls, error: E) -> 'Result[T, E]':
        """Create a failed result"""
        return cls(_error=error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        """Get the success value (raises ValueError if result is failure)"""
        if self.is_failure:
            raise ValueError(f"Cannot get value from failed result: {self._error}")
        return cast(T, self._value)

    @property
    def error(self) -> E:
        """Get the error (raises ValueError if result is success)"""
        if self.is_success:
            raise ValueError("Cannot get error from successful result")
        return cast(E, self._error)

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.is_failure:
            raise cast(E, self._error)
        return cast(T, self._value)

    def flat_map(self, func: Callable[[T], 'Result[U, E]']) -> 'Result[U, E]':
        """Chain loads that return Results"""
        if self.is_success:
            return func(cast(T, self._value))
        return Result.failure(cast(E, self._error))

    def __bool__(self) -> bool:
        return self.is_success

    def __str__(self) -> str:
        if self.is_success:
            return f"Success({self._value})"
        return f"Failure({self._error})"

    def __repr__(self) -> str:
        return self.__str__()

