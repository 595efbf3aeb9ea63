"""Explicit success/failure outcomes.

Component boundaries (collection, parser, storage, dispatcher branches) hand
back ``Ok``/``Err`` values instead of letting exceptions escape.
"""

from dataclasses import dataclass
from functools import wraps
from typing import Callable, Generic, NoReturn, TypeVar, Union

from .errors import RecipeBookError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful outcome carrying its value."""
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """A failed outcome carrying the error to report."""
    error: RecipeBookError

    @property
    def message(self) -> str:
        return str(self.error)

    def unwrap(self) -> NoReturn:
        """Re-raise inside a local failure boundary."""
        raise self.error


Outcome = Union[Ok[T], Err]


def capture(func: Callable[..., T]) -> Callable[..., "Outcome[T]"]:
    """Wrap ``func`` so RecipeBookErrors come back as ``Err`` values."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return Ok(func(*args, **kwargs))
        except RecipeBookError as error:
            return Err(error)

    return wrapper


__all__ = ["Ok", "Err", "Outcome", "capture"]
