"""
Operation outcome types.
"""
import attr
import inspect
import logging
from multipledispatch import dispatch
from typing import Any, Awaitable, Generic, Tuple, TypeVar, Union

from future_tuple.absent import Absent

logger = logging.getLogger(__name__)

E = TypeVar("E")
V = TypeVar("V")


@attr.s(frozen=True)
class Success(Generic[V]):
    value: V = attr.ib()


@attr.s(frozen=True)
class Failure(Generic[E]):
    error: E = attr.ib()


Outcome = Union[Success[V], Failure[E]]


async def capture(operation: Awaitable[V]) -> Outcome:
    """
    Await ``operation`` once and record how it settled.

    Only ``Exception`` is captured; cancellation and other
    ``BaseException``s propagate.

    Raises:
        TypeError: if ``operation`` is not awaitable.
    """
    if not inspect.isawaitable(operation):
        raise TypeError(f"Expected an awaitable, got: {operation!r}")
    try:
        value = await operation
    except Exception as e:
        logger.debug("[%r] Operation failed", operation, exc_info=True)
        return Failure(e)
    return Success(value)


@dispatch(Success)
def as_tuple(outcome: Success) -> Tuple[Any, Any]:
    return Absent, outcome.value


@dispatch(Failure)
def as_tuple(outcome: Failure) -> Tuple[Any, Any]:
    return outcome.error, Absent
