import logging
from multipledispatch import dispatch
from typing import Any, Awaitable, Callable, Optional, Tuple, TypeVar, Union

from future_tuple.absent import AbsentType
from future_tuple.result import Failure, Outcome, Success, as_tuple, capture

logger = logging.getLogger(__name__)

E = TypeVar("E")
V = TypeVar("V")

Callback = Callable[[], Any]
ResultTuple = Tuple[Union[E, AbsentType], Union[V, AbsentType]]


def _call(callback: Optional[Callback], outcome: Outcome):
    if callback is None:
        return
    try:
        callback()
    except Exception:
        logger.debug("[%r] Callback raised", outcome, exc_info=True)
        raise


@dispatch(Success)
def notify(
    outcome: Success,
    on_success: Optional[Callback] = None,
    on_failure: Optional[Callback] = None,
):
    """
    Invoke ``on_success``, if one was given.

    An exception raised by the callback propagates to the caller.
    """
    _call(on_success, outcome)


@dispatch(Failure)
def notify(
    outcome: Failure,
    on_success: Optional[Callback] = None,
    on_failure: Optional[Callback] = None,
):
    _call(on_failure, outcome)


async def translate(
    operation: Awaitable[V],
    on_success: Optional[Callback] = None,
    on_failure: Optional[Callback] = None,
) -> ResultTuple:
    """
    Await ``operation`` and return ``(error, value)``.

    Exactly one slot is populated, the other is ``Absent``.
    An exception raised by ``operation`` is returned, never raised.

    Example:
        error, data = await translate(fetch_data())
        if error is not Absent:
            ...

    Raises:
        TypeError: if ``operation`` is not awaitable.
    """
    outcome = await capture(operation)
    notify(outcome, on_success=on_success, on_failure=on_failure)
    return as_tuple(outcome)


def tupled(
    on_success: Optional[Callback] = None,
    on_failure: Optional[Callback] = None,
) -> Callable[[Awaitable[V]], Awaitable[ResultTuple]]:
    async def _tupled(operation: Awaitable[V]) -> ResultTuple:
        return await translate(
            operation, on_success=on_success, on_failure=on_failure
        )

    return _tupled
