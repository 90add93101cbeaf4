"""Call-shape glue around `Throttle.attempt`.

Wrapped callables keep their signature; every call becomes one attempt on
the given throttle. Coroutine functions go through `attempt_async`.
"""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any, Callable, TypeVar

if TYPE_CHECKING:
    from .domain.throttle import Throttle

F = TypeVar("F", bound=Callable[..., Any])


def wrap(throttle: "Throttle", fn: F) -> F:
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def _inner_async(*args: Any, **kwargs: Any) -> Any:
            return await throttle.attempt_async(lambda: fn(*args, **kwargs))

        return _inner_async  # type: ignore[return-value]

    @functools.wraps(fn)
    def _inner(*args: Any, **kwargs: Any) -> Any:
        return throttle.attempt(lambda: fn(*args, **kwargs))

    return _inner  # type: ignore[return-value]


def throttled(throttle: "Throttle") -> Callable[[F], F]:
    """Decorator form of `wrap`.

    Functions calling the same service should share one throttle so they are
    throttled together.
    """

    def _decorate(fn: F) -> F:
        return wrap(throttle, fn)

    return _decorate
