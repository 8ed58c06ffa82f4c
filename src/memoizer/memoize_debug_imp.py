import functools
import inspect
import numbers
from typing import Callable, MutableMapping, Optional

from zuper_commons.types import check_isinstance, ZValueError

from . import logger
from .constants import MemoizeConstants
from .keys import memoize_key
from .memoize_imp import wrap_call

__all__ = [
    "BoundDebugMemoized",
    "DebugMemoized",
    "memoize_debug",
]


def describe_function(fn: Callable) -> str:
    """Returns the source of ``fn``, or its repr if the source is not available."""
    try:
        return inspect.getsource(fn)
    except (OSError, TypeError):
        return repr(fn)


class DebugMemoized:
    """A memoized function that can be inspected.

    Same caching as :func:`memoize`, plus:

    - ``memoize_map``: the live cache (the same mapping, not a copy);
    - ``memoize_times_called``: how many times the wrapped function
      was actually invoked (cache misses, including the ones that raised).

    When the count reaches ``threshold`` a warning is logged, once.
    """

    def __init__(self, fn: Callable, cache: MutableMapping[str, object], threshold: float):
        functools.update_wrapper(self, fn)
        self._cache = cache
        self._threshold = threshold
        self._count = 0
        self._call = wrap_call(fn, self._memoized_call)

    @property
    def memoize_map(self) -> MutableMapping[str, object]:
        return self._cache

    @property
    def memoize_times_called(self) -> int:
        return self._count

    def _memoized_call(self, f: Callable, *args, **kwargs):
        key = memoize_key(args, kwargs)
        if key in self._cache:
            return self._cache[key]

        # counted before the call: failures count too
        self._count += 1
        if self._count == self._threshold:
            self._warn_threshold(f)

        result = f(*args, **kwargs)
        self._cache[key] = result
        return result

    def _warn_threshold(self, f: Callable) -> None:
        logger.warning(MemoizeConstants.threshold_message % self._count)
        logger.warning(describe_function(f))
        logger.warning("Memoized function:", fn=f)

    def __call__(self, *args, **kwargs):
        return self._call(*args, **kwargs)

    def __get__(self, obj, objtype=None):
        """Support instance methods."""
        if obj is None:
            return self
        return BoundDebugMemoized(self, obj)

    def __repr__(self) -> str:
        return f"DebugMemoized({self.__wrapped__!r}, called={self._count})"


class BoundDebugMemoized(functools.partial):
    """A :class:`DebugMemoized` bound to an instance.

    Cache and counter are the ones of the unbound object, shared by
    all instances."""

    @property
    def memoize_map(self) -> MutableMapping[str, object]:
        return self.func.memoize_map

    @property
    def memoize_times_called(self) -> int:
        return self.func.memoize_times_called


def memoize_debug(
    fn: Callable,
    cache: Optional[MutableMapping[str, object]] = None,
    threshold: float = MemoizeConstants.default_threshold,
) -> DebugMemoized:
    """Debug-memoizes a function.

    ::

        f = memoize_debug(lambda a, b, c: some_expensive_call(a, b, c))
        f(1, 2, 3)
        f(1, 2, 3)
        f.memoize_times_called  # 1
        f.memoize_map  # {'1,2,3': ...}

    """
    if not callable(fn):
        raise ZValueError("Expected a callable to memoize.", fn=fn)
    if isinstance(threshold, bool):
        raise ZValueError("The threshold must be a number, not a bool.", threshold=threshold)
    check_isinstance(threshold, numbers.Real)
    if not threshold > 0:
        raise ZValueError("The threshold must be positive.", threshold=threshold)
    if cache is None:
        cache = {}
    return DebugMemoized(fn, cache, threshold)
