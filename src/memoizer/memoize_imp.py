import functools
import inspect
from typing import Callable, MutableMapping, Optional, TypeVar

from decorator import decorate
from zuper_commons.types import ZValueError

from .keys import memoize_key

__all__ = [
    "memoize",
]

F = TypeVar("F", bound=Callable[..., object])


def wrap_call(fn: Callable, caller: Callable) -> Callable:
    """Returns a function that calls ``caller(fn, *args, **kwargs)``
    with the arguments exactly as passed.

    Plain functions keep their signature; other callables (builtins,
    objects with ``__call__``) get a ``functools.wraps`` wrapper.
    """
    if inspect.isfunction(fn):
        return decorate(fn, caller, kwsyntax=True)

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        return caller(fn, *args, **kwargs)

    return wrapper


def memoize(fn: F, cache: Optional[MutableMapping[str, object]] = None) -> F:
    """Memoizes a function.

    ::

        f = memoize(lambda a, b, c: some_expensive_call(a, b, c))
        f(1, 2, 3)  # calls the function and remembers the key "1,2,3"
        f(1, 2, 3)  # returns the remembered result

    ``cache`` is used as the memory; it can be pre-populated with keys
    in the same format. The key is built from the arguments as passed:
    defaults are not filled in, and keywords count as ``name=value``.
    Calls that raise are not remembered.
    """
    if not callable(fn):
        raise ZValueError("Expected a callable to memoize.", fn=fn)
    if cache is None:
        cache = {}

    def memoizer(f, *args, **kwargs):
        key = memoize_key(args, kwargs)
        if key in cache:
            return cache[key]
        result = f(*args, **kwargs)
        cache[key] = result
        return result

    return wrap_call(fn, memoizer)
