from typing import Mapping, Optional, Sequence

from .constants import MemoizeConstants

__all__ = [
    "memoize_key",
]


def memoize_key(args: Sequence[object], kwargs: Optional[Mapping[str, object]] = None) -> str:
    """Returns the cache key for a call.

    Every positional argument is rendered with ``str()`` and the pieces are
    joined with a comma, so ``(1, 2, 3)`` and ``("1", 2, 3)`` both give
    ``"1,2,3"``. Keyword arguments, as passed, come last,
    as ``name=value``, sorted by name.
    """
    pieces = [str(a) for a in args]
    if kwargs:
        eq = MemoizeConstants.kwarg_separator
        pieces.extend(f"{k}{eq}{kwargs[k]}" for k in sorted(kwargs))
    return MemoizeConstants.key_separator.join(pieces)
