__all__ = [
    "MemoizeConstants",
]

import math


class MemoizeConstants:
    """Arbitrary constants used in the code."""

    # DO NOT change these -- pre-seeded caches depend on the key format
    key_separator = ","
    kwarg_separator = "="

    # Debug memoizer: never warn unless asked to
    default_threshold = math.inf

    threshold_message = "Memoization for function reached threshold number of calls: %s"
