"""Descriptive statistics over a sequence of floats.

Every statistic takes a read-only sequence and returns ``Optional[float]``:
``None`` when the statistic is undefined for the input.

Note the empty-input asymmetry: ``mean`` and ``l2`` return ``0.0`` for an
empty sample while ``stddev`` and ``median`` return ``None``. Keep it that way;
callers rely on it.

NaN and infinite values are not handled specially. They will not raise, but
the result (and the sort order inside ``median``) is unspecified.
"""
from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Sequence

__all__: list[str] = [
    "StatFn",
    "STATISTICS",
    "mean",
    "stddev",
    "median",
    "l2",
    "numeric_summary",
]

logger = logging.getLogger(__name__)

# Statistic function type. Returns None when the statistic is ill-defined.
StatFn = Callable[[Sequence[float]], Optional[float]]


def _mean(values: Sequence[float]) -> float:
    # Plain left-to-right accumulation, no compensated summation.
    if not values:
        return 0.0
    total = 0.0
    for v in values:
        total += v
    return total / len(values)


def mean(values: Sequence[float]) -> Optional[float]:
    """
    Arithmetic mean. The mean of an empty sample is 0.0.
    """
    return _mean(values)


def stddev(values: Sequence[float]) -> Optional[float]:
    """
    Population standard deviation (divides by N, not N-1).
    Undefined (None) for an empty sample.
    """
    if not values:
        return None
    m = _mean(values)
    total = 0.0
    for v in values:
        d = v - m
        total += d * d  # float ** raises OverflowError, * gives inf
    return math.sqrt(total / len(values))


def median(values: Sequence[float]) -> Optional[float]:
    """
    Median value. Even-length samples average the two middle values.
    Undefined (None) for an empty sample. The caller's sequence is left as is.
    """
    if not values:
        return None
    ordered = sorted(values)
    n = len(ordered)
    if n % 2:
        return ordered[(n - 1) // 2]
    return (ordered[n // 2 - 1] + ordered[n // 2]) / 2.0


def l2(values: Sequence[float]) -> Optional[float]:
    """
    L2 (Euclidean) norm. The norm of an empty sample is 0.0.
    """
    total = 0.0
    for v in values:
        total += v * v
    return math.sqrt(total)


# Named statistics, in reporting order.
STATISTICS: Mapping[str, StatFn] = MappingProxyType({
    "mean": mean,
    "stddev": stddev,
    "median": median,
    "l2": l2,
})


def numeric_summary(
    values: Sequence[float],
    names: Iterable[str] | None = None,
) -> dict[str, Optional[float]]:
    """
    Run the named statistics (all of them by default) over ``values``.
    Raises KeyError for an unknown statistic name.
    """
    selected = list(STATISTICS) if names is None else list(names)
    unknown = [name for name in selected if name not in STATISTICS]
    if unknown:
        raise KeyError(f"unknown statistic(s): {', '.join(unknown)}")
    result = {name: STATISTICS[name](values) for name in selected}
    logger.debug("numeric_summary n=%d result=%s", len(values), result)
    return result
