################################################################################
# File Name: percentiles.py
# Purpose/Description: Percentile table, closest-rank lookup and range filter
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial implementation
# ================================================================================
################################################################################

"""
Percentile engine.

Provides:
- percentiles: Percentile rank of every value, scaled linearly between min and max
- percentileOf: Value whose percentile is closest to a target
- valuesWithinPercentile: Values at or below a target percentile

Rounding:
    roundDigits is the number of decimal places kept, ties rounded away from
    zero. None (NO_ROUNDING) or any negative number keeps full precision.
"""

from typing import Dict, Optional

from .central import roundHalfAwayFromZero, sampleRange
from .exceptions import DomainError
from .types import DEFAULT_ROUND_DIGITS, Number, PercentileEntry, Sample


def _applyRounding(value: float, roundDigits: Optional[int]) -> float:
    if roundDigits is None or roundDigits < 0:
        return value
    return roundHalfAwayFromZero(value, roundDigits)


def percentiles(
    sample: Sample,
    roundDigits: Optional[int] = DEFAULT_ROUND_DIGITS
) -> Dict[Number, float]:
    """
    Calculate the percentile rank of each value in a sample.

    The minimum maps to 0 and the maximum to 100; everything in between is
    placed linearly: (value - min) * (100 / range).

    Args:
        sample: Sequence of numbers
        roundDigits: Decimal places to round to; None or negative for no rounding

    Returns:
        Dictionary of value -> percentile in ascending value order. Duplicate
        values share one entry.

    Raises:
        DomainError: If the sample is empty or all values are equal
    """
    spread = sampleRange(sample)
    if spread == 0:
        raise DomainError(
            "Cannot calculate percentiles when all values are equal (range is 0)",
            details={'count': len(sample), 'range': spread}
        )

    ordered = sorted(sample)
    minimum = ordered[0]
    step = 100 / spread

    return {
        value: _applyRounding((value - minimum) * step, roundDigits)
        for value in ordered
    }


def percentileOf(
    sample: Sample,
    target: float,
    roundDigits: Optional[int] = DEFAULT_ROUND_DIGITS
) -> PercentileEntry:
    """
    Find the value whose percentile is closest to a target percentile.

    Entries are scanned in ascending value order. A later entry only replaces
    the current candidate when it is strictly closer to the target, so on a
    tie the smaller value wins.

    Args:
        sample: Sequence of numbers
        target: Percentile to look for (0-100)
        roundDigits: Decimal places to round to; None or negative for no rounding

    Returns:
        PercentileEntry(value, percentile) of the closest entry

    Raises:
        DomainError: If the sample is empty or all values are equal
    """
    table = iter(percentiles(sample, roundDigits).items())

    bestValue, bestPercentile = next(table)
    bestDistance = abs(bestPercentile - target)

    for value, percentile in table:
        distance = abs(percentile - target)
        if distance < bestDistance:
            bestValue, bestPercentile, bestDistance = value, percentile, distance

    return PercentileEntry(value=bestValue, percentile=bestPercentile)


def valuesWithinPercentile(
    sample: Sample,
    target: float,
    roundDigits: Optional[int] = DEFAULT_ROUND_DIGITS
) -> Dict[Number, float]:
    """
    Select every value whose percentile is at or below a target.

    Args:
        sample: Sequence of numbers
        target: Inclusive upper percentile bound
        roundDigits: Decimal places to round to; None or negative for no rounding

    Returns:
        Dictionary of value -> percentile for percentile <= target

    Raises:
        DomainError: If the sample is empty or all values are equal
    """
    return {
        value: percentile
        for value, percentile in percentiles(sample, roundDigits).items()
        if percentile <= target
    }
