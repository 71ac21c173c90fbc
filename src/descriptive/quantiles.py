################################################################################
# File Name: quantiles.py
# Purpose/Description: Quartiles, interquartile range and Tukey outlier fences
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
Quantile engine.

Provides:
- quartiles: [minimum, Q1, median, Q3, maximum]
- interquartileRange: Q3 - Q1
- whiskers: Tukey fences at 1.5 * IQR beyond Q1 and Q3
- outliers / inliers: Partition of the original sample by the whiskers

Quartile convention:
    The sample is sorted. For an odd count n, the element at 0-based index
    round(n / 2) (ties away from zero) is removed. The remaining, even-sized
    list is cut into a lower and an upper half of equal size, and Q1 / Q3 are
    the medians of those halves. Q2 is the median of the full sample.

    quartiles(range(1, 13)) -> [1, 3.5, 6.5, 9.5, 12]
    quartiles(range(1, 14)) -> [1, 3.5, 7, 10.5, 13]
"""

from typing import List, Tuple

from .central import median, roundHalfAwayFromZero
from .exceptions import DomainError
from .types import WHISKER_MULTIPLIER, Number, Sample, Whiskers


def _splitHalves(ordered: List[Number]) -> Tuple[List[Number], List[Number]]:
    """Split a sorted list into lower and upper halves, dropping one value if odd."""
    remaining = list(ordered)
    count = len(remaining)

    if count % 2 != 0:
        del remaining[int(roundHalfAwayFromZero(count / 2))]

    half = len(remaining) // 2
    return remaining[:half], remaining[half:]


def quartiles(sample: Sample) -> List[float]:
    """
    Calculate the five-number summary of a sample.

    Args:
        sample: Sequence of numbers

    Returns:
        [minimum, Q1, median, Q3, maximum], non-decreasing

    Raises:
        DomainError: If the sample is empty
    """
    if len(sample) == 0:
        raise DomainError(
            "Cannot calculate quartiles of an empty sample",
            details={'measure': 'quartiles', 'count': 0}
        )

    ordered = sorted(sample)

    # A single value has no halves to split
    if len(ordered) == 1:
        only = ordered[0]
        return [only, only, only, only, only]

    lower, upper = _splitHalves(ordered)

    return [
        ordered[0],
        median(lower),
        median(ordered),
        median(upper),
        ordered[-1],
    ]


def interquartileRange(sample: Sample) -> float:
    """Calculate Q3 - Q1."""
    _, q1, _, q3, _ = quartiles(sample)
    return q3 - q1


def whiskers(sample: Sample) -> Whiskers:
    """
    Calculate Tukey fences for a sample.

    Args:
        sample: Sequence of numbers

    Returns:
        Whiskers(lower=Q1 - 1.5 * IQR, upper=Q3 + 1.5 * IQR)

    Raises:
        DomainError: If the sample is empty
    """
    _, q1, _, q3, _ = quartiles(sample)
    spread = WHISKER_MULTIPLIER * (q3 - q1)
    return Whiskers(lower=q1 - spread, upper=q3 + spread)


def outliers(sample: Sample) -> List[Number]:
    """
    Values strictly below the lower whisker or strictly above the upper one.

    Returns:
        Outlying values in their original sample order
    """
    bounds = whiskers(sample)
    return [value for value in sample if not bounds.contains(value)]


def inliers(sample: Sample) -> List[Number]:
    """
    Values within the inclusive whisker range.

    Returns:
        Inlying values in their original sample order
    """
    bounds = whiskers(sample)
    return [value for value in sample if bounds.contains(value)]
