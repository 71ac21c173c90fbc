################################################################################
# File Name: central.py
# Purpose/Description: Central tendency calculations (mean, median, mode, range)
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Return values unchanged when rounding past float
#               |              | precision
# ================================================================================
################################################################################

"""
Central tendency calculations.

Provides:
- mean / average: Arithmetic mean
- median: Middle value of the sorted sample
- frequencies: Occurrence count per distinct value
- mode: Most frequent values, with the "no unique peak" convention
- sampleRange: Difference between largest and smallest value
- roundHalfAwayFromZero: Rounding used by median indexing and percentiles

These are pure functions with no side effects. Input samples are never
modified; anything order-dependent works on a sorted copy.
"""

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

from .exceptions import DomainError
from .types import Number, Sample


def roundHalfAwayFromZero(value: float, digits: int = 0) -> float:
    """
    Round to a number of decimal places, ties going away from zero.

    Python's round() rounds ties to even (round(2.5) == 2); callers here need
    2.5 -> 3 and 14.285 -> 14.29. The float is read through its shortest repr
    so that 0.285 rounds as written rather than as its binary approximation.

    A float's repr holds at most 17 significant digits. When digits already
    reaches past the last of them (1e300, or 14.285 to 90 places) the value is
    exact at that precision and is returned unchanged.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value as float
    """
    exact = Decimal(repr(float(value)))
    if not exact.is_finite() or exact.as_tuple().exponent >= -digits:
        return float(value)

    # Result has no more digits than the repr plus a carry, within default precision
    rounded = exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return float(rounded)


def _requireValues(sample: Sample, measure: str) -> None:
    if len(sample) == 0:
        raise DomainError(
            f"Cannot calculate {measure} of an empty sample",
            details={'measure': measure, 'count': 0}
        )


# ================================================================================
# Central Tendency Functions
# ================================================================================

def mean(sample: Sample) -> float:
    """
    Calculate arithmetic mean of a sample.

    Args:
        sample: Sequence of numbers

    Returns:
        Sum divided by count

    Raises:
        DomainError: If the sample is empty
    """
    _requireValues(sample, 'mean')
    return sum(sample) / len(sample)


def average(sample: Sample) -> float:
    """Alias for mean()."""
    return mean(sample)


def median(sample: Sample) -> float:
    """
    Calculate the median of a sample.

    The middle index is round(count / 2) - 1 with ties rounded away from zero.
    An odd-sized sample returns that element; an even-sized sample returns the
    mean of that element and the next one.

    Args:
        sample: Sequence of numbers

    Returns:
        Median value

    Raises:
        DomainError: If the sample is empty
    """
    _requireValues(sample, 'median')
    ordered = sorted(sample)
    count = len(ordered)
    middle = int(roundHalfAwayFromZero(count / 2)) - 1

    if count % 2 != 0:
        return ordered[middle]
    return mean([ordered[middle], ordered[middle + 1]])


def frequencies(sample: Sample) -> Dict[Number, int]:
    """
    Count occurrences of each distinct value.

    Args:
        sample: Sequence of numbers

    Returns:
        Dictionary of value -> count, ordered by descending count. Values with
        equal counts keep the order in which they first appear in the sample.
    """
    counts = Counter(sample)
    # sorted() is stable with reverse=True, so first-seen order survives ties
    return dict(sorted(counts.items(), key=lambda item: item[1], reverse=True))


def mode(sample: Sample) -> List[Number]:
    """
    Find the mode(s) of a sample.

    Walks the frequency table from the most frequent value down, collecting
    every value that shares the top frequency. The walk must reach a value with
    a strictly lower frequency for the collected values to count as modes: when
    every distinct value is equally frequent (including a sample with a single
    distinct value) there is no peak and the result is empty.

    Examples:
        mode([1, 2, 3])       -> []
        mode([1, 1, 1])       -> []
        mode([1, 2, 2])       -> [2]
        mode([1, 2, 2, 3, 3]) -> [2, 3]

    Args:
        sample: Sequence of numbers

    Returns:
        List of modes in frequency-table order, empty if there is no mode
    """
    table = list(frequencies(sample).items())
    if not table:
        return []

    firstValue, maxFrequency = table[0]
    modes = [firstValue]

    for value, frequency in table[1:]:
        if frequency != maxFrequency:
            return modes
        modes.append(value)

    return []


def sampleRange(sample: Sample) -> Number:
    """
    Calculate the range (max - min) of a sample.

    Raises:
        DomainError: If the sample is empty
    """
    _requireValues(sample, 'range')
    return max(sample) - min(sample)
