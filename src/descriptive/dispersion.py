################################################################################
# File Name: dispersion.py
# Purpose/Description: Dispersion calculations (deviations, variance, std, sem)
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
Dispersion calculations.

Provides:
- deviations: Squared deviation from the mean, keyed by value
- variance: Sample (n-1) or population (n) variance
- standardDeviation / sd: Square root of variance
- standardErrorOfMean / sem: Sample standard deviation over sqrt(n)

These are pure functions with no side effects.
"""

import math
from typing import Dict, Union

from .central import mean
from .exceptions import DomainError
from .types import Number, Sample, VarianceMode


def deviations(sample: Sample) -> Dict[Number, float]:
    """
    Calculate the squared deviation of each value from the sample mean.

    The table is keyed by value, so duplicate values share one entry. Use
    variance() rather than summing this table.

    Args:
        sample: Sequence of numbers

    Returns:
        Dictionary of value -> (value - mean) ** 2

    Raises:
        DomainError: If the sample is empty
    """
    sampleMean = mean(sample)
    return {value: (value - sampleMean) ** 2 for value in sample}


def variance(
    sample: Sample,
    mode: Union[VarianceMode, str] = VarianceMode.SAMPLE
) -> float:
    """
    Calculate the variance of a sample.

    Args:
        sample: Sequence of numbers
        mode: SAMPLE divides by n-1, POPULATION divides by n

    Returns:
        Calculated variance

    Raises:
        DomainError: If the sample is empty, or has one value in SAMPLE mode
    """
    mode = VarianceMode.fromString(mode)
    sampleMean = mean(sample)
    count = len(sample)
    divisor = count - 1 if mode is VarianceMode.SAMPLE else count

    if divisor == 0:
        raise DomainError(
            "Cannot calculate sample variance with fewer than 2 values",
            details={'count': count, 'mode': mode.value}
        )

    squaredDiffs = [(value - sampleMean) ** 2 for value in sample]
    return sum(squaredDiffs) / divisor


def standardDeviation(
    sample: Sample,
    mode: Union[VarianceMode, str] = VarianceMode.SAMPLE
) -> float:
    """Square root of variance(sample, mode)."""
    return math.sqrt(variance(sample, mode))


def standardErrorOfMean(sample: Sample) -> float:
    """
    Calculate the standard error of the mean.

    Always uses the sample standard deviation: sd(sample, SAMPLE) / sqrt(n).

    Raises:
        DomainError: If the sample has fewer than 2 values
    """
    return standardDeviation(sample, VarianceMode.SAMPLE) / math.sqrt(len(sample))


# Short names
sd = standardDeviation
sem = standardErrorOfMean
