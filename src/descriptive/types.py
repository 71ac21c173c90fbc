################################################################################
# File Name: types.py
# Purpose/Description: Type definitions for the descriptive statistics package
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
Type definitions for the descriptive statistics package.

Provides:
- VarianceMode enum for sample vs population divisors
- Whiskers dataclass for Tukey fence bounds
- PercentileEntry dataclass for a (value, percentile) pair
- SampleSummary dataclass for a complete descriptive report
- Rounding constants for the percentile engine

These types have no dependencies on other project modules (only stdlib).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

Number = Union[int, float]
Sample = Sequence[Number]

# Fixed Tukey fence multiplier
WHISKER_MULTIPLIER = 1.5

# Pass as roundDigits to keep full precision (any negative value works too)
NO_ROUNDING = None
DEFAULT_ROUND_DIGITS = 0

QUARTILE_LABELS = ('minimum', 'q1', 'median', 'q3', 'maximum')


# ================================================================================
# Enums
# ================================================================================

class VarianceMode(Enum):
    """Divisor used for variance: n-1 for a sample, n for a whole population."""
    SAMPLE = 'sample'
    POPULATION = 'population'

    @classmethod
    def fromString(cls, value: Union[str, 'VarianceMode']) -> 'VarianceMode':
        """
        Resolve a mode from its name or value, case-insensitive.

        Args:
            value: 'sample', 'POPULATION', or a VarianceMode

        Returns:
            Matching VarianceMode

        Raises:
            ValueError: If the value names no mode
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown variance mode '{value}' (expected 'sample' or 'population')"
            ) from None


# ================================================================================
# Data Classes
# ================================================================================

@dataclass(frozen=True)
class Whiskers:
    """
    Tukey fence bounds.

    Attributes:
        lower: Q1 - 1.5 * IQR
        upper: Q3 + 1.5 * IQR
    """
    lower: float
    upper: float

    def contains(self, value: Number) -> bool:
        """True if value lies within the inclusive [lower, upper] range."""
        return self.lower <= value <= self.upper

    def toDict(self) -> Dict[str, float]:
        """Convert bounds to dictionary for serialization."""
        return {'lower': self.lower, 'upper': self.upper}


@dataclass(frozen=True)
class PercentileEntry:
    """A sample value and its percentile rank."""
    value: Number
    percentile: float

    def toDict(self) -> Dict[str, Number]:
        """Convert entry to dictionary for serialization."""
        return {'value': self.value, 'percentile': self.percentile}


@dataclass
class SampleSummary:
    """
    Descriptive report for a single sample.

    Attributes:
        count: Number of values
        minimum: Smallest value
        maximum: Largest value
        range: maximum - minimum
        mean: Arithmetic mean
        median: Middle value (or mean of the two middle values)
        modes: Most frequent values; empty when there is no mode
        varianceMode: Divisor used for the dispersion fields
        variance: Variance, None when fewer than 2 values
        standardDeviation: Square root of variance, None when fewer than 2 values
        standardError: Standard error of the mean, None when fewer than 2 values
        quartiles: [minimum, Q1, median, Q3, maximum]
        interquartileRange: Q3 - Q1
        whiskers: Tukey fence bounds
        outliers: Values outside the whiskers, in input order
    """
    count: int
    minimum: Number
    maximum: Number
    range: Number
    mean: float
    median: float
    modes: List[Number] = field(default_factory=list)
    varianceMode: VarianceMode = VarianceMode.SAMPLE
    variance: Optional[float] = None
    standardDeviation: Optional[float] = None
    standardError: Optional[float] = None
    quartiles: List[float] = field(default_factory=list)
    interquartileRange: Optional[float] = None
    whiskers: Optional[Whiskers] = None
    outliers: List[Number] = field(default_factory=list)

    def toDict(self) -> Dict[str, Any]:
        """Convert summary to dictionary for serialization."""
        return {
            'count': self.count,
            'minimum': self.minimum,
            'maximum': self.maximum,
            'range': self.range,
            'mean': self.mean,
            'median': self.median,
            'modes': list(self.modes),
            'varianceMode': self.varianceMode.value,
            'variance': self.variance,
            'standardDeviation': self.standardDeviation,
            'standardError': self.standardError,
            'quartiles': dict(zip(QUARTILE_LABELS, self.quartiles)),
            'interquartileRange': self.interquartileRange,
            'whiskers': self.whiskers.toDict() if self.whiskers else None,
            'outliers': list(self.outliers),
        }
