################################################################################
# File Name: __init__.py
# Purpose/Description: Descriptive statistics package initialization
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
Descriptive Statistics Package.

Pure, stateless functions over a sample of real numbers:
- Central tendency (mean, median, mode, frequencies, range)
- Dispersion (deviations, variance, standard deviation, standard error)
- Quantiles (quartiles, IQR, whiskers, outliers, inliers)
- Percentiles (percentile table, closest-rank lookup, percentile filter)
- Critical-value table lookup

Usage:
    from descriptive import quartiles, whiskers, percentileOf

    quartiles([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12])
    # [1, 3.5, 6.5, 9.5, 12]

    percentileOf([15, 20, 35, 40, 50], 60)
    # PercentileEntry(value=35, percentile=57.0)
"""

from .central import (
    average,
    frequencies,
    mean,
    median,
    mode,
    roundHalfAwayFromZero,
    sampleRange,
)
from .critical_values import (
    DEFAULT_TABLE_PATH,
    degreesOfFreedom,
    loadCriticalValueTable,
    lookup,
)
from .dispersion import (
    deviations,
    sd,
    sem,
    standardDeviation,
    standardErrorOfMean,
    variance,
)
from .exceptions import DomainError, StatisticsError, TableLookupError
from .percentiles import percentileOf, percentiles, valuesWithinPercentile
from .quantiles import inliers, interquartileRange, outliers, quartiles, whiskers
from .summary import createSummaryFromConfig, getAnalysisSettings, summarizeSample
from .types import (
    DEFAULT_ROUND_DIGITS,
    NO_ROUNDING,
    QUARTILE_LABELS,
    WHISKER_MULTIPLIER,
    PercentileEntry,
    SampleSummary,
    VarianceMode,
    Whiskers,
)

__all__ = [
    # Types
    'VarianceMode',
    'Whiskers',
    'PercentileEntry',
    'SampleSummary',
    'WHISKER_MULTIPLIER',
    'NO_ROUNDING',
    'DEFAULT_ROUND_DIGITS',
    'QUARTILE_LABELS',
    # Exceptions
    'StatisticsError',
    'DomainError',
    'TableLookupError',
    # Central tendency
    'mean',
    'average',
    'median',
    'mode',
    'frequencies',
    'sampleRange',
    'roundHalfAwayFromZero',
    # Dispersion
    'deviations',
    'variance',
    'standardDeviation',
    'sd',
    'standardErrorOfMean',
    'sem',
    # Quantiles
    'quartiles',
    'interquartileRange',
    'whiskers',
    'outliers',
    'inliers',
    # Percentiles
    'percentiles',
    'percentileOf',
    'valuesWithinPercentile',
    # Summary
    'summarizeSample',
    'createSummaryFromConfig',
    'getAnalysisSettings',
    # Critical values
    'lookup',
    'loadCriticalValueTable',
    'degreesOfFreedom',
    'DEFAULT_TABLE_PATH',
]
