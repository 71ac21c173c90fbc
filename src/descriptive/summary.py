################################################################################
# File Name: summary.py
# Purpose/Description: One-call descriptive report over a sample
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
Descriptive report helpers.

Provides:
- summarizeSample: Compute every central, dispersion and quartile measure at once
- createSummaryFromConfig: Same, with variance mode taken from configuration
- getAnalysisSettings: Read analysis settings from a validated configuration
"""

import logging
from typing import Any, Dict, Optional, Union

from common.logging_config import logWithContext

from .central import mean, median, mode, sampleRange
from .dispersion import standardDeviation, standardErrorOfMean, variance
from .exceptions import DomainError
from .quantiles import outliers, quartiles, whiskers
from .types import DEFAULT_ROUND_DIGITS, Sample, SampleSummary, VarianceMode

logger = logging.getLogger(__name__)

# Dispersion needs at least this many values
MIN_DISPERSION_SAMPLES = 2


def summarizeSample(
    sample: Sample,
    varianceMode: Union[VarianceMode, str] = VarianceMode.SAMPLE
) -> SampleSummary:
    """
    Calculate all descriptive statistics for a sample.

    Dispersion fields (variance, standard deviation, standard error) are left
    as None when the sample has fewer than 2 values.

    Args:
        sample: Sequence of numbers
        varianceMode: Divisor for variance and standard deviation

    Returns:
        SampleSummary with all calculated values

    Raises:
        DomainError: If the sample is empty
    """
    varianceMode = VarianceMode.fromString(varianceMode)

    if len(sample) == 0:
        raise DomainError(
            "Cannot summarize an empty sample",
            details={'count': 0}
        )

    fiveNumbers = quartiles(sample)
    bounds = whiskers(sample)

    summary = SampleSummary(
        count=len(sample),
        minimum=fiveNumbers[0],
        maximum=fiveNumbers[4],
        range=sampleRange(sample),
        mean=mean(sample),
        median=median(sample),
        modes=mode(sample),
        varianceMode=varianceMode,
        quartiles=fiveNumbers,
        interquartileRange=fiveNumbers[3] - fiveNumbers[1],
        whiskers=bounds,
        outliers=outliers(sample),
    )

    if summary.count >= MIN_DISPERSION_SAMPLES:
        summary.variance = variance(sample, varianceMode)
        summary.standardDeviation = standardDeviation(sample, varianceMode)
        summary.standardError = standardErrorOfMean(sample)
    else:
        logWithContext(
            logger, 'debug', 'Skipping dispersion',
            count=summary.count, required=MIN_DISPERSION_SAMPLES
        )

    logWithContext(
        logger, 'debug', 'Summarized sample',
        count=summary.count, outliers=len(summary.outliers)
    )
    return summary


def getAnalysisSettings(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract analysis settings from configuration.

    Args:
        config: Validated configuration dictionary

    Returns:
        Dictionary with varianceMode (VarianceMode), roundDigits (int or None)
        and percentileTarget (float)
    """
    analysisConfig = config.get('analysis', {})
    roundDigits: Optional[int] = analysisConfig.get('roundDigits', DEFAULT_ROUND_DIGITS)

    return {
        'varianceMode': VarianceMode.fromString(
            analysisConfig.get('varianceMode', VarianceMode.SAMPLE.value)
        ),
        'roundDigits': roundDigits,
        'percentileTarget': float(analysisConfig.get('percentileTarget', 50)),
    }


def createSummaryFromConfig(sample: Sample, config: Dict[str, Any]) -> SampleSummary:
    """
    Summarize a sample using the variance mode from configuration.

    Args:
        sample: Sequence of numbers
        config: Validated configuration dictionary

    Returns:
        SampleSummary for the sample
    """
    settings = getAnalysisSettings(config)
    return summarizeSample(sample, settings['varianceMode'])
