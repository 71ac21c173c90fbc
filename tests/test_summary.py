################################################################################
# File Name: test_summary.py
# Purpose/Description: Tests for the one-call descriptive report
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
Tests for the summary module.

Run with:
    pytest tests/test_summary.py -v
"""

import logging
import sys
from pathlib import Path

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from descriptive.exceptions import DomainError
from descriptive.summary import (
    createSummaryFromConfig,
    getAnalysisSettings,
    summarizeSample,
)
from descriptive.types import VarianceMode, Whiskers


class TestSummarizeSample:
    """Tests for summarizeSample()."""

    def test_summarizeSample_sampleWithOutlier_fillsEveryField(self, sampleWithOutlier):
        """
        Given: 1..10 plus 999
        When: summarizeSample() is called
        Then: Central, quartile and outlier fields are populated
        """
        summary = summarizeSample(sampleWithOutlier)

        assert summary.count == 11
        assert summary.minimum == 1
        assert summary.maximum == 999
        assert summary.range == 998
        assert summary.mean == pytest.approx(1054 / 11)
        assert summary.median == 6
        assert summary.modes == []
        assert summary.quartiles == [1, 3, 6, 9, 999]
        assert summary.interquartileRange == 6
        assert summary.whiskers == Whiskers(lower=-6, upper=18)
        assert summary.outliers == [999]
        assert summary.variance is not None
        assert summary.standardError is not None

    def test_summarizeSample_populationMode_usesPopulationDivisor(self):
        """
        Given: Sample [1, 2, 3, 4, 5] and POPULATION mode by name
        When: summarizeSample() is called
        Then: Variance is 2 and the mode is recorded
        """
        summary = summarizeSample([1, 2, 3, 4, 5], 'population')

        assert summary.varianceMode is VarianceMode.POPULATION
        assert summary.variance == 2
        assert summary.standardDeviation == pytest.approx(2 ** 0.5)

    def test_summarizeSample_singleValue_leavesDispersionEmpty(self):
        """
        Given: One value
        When: summarizeSample() is called
        Then: Dispersion fields are None, quartiles collapse to the value
        """
        summary = summarizeSample([7])

        assert summary.variance is None
        assert summary.standardDeviation is None
        assert summary.standardError is None
        assert summary.quartiles == [7, 7, 7, 7, 7]
        assert summary.outliers == []

    def test_summarizeSample_singleValue_logsSkippedDispersion(self, caplog):
        """
        Given: A sample with one value
        When: summarizeSample() is called with debug logging captured
        Then: Logs the skip with the count and the required minimum
        """
        with caplog.at_level(logging.DEBUG, logger='descriptive.summary'):
            summarizeSample([7])

        messages = [r.getMessage() for r in caplog.records]
        assert 'Skipping dispersion | count=1 required=2' in messages
        assert 'Summarized sample | count=1 outliers=0' in messages

    def test_summarizeSample_emptySample_raisesDomainError(self):
        """
        Given: Empty sample
        When: summarizeSample() is called
        Then: Raises DomainError
        """
        with pytest.raises(DomainError):
            summarizeSample([])

    def test_summarizeSample_unknownMode_raisesValueError(self):
        """
        Given: Unknown variance mode
        When: summarizeSample() is called
        Then: Raises ValueError
        """
        with pytest.raises(ValueError):
            summarizeSample([1, 2], 'weighted')


class TestSampleSummaryToDict:
    """Tests for SampleSummary.toDict()."""

    def test_toDict_labelsQuartilesAndSerializesNested(self, sampleWithOutlier):
        """
        Given: Summary of 1..10 plus 999
        When: toDict() is called
        Then: Quartiles are labelled and nested types are plain values
        """
        result = summarizeSample(sampleWithOutlier).toDict()

        assert result['quartiles'] == {
            'minimum': 1, 'q1': 3, 'median': 6, 'q3': 9, 'maximum': 999
        }
        assert result['whiskers'] == {'lower': -6, 'upper': 18}
        assert result['varianceMode'] == 'sample'
        assert result['outliers'] == [999]


class TestGetAnalysisSettings:
    """Tests for getAnalysisSettings()."""

    def test_getAnalysisSettings_fullConfig_readsAllFields(self, sampleConfig):
        """
        Given: Configuration with an analysis section
        When: getAnalysisSettings() is called
        Then: Returns typed settings
        """
        sampleConfig['analysis']['varianceMode'] = 'population'
        sampleConfig['analysis']['roundDigits'] = 2

        settings = getAnalysisSettings(sampleConfig)

        assert settings == {
            'varianceMode': VarianceMode.POPULATION,
            'roundDigits': 2,
            'percentileTarget': 50.0,
        }

    def test_getAnalysisSettings_emptyConfig_usesDefaults(self):
        """
        Given: Configuration with no analysis section
        When: getAnalysisSettings() is called
        Then: Returns sample mode, 0 digits, target 50
        """
        settings = getAnalysisSettings({})

        assert settings['varianceMode'] is VarianceMode.SAMPLE
        assert settings['roundDigits'] == 0
        assert settings['percentileTarget'] == 50.0


class TestCreateSummaryFromConfig:
    """Tests for createSummaryFromConfig()."""

    def test_createSummaryFromConfig_populationConfig_appliesMode(self, sampleConfig):
        """
        Given: Configuration selecting population variance
        When: createSummaryFromConfig() is called
        Then: Summary uses the population divisor
        """
        sampleConfig['analysis']['varianceMode'] = 'population'

        summary = createSummaryFromConfig([1, 2, 3, 4, 5], sampleConfig)

        assert summary.varianceMode is VarianceMode.POPULATION
        assert summary.variance == 2
