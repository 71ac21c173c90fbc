################################################################################
# File Name: conftest.py
# Purpose/Description: Pytest fixtures and configuration
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Sample and statistics configuration fixtures
# ================================================================================
################################################################################

"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.

Usage:
    def test_something(sampleConfig, twelveValues):
        # sampleConfig and twelveValues are automatically injected
        pass
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest

# Add src to path for imports
srcPath = Path(__file__).parent.parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))


# ================================================================================
# Sample Fixtures
# ================================================================================

@pytest.fixture
def twelveValues() -> List[int]:
    """Even-sized sample 1..12."""
    return list(range(1, 13))


@pytest.fixture
def thirteenValues() -> List[int]:
    """Odd-sized sample 1..13."""
    return list(range(1, 14))


@pytest.fixture
def unsortedValues() -> List[int]:
    """Unsorted even-sized sample."""
    return [839, 560, 607, 828, 875, 805, 646, 450, 930, 443]


@pytest.fixture
def sampleWithOutlier() -> List[int]:
    """1..10 followed by a single far outlier."""
    return [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 999]


@pytest.fixture
def percentileValues() -> List[int]:
    """Small sample with a known percentile table."""
    return [15, 20, 35, 40, 50]


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture
def sampleConfig() -> Dict[str, Any]:
    """
    Provide sample configuration for tests.

    Returns:
        Dictionary with test configuration values
    """
    return {
        'application': {
            'name': 'TestStats',
            'version': '1.0.0'
        },
        'logging': {
            'level': 'DEBUG'
        },
        'analysis': {
            'varianceMode': 'sample',
            'roundDigits': 0,
            'percentileTarget': 50
        },
        'criticalValues': {
            'significance': 0.05
        }
    }


@pytest.fixture
def tempConfigFile(tmp_path: Path, sampleConfig: Dict[str, Any]) -> Path:
    """
    Create temporary config file for testing.

    Returns:
        Path to temporary config file
    """
    configFile = tmp_path / 'config.json'
    with open(configFile, 'w') as f:
        json.dump(sampleConfig, f)

    return configFile


@pytest.fixture
def tempSampleFile(tmp_path: Path, sampleWithOutlier: List[int]) -> Path:
    """
    Create temporary sample file, one number per line.

    Returns:
        Path to temporary sample file
    """
    sampleFile = tmp_path / 'sample.txt'
    sampleFile.write_text('\n'.join(str(v) for v in sampleWithOutlier) + '\n')
    return sampleFile


# ================================================================================
# Environment Fixtures
# ================================================================================

@pytest.fixture
def cleanEnv() -> Generator[None, None, None]:
    """
    Ensure clean environment with no test variables.

    Removes test variables before test, restores after.
    """
    varsToRemove = ['STATS_LOG_LEVEL', 'STATS_MODE', 'TEST_VAR']

    saved = {}
    for var in varsToRemove:
        saved[var] = os.environ.pop(var, None)

    yield

    for var in varsToRemove:
        os.environ.pop(var, None)
    for var, value in saved.items():
        if value is not None:
            os.environ[var] = value


@pytest.fixture
def restoreLogging() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test reconfigures logging."""
    rootLogger = logging.getLogger()
    savedHandlers = list(rootLogger.handlers)
    savedLevel = rootLogger.level

    yield

    rootLogger.handlers.clear()
    rootLogger.handlers.extend(savedHandlers)
    rootLogger.setLevel(savedLevel)


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
