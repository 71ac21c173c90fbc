################################################################################
# File Name: __init__.py
# Purpose/Description: Common utilities package initialization
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | secrets_loader replaced by config_loader
# ================================================================================
################################################################################

"""
Common utilities package.

This package provides shared functionality used across the application:
- Configuration validation and loading
- Logging configuration
- Error handling

Usage:
    from common.config_validator import ConfigValidator
    from common.config_loader import loadConfigWithEnvironment
    from common.logging_config import getLogger
    from common.error_handler import DataError
"""

from .config_loader import loadConfigWithEnvironment
from .config_validator import ConfigValidationError, ConfigValidator
from .error_handler import ConfigurationError, DataError, ErrorCollector, handleError
from .logging_config import getLogger, setupLogging, setupLoggingFromConfig

__all__ = [
    'ConfigValidator',
    'ConfigValidationError',
    'loadConfigWithEnvironment',
    'getLogger',
    'setupLogging',
    'setupLoggingFromConfig',
    'ConfigurationError',
    'DataError',
    'ErrorCollector',
    'handleError'
]
