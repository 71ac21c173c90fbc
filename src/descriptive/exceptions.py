################################################################################
# File Name: exceptions.py
# Purpose/Description: Exception definitions for the descriptive statistics package
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
Exception definitions for the descriptive statistics package.

Provides:
- StatisticsError: Base exception for statistics-related errors
- DomainError: Input violates a mathematical precondition
  (empty sample, zero range, too few values for the variance mode)
- TableLookupError: Critical-value table cannot be read or parsed

All of these are DATA category errors in the common error taxonomy.
"""

from common.error_handler import DataError


class StatisticsError(DataError):
    """Base exception for statistics-related errors."""
    pass


class DomainError(StatisticsError):
    """Sample does not satisfy the precondition of the requested measure."""
    pass


class TableLookupError(StatisticsError):
    """Critical-value table file is missing or malformed."""
    pass
