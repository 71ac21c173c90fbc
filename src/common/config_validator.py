################################################################################
# File Name: config_validator.py
# Purpose/Description: Configuration validation with required fields and defaults
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Analysis defaults and value checks for the
#               |              | statistics engine
# 2026-10-19    | M. Cornelison | Reject non-object sections, removed validateField
# ================================================================================
################################################################################

"""
Configuration validation module.

Provides validation of configuration files with:
- Required field checking
- Default value application
- Nested configuration support
- Rejection of sections that are not objects (e.g. "analysis": null)
- Allowed-value checks for analysis settings
- Clear error messages for missing/invalid fields

Usage:
    from common.config_validator import ConfigValidator

    validator = ConfigValidator()
    config = validator.validate(rawConfig)
"""

from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(
        self,
        message: str,
        missingFields: Optional[List[str]] = None,
        invalidFields: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.missingFields = missingFields or []
        self.invalidFields = invalidFields or []


# Required configuration keys (dot notation)
REQUIRED_KEYS: List[str] = [
    'application.name',
]

# Default values for optional settings
DEFAULTS: Dict[str, Any] = {
    'application.name': 'descriptive-stats',
    'application.version': '1.0.0',
    'logging.level': 'INFO',
    'analysis.varianceMode': 'sample',
    'analysis.roundDigits': 0,
    'analysis.percentileTarget': 50,
    'criticalValues.significance': 0.05,
}

VARIANCE_MODES = ('sample', 'population')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidator:
    """
    Validates configuration dictionaries.

    Provides methods to:
    - Check for required fields
    - Apply default values
    - Validate field types and allowed values
    - Return fully validated configuration

    Attributes:
        requiredKeys: List of required configuration keys (dot notation)
        defaults: Dictionary of default values for optional fields
    """

    def __init__(
        self,
        requiredKeys: Optional[List[str]] = None,
        defaults: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the validator.

        Args:
            requiredKeys: List of required keys in dot notation (e.g., 'application.name')
            defaults: Dictionary of default values in dot notation
        """
        self.requiredKeys = REQUIRED_KEYS if requiredKeys is None else requiredKeys
        self.defaults = DEFAULTS if defaults is None else defaults

    def validate(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and enhance configuration.

        Performs:
        1. Section shape check
        2. Default value application
        3. Required field validation
        4. Analysis value checks

        Args:
            config: Raw configuration dictionary

        Returns:
            Validated configuration with defaults applied

        Raises:
            ConfigValidationError: If a section is not an object, or required
                fields are missing or values invalid
        """
        if not isinstance(config, dict):
            raise ConfigValidationError(
                f"Configuration must be an object, got {type(config).__name__}",
                invalidFields=['<root>']
            )

        invalidSections = self._validateSections(config)
        if invalidSections:
            fieldList = ', '.join(invalidSections)
            raise ConfigValidationError(
                f"Configuration sections must be objects: {fieldList}",
                invalidFields=invalidSections
            )

        config = self._applyDefaults(config)

        missingFields = self._validateRequired(config)
        if missingFields:
            fieldList = ', '.join(missingFields)
            raise ConfigValidationError(
                f"Missing required configuration fields: {fieldList}",
                missingFields=missingFields
            )

        invalidFields = self._validateValues(config)
        if invalidFields:
            fieldList = ', '.join(invalidFields)
            raise ConfigValidationError(
                f"Invalid configuration values: {fieldList}",
                invalidFields=invalidFields
            )

        logger.debug("Configuration validated successfully")
        return config

    def _validateSections(self, config: Dict[str, Any]) -> List[str]:
        """
        Find sections on the path to a known key that hold something other
        than a nested object (e.g. "analysis": null).

        Args:
            config: Raw configuration dictionary

        Returns:
            List of 'section=value' descriptions, one per bad section
        """
        invalidSections: List[str] = []
        seen = set()

        for key in list(self.requiredKeys) + list(self.defaults):
            parts = key.split('.')
            current: Any = config

            for depth, part in enumerate(parts[:-1], 1):
                if part not in current:
                    break
                current = current[part]
                if not isinstance(current, dict):
                    section = '.'.join(parts[:depth])
                    if section not in seen:
                        seen.add(section)
                        invalidSections.append(f'{section}={current}')
                    break

        return invalidSections

    def _validateRequired(self, config: Dict[str, Any]) -> List[str]:
        """
        Check for required configuration fields.

        Args:
            config: Configuration dictionary to check

        Returns:
            List of missing field names (empty if all present)
        """
        missingFields = []

        for key in self.requiredKeys:
            if not self._getNestedValue(config, key):
                missingFields.append(key)

        return missingFields

    def _validateValues(self, config: Dict[str, Any]) -> List[str]:
        """
        Check analysis and logging settings hold usable values.

        Args:
            config: Configuration dictionary with defaults applied

        Returns:
            List of 'key=value' descriptions for invalid fields
        """
        invalidFields = []

        varianceMode = self._getNestedValue(config, 'analysis.varianceMode')
        if varianceMode is not None and str(varianceMode).lower() not in VARIANCE_MODES:
            invalidFields.append(f'analysis.varianceMode={varianceMode}')

        # bool is an int subclass, but true/false make no sense as digits
        roundDigits = self._getNestedValue(config, 'analysis.roundDigits')
        if isinstance(roundDigits, bool) or not isinstance(roundDigits, (int, type(None))):
            invalidFields.append(f'analysis.roundDigits={roundDigits}')

        target = self._getNestedValue(config, 'analysis.percentileTarget')
        if target is not None and (
            isinstance(target, bool) or not isinstance(target, (int, float))
        ):
            invalidFields.append(f'analysis.percentileTarget={target}')

        level = self._getNestedValue(config, 'logging.level')
        if level is not None and str(level).upper() not in LOG_LEVELS:
            invalidFields.append(f'logging.level={level}')

        return invalidFields

    def _applyDefaults(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply default values for missing optional fields.

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with defaults applied
        """
        for key, defaultValue in self.defaults.items():
            if self._getNestedValue(config, key) is None:
                self._setNestedValue(config, key, defaultValue)
                logger.debug(f"Applied default for {key}: {defaultValue}")

        return config

    def _getNestedValue(self, config: Dict[str, Any], key: str) -> Any:
        """
        Get a value from nested dictionary using dot notation.

        Args:
            config: Configuration dictionary
            key: Dot-notation key (e.g., 'analysis.roundDigits')

        Returns:
            Value if found, None otherwise
        """
        keys = key.split('.')
        value = config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return None

        return value

    def _setNestedValue(self, config: Dict[str, Any], key: str, value: Any) -> None:
        """
        Set a value in nested dictionary using dot notation.

        Args:
            config: Configuration dictionary to modify
            key: Dot-notation key (e.g., 'analysis.roundDigits')
            value: Value to set
        """
        keys = key.split('.')
        current = config

        for k in keys[:-1]:
            if k not in current:
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value
