#!/usr/bin/env python3
################################################################################
# File Name: validate_config.py
# Purpose/Description: Validate project configuration before running
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Checks for analysis settings and the
#               |              | critical-value table
# ================================================================================
################################################################################

"""
Configuration validation script.

Run this script to validate your configuration before running the application.

Usage:
    python validate_config.py
    python validate_config.py --config path/to/config.json
    python validate_config.py --verbose
"""

import argparse
import sys
from pathlib import Path

# Add src to path
srcPath = Path(__file__).parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

from common.config_loader import loadConfigWithEnvironment, loadEnvFile
from common.config_validator import ConfigValidator, ConfigValidationError
from descriptive import DEFAULT_TABLE_PATH, TableLookupError, loadCriticalValueTable


def printHeader(message: str) -> None:
    """Print a section header."""
    print()
    print("=" * 60)
    print(f"  {message}")
    print("=" * 60)


def printStatus(label: str, status: bool, details: str = "") -> None:
    """Print a status line with check mark or X."""
    icon = "[OK]" if status else "[X]"
    detail = f" - {details}" if details else ""
    print(f"  {icon} {label}{detail}")


def validateEnvironment(envPath: str = '.env', verbose: bool = False) -> bool:
    """Load the optional .env file and report what it set."""
    printHeader("Environment Variables")

    if not Path(envPath).exists():
        printStatus(".env file", True, "not present, using configuration defaults")
        return True

    loaded = loadEnvFile(envPath)
    printStatus(".env file loaded", True, f"{len(loaded)} variable(s)")

    if verbose:
        for name in loaded:
            print(f"    - {name}")

    return True


def validateConfig(configPath: str, verbose: bool = False) -> dict | None:
    """Validate configuration file, returning it when valid."""
    printHeader("Configuration File")

    configFile = Path(configPath)

    if not configFile.exists():
        printStatus("Config file exists", False, f"{configPath} not found")
        return None

    printStatus("Config file exists", True, configPath)

    try:
        config = loadConfigWithEnvironment(configPath)
        validator = ConfigValidator()
        config = validator.validate(config)

        printStatus("Config format valid", True)
        printStatus("Required fields present", True)
        printStatus("Analysis settings valid", True)

        if verbose:
            analysis = config.get('analysis', {})
            print()
            print("  Analysis settings:")
            for key, value in analysis.items():
                print(f"    - {key}: {value}")

        return config

    except ConfigValidationError as e:
        printStatus("Configuration valid", False, str(e))
        for field in e.missingFields + e.invalidFields:
            print(f"    - {field}")
        return None

    except Exception as e:
        printStatus("Configuration valid", False, str(e))
        return None


def validateCriticalValueTable(config: dict | None, verbose: bool = False) -> bool:
    """Check the configured critical-value table can be read."""
    printHeader("Critical Value Table")

    tablePath = ((config or {}).get('criticalValues', {}).get('table')
                 or DEFAULT_TABLE_PATH)

    try:
        table = loadCriticalValueTable(tablePath)
    except TableLookupError as e:
        printStatus(str(tablePath), False, e.message)
        return False

    printStatus(str(tablePath), True, f"{len(table)} rows")
    if verbose and table:
        firstRow = next(iter(table.values()))
        print(f"    significance levels: {sorted(firstRow)}")

    return True


def validateProjectStructure(verbose: bool = False) -> bool:
    """Validate project folder structure."""
    printHeader("Project Structure")

    requiredPaths = [
        'src/',
        'src/common/',
        'src/descriptive/',
        'src/stats_config.json',
        'tests/',
        'pyproject.toml',
    ]

    allExist = True

    for path in requiredPaths:
        exists = Path(path).exists()
        printStatus(path, exists)
        if not exists:
            allExist = False

    return allExist


def main() -> int:
    """Run all validations."""
    parser = argparse.ArgumentParser(description='Validate project configuration')
    parser.add_argument('--config', '-c', default='src/stats_config.json',
                        help='Path to configuration file')
    parser.add_argument('--env-file', '-e', default='.env',
                        help='Path to environment file')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show detailed output')
    args = parser.parse_args()

    print()
    print("Configuration Validation")
    print("========================")

    results = []

    results.append(('Project Structure', validateProjectStructure(args.verbose)))
    results.append(('Environment', validateEnvironment(args.env_file, args.verbose)))
    config = validateConfig(args.config, args.verbose)
    results.append(('Configuration', config is not None))
    results.append(('Critical Value Table', validateCriticalValueTable(config, args.verbose)))

    # Summary
    printHeader("Summary")

    allPassed = True
    for name, passed in results:
        printStatus(name, passed)
        if not passed:
            allPassed = False

    print()
    if allPassed:
        print("All validations passed! Ready to run.")
        return 0
    else:
        print("Some validations failed. Please fix the issues above.")
        return 1


if __name__ == '__main__':
    sys.exit(main())
