################################################################################
# File Name: main.py
# Purpose/Description: Command-line entry point for the statistics engine
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Commands for summary, quartile and percentile
#               |              | reports over a sample read from file or stdin
# ================================================================================
################################################################################

"""
Main application entry point.

This module provides the command-line interface with:
- CLI argument parsing
- Configuration loading and validation
- Sample parsing from a file or stdin
- JSON output of the requested statistics
- Error handling and exit codes

Usage:
    python src/main.py --help
    python src/main.py samples.txt
    python src/main.py samples.txt --command quartiles
    python src/main.py samples.txt --command percentile --target 60 --round-digits 2
    echo "1 2 3 4 999" | python src/main.py - --command outliers
    python src/main.py --command critical --significance 0.05 --dof 3
"""

import argparse
import json
import math
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Resolve project paths relative to this script (not CWD)
srcPath = Path(__file__).resolve().parent
projectRoot = srcPath.parent
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

DEFAULT_CONFIG = str(srcPath / 'stats_config.json')
DEFAULT_ENV = str(projectRoot / '.env')

from common.config_loader import loadConfigWithEnvironment
from common.config_validator import ConfigValidationError, ConfigValidator
from common.error_handler import (
    ConfigurationError,
    DataError,
    ErrorCollector,
    formatError,
    handleError,
)
from common.logging_config import (
    LogContext,
    getLogger,
    logWithContext,
    setupLogging,
    setupLoggingFromConfig,
)
from descriptive import (
    DEFAULT_TABLE_PATH,
    createSummaryFromConfig,
    getAnalysisSettings,
    inliers,
    lookup,
    outliers,
    percentileOf,
    percentiles,
    quartiles,
    valuesWithinPercentile,
    whiskers,
)
from descriptive.types import QUARTILE_LABELS, Number

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_DATA_ERROR = 2
EXIT_UNKNOWN_ERROR = 3

COMMANDS = (
    'summary',
    'quartiles',
    'outliers',
    'inliers',
    'percentiles',
    'percentile',
    'within',
    'critical',
)

TOKEN_SEPARATOR = re.compile(r'[\s,;]+')


def parseArgs(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description='Descriptive statistics for a sample of numbers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  main.py data.txt                                  Full summary as JSON
  main.py data.txt --command quartiles              Five-number summary
  main.py data.txt -k percentile -t 60 -r 2         Value closest to the 60th percentile
  cat data.txt | main.py - --command outliers       Read the sample from stdin
  main.py -k critical --significance 0.05 --dof 3   Chi-square critical value
        '''
    )

    parser.add_argument(
        'input',
        nargs='?',
        default=None,
        help="File of numbers separated by whitespace or commas, or '-' for stdin"
    )

    parser.add_argument(
        '--command', '-k',
        choices=COMMANDS,
        default='summary',
        help='Statistic to compute (default: summary)'
    )

    parser.add_argument(
        '--config', '-c',
        default=DEFAULT_CONFIG,
        help='Path to configuration file (default: src/stats_config.json)'
    )

    parser.add_argument(
        '--env-file', '-e',
        default=DEFAULT_ENV,
        help='Path to environment file (default: .env)'
    )

    parser.add_argument(
        '--target', '-t',
        type=float,
        default=None,
        help='Target percentile for the percentile/within commands'
    )

    parser.add_argument(
        '--round-digits', '-r',
        type=int,
        default=None,
        help='Decimal places for percentiles; negative disables rounding'
    )

    parser.add_argument(
        '--mode', '-m',
        choices=('sample', 'population'),
        default=None,
        help='Variance mode for the summary command'
    )

    parser.add_argument(
        '--significance', '-p',
        type=float,
        default=None,
        help='Significance level for the critical command'
    )

    parser.add_argument(
        '--dof', '-d',
        type=int,
        default=None,
        help='Degrees of freedom for the critical command'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (debug) logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s 1.0.0'
    )

    return parser.parse_args(argv)


def loadConfiguration(
    configPath: str,
    envPath: str | None = None
) -> dict:
    """
    Load and validate configuration.

    Args:
        configPath: Path to configuration file
        envPath: Path to environment file

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigurationError: If configuration is invalid
    """
    logger = getLogger(__name__)

    # An installed copy has no bundled config file beside it
    if configPath == DEFAULT_CONFIG and not Path(configPath).exists():
        logger.debug("Default configuration not found, using built-in defaults")
        return ConfigValidator().validate({})

    try:
        config = loadConfigWithEnvironment(configPath, envPath)

        validator = ConfigValidator()
        config = validator.validate(config)

        logger.debug(f"Configuration loaded from {configPath}")
        return config

    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Configuration file is not valid JSON: {e}") from e
    except ConfigValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def parseNumber(token: str) -> Number:
    """Parse a token as int when it is written as one, float otherwise."""
    try:
        return int(token)
    except ValueError:
        value = float(token)

    if not math.isfinite(value):
        raise ValueError(f"non-finite value: {token}")
    return value


def parseSample(text: str) -> List[Number]:
    """
    Parse a sample from text.

    Numbers may be separated by whitespace, commas or semicolons. Lines
    starting with '#' are ignored.

    Args:
        text: Raw input text

    Returns:
        List of parsed numbers in input order

    Raises:
        DataError: If any token is not a number (all bad tokens are reported)
    """
    collector = ErrorCollector()
    values: List[Number] = []

    for lineNum, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        for token in TOKEN_SEPARATOR.split(line):
            if not token:
                continue
            try:
                values.append(parseNumber(token))
            except ValueError:
                collector.add(
                    DataError(f"Line {lineNum}: '{token}' is not a number"),
                    line=lineNum,
                    token=token
                )

    if collector.hasErrors():
        collector.report()
        raise DataError(
            f"Sample contains {collector.count()} invalid value(s)",
            details={'errors': collector.messages()}
        )

    return values


def readSample(inputPath: str) -> List[Number]:
    """
    Read a sample from a file, or from stdin when inputPath is '-'.

    Raises:
        DataError: If the file cannot be read or holds non-numeric tokens
    """
    if inputPath == '-':
        return parseSample(sys.stdin.read())

    path = Path(inputPath)
    if not path.exists():
        raise DataError(
            f"Input file not found: {inputPath}",
            details={'input': inputPath}
        )

    return parseSample(path.read_text(encoding='utf-8'))


def _percentileTable(table: Dict[Number, float]) -> List[Dict[str, Number]]:
    # JSON object keys must be strings, so emit entries instead of a mapping
    return [{'value': value, 'percentile': rank} for value, rank in table.items()]


def runCommand(
    command: str,
    sample: List[Number],
    config: Dict[str, Any],
    target: float | None = None,
    roundDigits: int | None = None
) -> Any:
    """
    Compute the statistics for one command.

    Args:
        command: One of COMMANDS except 'critical'
        sample: Parsed sample
        config: Validated configuration
        target: Target percentile override
        roundDigits: Rounding override

    Returns:
        JSON-serializable result

    Raises:
        DomainError: If the sample does not suit the command
    """
    settings = getAnalysisSettings(config)
    if roundDigits is None:
        roundDigits = settings['roundDigits']
    if target is None:
        target = settings['percentileTarget']

    if command == 'summary':
        return createSummaryFromConfig(sample, config).toDict()

    if command == 'quartiles':
        return {
            'quartiles': dict(zip(QUARTILE_LABELS, quartiles(sample))),
            'whiskers': whiskers(sample).toDict(),
        }

    if command == 'outliers':
        return {'outliers': outliers(sample)}

    if command == 'inliers':
        return {'inliers': inliers(sample)}

    if command == 'percentiles':
        return {'percentiles': _percentileTable(percentiles(sample, roundDigits))}

    if command == 'percentile':
        return percentileOf(sample, target, roundDigits).toDict()

    if command == 'within':
        return {
            'target': target,
            'percentiles': _percentileTable(
                valuesWithinPercentile(sample, target, roundDigits)
            ),
        }

    raise ValueError(f"Unknown command: {command}")


def runCriticalLookup(
    config: Dict[str, Any],
    significance: float | None,
    dof: int | None
) -> Dict[str, Any]:
    """
    Look up a critical value from the configured table.

    Raises:
        DataError: If degrees of freedom were not given
        TableLookupError: If the table cannot be read
    """
    criticalConfig = config.get('criticalValues', {})
    if significance is None:
        significance = criticalConfig.get('significance', 0.05)
    if dof is None:
        raise DataError("The critical command requires --dof")

    tablePath = criticalConfig.get('table') or DEFAULT_TABLE_PATH

    return {
        'significance': significance,
        'degreesOfFreedom': dof,
        'criticalValue': lookup(tablePath, significance, dof),
    }


def writeResult(result: Any) -> None:
    """Write a result to stdout as indented JSON."""
    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write('\n')


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parseArgs(argv)

    # Bootstrap logging until the configuration says otherwise
    setupLogging(level='DEBUG' if args.verbose else 'WARNING')
    logger = getLogger(__name__)

    try:
        config = loadConfiguration(args.config, args.env_file)
        setupLoggingFromConfig(config, verbose=args.verbose)

        if args.mode:
            config['analysis']['varianceMode'] = args.mode

        with LogContext(command=args.command):
            logger.debug("Running command")

            if args.command == 'critical':
                result = runCriticalLookup(config, args.significance, args.dof)
            else:
                if args.input is None:
                    raise DataError(f"The {args.command} command requires an input file or '-'")
                sample = readSample(args.input)
                logWithContext(logger, 'debug', 'Read sample', count=len(sample))
                result = runCommand(
                    args.command,
                    sample,
                    config,
                    target=args.target,
                    roundDigits=args.round_digits
                )

        writeResult(result)
        return EXIT_SUCCESS

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    except DataError as e:
        handleError(e, context={'command': args.command}, reraise=False)
        print(formatError(e), file=sys.stderr)
        return EXIT_DATA_ERROR

    except Exception as e:
        handleError(e, reraise=False)
        logger.error(f"Unexpected error: {e}")
        return EXIT_UNKNOWN_ERROR


if __name__ == '__main__':
    sys.exit(main())
