################################################################################
# File Name: critical_values.py
# Purpose/Description: Critical-value table lookup from CSV files
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Reject fractional degrees of freedom
# ================================================================================
################################################################################

"""
Critical-value table lookup.

Tables are CSV files keyed by degrees of freedom (rows) and significance
level (columns):

    df,0.10,0.05,0.025,0.01,0.001
    1,2.706,3.841,5.024,6.635,10.828
    ...

Row keys are coerced to int, column keys and cells to float. A chi-square
table for df 1-10 ships with the package (DEFAULT_TABLE_PATH).

Usage:
    from descriptive.critical_values import lookup, DEFAULT_TABLE_PATH

    critical = lookup(DEFAULT_TABLE_PATH, 0.05, 3)   # 7.815
"""

import csv
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from common.logging_config import logWithContext

from .exceptions import DomainError, TableLookupError

logger = logging.getLogger(__name__)

DEFAULT_TABLE_PATH = Path(__file__).parent / 'data' / 'chi_square.csv'

CriticalValueTable = Dict[int, Dict[float, float]]


def loadCriticalValueTable(tablePath: Union[str, Path]) -> CriticalValueTable:
    """
    Read a critical-value table from a CSV file.

    Args:
        tablePath: Path to the CSV file

    Returns:
        Dictionary of degrees of freedom -> {significance: critical value}

    Raises:
        TableLookupError: If the file is missing, empty or not numeric
    """
    path = Path(tablePath)
    if not path.exists():
        raise TableLookupError(
            f"Critical value table not found: {tablePath}",
            details={'tablePath': str(tablePath)}
        )

    table: CriticalValueTable = {}

    with open(path, 'r', encoding='utf-8', newline='') as csvFile:
        reader = csv.reader(csvFile)
        header = next(reader, None)
        if not header or len(header) < 2:
            raise TableLookupError(
                f"Critical value table has no header: {tablePath}",
                details={'tablePath': str(tablePath)}
            )

        try:
            columns = [float(key) for key in header[1:]]
        except ValueError as e:
            raise TableLookupError(
                f"Invalid significance level in header of {tablePath}: {e}",
                details={'tablePath': str(tablePath), 'header': header}
            ) from e

        for lineNum, row in enumerate(reader, 2):
            if not row:
                continue
            try:
                rowKey = int(row[0])
                table[rowKey] = {
                    column: float(cell)
                    for column, cell in zip(columns, row[1:])
                    if cell.strip()
                }
            except ValueError as e:
                raise TableLookupError(
                    f"Invalid value on line {lineNum} of {tablePath}: {e}",
                    details={'tablePath': str(tablePath), 'line': lineNum}
                ) from e

    logger.debug(f"Loaded critical value table | path={path} | rows={len(table)}")
    return table


def lookup(
    tablePath: Union[str, Path],
    columnKey: Any,
    rowKey: Any
) -> Optional[float]:
    """
    Look up one critical value.

    Args:
        tablePath: Path to the CSV table
        columnKey: Significance level, coerced to float (e.g. '0.05' or 0.05)
        rowKey: Degrees of freedom, a whole number (e.g. '3', 3 or 3.0)

    Returns:
        Critical value, or None if the row or column is not in the table

    Raises:
        TableLookupError: If the table cannot be read or a key is not numeric,
            or the degrees of freedom are not a whole number
    """
    try:
        column = float(columnKey)
        rowNumber = float(rowKey)
    except (TypeError, ValueError) as e:
        raise TableLookupError(
            f"Lookup keys must be numeric: column={columnKey!r}, row={rowKey!r}",
            details={'columnKey': columnKey, 'rowKey': rowKey}
        ) from e

    if not rowNumber.is_integer():
        raise TableLookupError(
            f"Degrees of freedom must be a whole number, got {rowKey!r}",
            details={'rowKey': rowKey}
        )
    row = int(rowNumber)

    table = loadCriticalValueTable(tablePath)
    value = table.get(row, {}).get(column)

    if value is None:
        logWithContext(logger, 'debug', 'No critical value', column=column, row=row)
    return value


def degreesOfFreedom(rows: int, columns: int) -> int:
    """
    Degrees of freedom for an observed contingency table.

    Args:
        rows: Number of rows in the table
        columns: Number of columns in the table

    Returns:
        (rows - 1) * (columns - 1)
    """
    if rows < 1 or columns < 1:
        raise DomainError(f"Table dimensions must be positive: {rows}x{columns}")
    return (rows - 1) * (columns - 1)
