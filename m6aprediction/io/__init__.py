"""
Feature and prediction table I/O.

This module provides functions for reading feature tables and writing
prediction tables as CSV (plain or gzip-compressed).
"""

from m6aprediction.io.table import (
    read_feature_table,
    write_predictions,
    example_data_path,
)

__all__ = [
    "read_feature_table",
    "write_predictions",
    "example_data_path",
]
