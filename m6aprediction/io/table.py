"""
Reading feature tables and writing prediction tables.
"""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from m6aprediction.features.schema import CATEGORICAL_LEVELS

logger = logging.getLogger(__name__)

EXAMPLE_DATA = Path(__file__).resolve().parent.parent / "data" / "m6A_input_example.csv"

# Read as text so values like "T" or "NA" are never coerced
_STRING_COLUMNS = {col: str for col in [*CATEGORICAL_LEVELS, "DNA_5mer"]}


def example_data_path() -> Path:
    """Path to the example feature table shipped with the package."""
    return EXAMPLE_DATA


def read_feature_table(filepath: Union[str, Path]) -> pd.DataFrame:
    """
    Read a feature table from CSV.

    Supports both plain text and gzip-compressed files.

    Args:
        filepath: Path to a .csv or .csv.gz file

    Returns:
        DataFrame with one row per candidate site

    Example:
        >>> df = read_feature_table(example_data_path())
        >>> df.columns[:3].tolist()
        ['gc_content', 'RNA_type', 'RNA_region']
    """
    filepath = Path(filepath)
    feature_df = pd.read_csv(
        filepath,
        dtype=_STRING_COLUMNS,
        keep_default_na=False,
        na_values=[""],
    )
    logger.info(f"Read {len(feature_df)} rows from {filepath}")
    return feature_df


def write_predictions(
    predictions: pd.DataFrame,
    filepath: Union[str, Path],
    compress: bool = False
) -> Path:
    """
    Write a prediction table to CSV.

    Args:
        predictions: Output of ``prediction_multiple``
        filepath: Output file path
        compress: If True, write gzip-compressed file

    Returns:
        The path actually written (".gz" is appended when compressing)
    """
    filepath = Path(filepath)
    if compress and not filepath.suffix == ".gz":
        filepath = Path(str(filepath) + ".gz")

    filepath.parent.mkdir(parents=True, exist_ok=True)
    predictions.to_csv(filepath, index=False, compression="infer")
    logger.info(f"Wrote {len(predictions)} predictions to {filepath}")
    return filepath
