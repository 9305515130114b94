"""
Input feature schema for m6A prediction.

Defines the required feature columns, the fixed categorical domains the
classifier was trained with, and the ``FeatureRecord`` container for
single-sample input.
"""

from dataclasses import asdict, dataclass, fields
from typing import Iterable, List, Sequence

import pandas as pd

from m6aprediction.sequence.encoding import as_categorical

RNA_TYPE_LEVELS = ["mRNA", "lincRNA", "lncRNA", "pseudogene"]
RNA_REGION_LEVELS = ["CDS", "intron", "3'UTR", "5'UTR"]

CATEGORICAL_LEVELS = {
    "RNA_type": RNA_TYPE_LEVELS,
    "RNA_region": RNA_REGION_LEVELS,
}

NUMERIC_FEATURES = [
    "gc_content",
    "exon_length",
    "distance_to_junction",
    "evolutionary_conservation",
]

REQUIRED_FEATURES = [
    "gc_content",
    "RNA_type",
    "RNA_region",
    "exon_length",
    "distance_to_junction",
    "evolutionary_conservation",
    "DNA_5mer",
]


class MissingFeatureError(ValueError):
    """Raised when a feature table lacks one or more required columns."""

    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(
            f"Feature table is missing required column(s): {', '.join(self.missing)}"
        )


@dataclass
class FeatureRecord:
    """
    Feature values for a single candidate m6A site.

    Attributes:
        gc_content: GC content of the surrounding region
        RNA_type: One of ``RNA_TYPE_LEVELS``
        RNA_region: One of ``RNA_REGION_LEVELS``
        exon_length: Length of the containing exon
        distance_to_junction: Distance to the nearest splice junction
        evolutionary_conservation: Conservation score
        DNA_5mer: Five-nucleotide context centred on the site (e.g. "GGACA")
    """
    gc_content: float
    RNA_type: str
    RNA_region: str
    exon_length: float
    distance_to_junction: float
    evolutionary_conservation: float
    DNA_5mer: str

    def __post_init__(self):
        for name in NUMERIC_FEATURES:
            setattr(self, name, float(getattr(self, name)))
        for name in ("RNA_type", "RNA_region", "DNA_5mer"):
            setattr(self, name, str(getattr(self, name)))

    def to_frame(self) -> pd.DataFrame:
        """One-row DataFrame with columns in ``REQUIRED_FEATURES`` order."""
        return records_to_frame([self])


def records_to_frame(records: Iterable[FeatureRecord]) -> pd.DataFrame:
    """Stack feature records into a DataFrame, one row per record."""
    return pd.DataFrame(
        [asdict(r) for r in records],
        columns=[f.name for f in fields(FeatureRecord)],
    )


def missing_features(
    feature_df: pd.DataFrame,
    required: Sequence[str] = REQUIRED_FEATURES
) -> List[str]:
    """Required columns absent from ``feature_df``, in schema order."""
    return [col for col in required if col not in feature_df.columns]


def validate_feature_frame(
    feature_df: pd.DataFrame,
    required: Sequence[str] = REQUIRED_FEATURES
) -> None:
    """
    Check that a feature table carries every required column.

    Raises:
        TypeError: If ``feature_df`` is not a DataFrame
        MissingFeatureError: If any required column is absent
    """
    if not isinstance(feature_df, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(feature_df).__name__}"
        )
    missing = missing_features(feature_df, required)
    if missing:
        raise MissingFeatureError(missing)


def apply_categorical_levels(feature_df: pd.DataFrame) -> pd.DataFrame:
    """
    Restrict categorical features to their fixed domains.

    Values outside ``RNA_TYPE_LEVELS`` / ``RNA_REGION_LEVELS`` become NaN.
    Returns a new DataFrame; the input is left untouched.
    """
    encoded = feature_df.copy()
    for col, levels in CATEGORICAL_LEVELS.items():
        encoded[col] = as_categorical(encoded[col].to_numpy(), levels)
    return encoded
