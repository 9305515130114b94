"""
Input feature schema: required columns and fixed categorical domains.
"""

from m6aprediction.features.schema import (
    FeatureRecord,
    MissingFeatureError,
    records_to_frame,
    missing_features,
    validate_feature_frame,
    apply_categorical_levels,
    REQUIRED_FEATURES,
    NUMERIC_FEATURES,
    CATEGORICAL_LEVELS,
    RNA_TYPE_LEVELS,
    RNA_REGION_LEVELS,
)

__all__ = [
    "FeatureRecord",
    "MissingFeatureError",
    "records_to_frame",
    "missing_features",
    "validate_feature_frame",
    "apply_categorical_levels",
    "REQUIRED_FEATURES",
    "NUMERIC_FEATURES",
    "CATEGORICAL_LEVELS",
    "RNA_TYPE_LEVELS",
    "RNA_REGION_LEVELS",
]
