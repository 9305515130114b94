"""
Batch m6A prediction over a feature table.
"""

import logging
from numbers import Real

import numpy as np
import pandas as pd

from m6aprediction.features.schema import (
    apply_categorical_levels,
    validate_feature_frame,
)
from m6aprediction.models.classifier import (
    NEGATIVE_CLASS,
    POSITIVE_CLASS,
    Classifier,
    positive_class_probability,
)
from m6aprediction.sequence.encoding import dna_encoding

logger = logging.getLogger(__name__)

PROB_COLUMN = "predicted_m6A_prob"
STATUS_COLUMN = "predicted_m6A_status"


def check_threshold(positive_threshold: float) -> float:
    """Validate a probability threshold and return it as a float."""
    if isinstance(positive_threshold, bool) or not isinstance(positive_threshold, Real):
        raise ValueError(
            f"positive_threshold must be a number, got {positive_threshold!r}"
        )
    if not 0.0 <= positive_threshold <= 1.0:
        raise ValueError(
            f"positive_threshold must lie in [0, 1], got {positive_threshold}"
        )
    return float(positive_threshold)


def call_status(probs: np.ndarray, positive_threshold: float = 0.5) -> np.ndarray:
    """
    Binary call for each probability.

    A site is "Positive" only when its probability is strictly greater than
    ``positive_threshold``.
    """
    probs = np.asarray(probs, dtype=float)
    return np.where(probs > positive_threshold, POSITIVE_CLASS, NEGATIVE_CLASS)


def encode_features(feature_df: pd.DataFrame) -> pd.DataFrame:
    """
    Build the classifier input from a validated feature table.

    RNA_type and RNA_region are restricted to their fixed domains and the
    DNA_5mer column is expanded into ``nt_pos1..N`` categorical columns.
    Position columns already present in ``feature_df`` are replaced.
    """
    encoded = apply_categorical_levels(feature_df)
    seq_df = dna_encoding(encoded["DNA_5mer"].tolist(), index=encoded.index)

    stale = [col for col in encoded.columns if col in seq_df.columns]
    if stale:
        logger.debug(f"Replacing existing position columns {stale}")
        encoded = encoded.drop(columns=stale)
    return pd.concat([encoded, seq_df], axis=1)


def prediction_multiple(
    ml_fit: Classifier,
    feature_df: pd.DataFrame,
    positive_threshold: float = 0.5
) -> pd.DataFrame:
    """
    Predict m6A probability and status for every row of a feature table.

    Args:
        ml_fit: Pre-trained classifier exposing ``predict_proba`` with a
            "Positive" class
        feature_df: Table holding at least the columns in
            ``REQUIRED_FEATURES``
        positive_threshold: Probability above which a site is called
            "Positive"

    Returns:
        Copy of ``feature_df`` with ``predicted_m6A_prob`` and
        ``predicted_m6A_status`` appended

    Raises:
        MissingFeatureError: If a required column is absent
        ValueError: If ``positive_threshold`` is outside [0, 1]

    Example:
        >>> ml_fit = load_model("rf_fit.joblib")
        >>> predictions = prediction_multiple(ml_fit, read_feature_table(example_data_path()))
        >>> predictions[["predicted_m6A_prob", "predicted_m6A_status"]].head()
    """
    validate_feature_frame(feature_df)
    positive_threshold = check_threshold(positive_threshold)

    original_df = feature_df.copy()

    if len(feature_df) == 0:
        logger.warning("Empty feature table; skipping classifier call")
        original_df[PROB_COLUMN] = pd.Series(dtype=float, index=original_df.index)
        original_df[STATUS_COLUMN] = pd.Series(dtype=object, index=original_df.index)
        return original_df

    feature_df_encoded = encode_features(feature_df)
    pred_probs = positive_class_probability(ml_fit, feature_df_encoded)

    original_df[PROB_COLUMN] = pred_probs
    original_df[STATUS_COLUMN] = call_status(pred_probs, positive_threshold)

    n_positive = int((original_df[STATUS_COLUMN] == POSITIVE_CLASS).sum())
    logger.info(
        f"Predicted {n_positive}/{len(original_df)} sites as {POSITIVE_CLASS} "
        f"(threshold={positive_threshold})"
    )
    return original_df
