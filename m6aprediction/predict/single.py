"""
Single-site m6A prediction.
"""

from typing import NamedTuple

from m6aprediction.features.schema import FeatureRecord
from m6aprediction.models.classifier import Classifier
from m6aprediction.predict.batch import (
    PROB_COLUMN,
    STATUS_COLUMN,
    prediction_multiple,
)


class SinglePrediction(NamedTuple):
    predicted_m6A_prob: float
    predicted_m6A_status: str


def prediction_single(
    ml_fit: Classifier,
    gc_content: float,
    RNA_type: str,
    RNA_region: str,
    exon_length: float,
    distance_to_junction: float,
    evolutionary_conservation: float,
    DNA_5mer: str,
    positive_threshold: float = 0.5
) -> SinglePrediction:
    """
    Predict m6A probability and status for one set of feature values.

    Wraps the values into a one-row table and delegates to
    ``prediction_multiple``.

    Returns:
        SinglePrediction(predicted_m6A_prob, predicted_m6A_status)

    Example:
        >>> prediction_single(
        ...     ml_fit, gc_content=0.5, RNA_type="mRNA", RNA_region="CDS",
        ...     exon_length=10, distance_to_junction=8,
        ...     evolutionary_conservation=0.5, DNA_5mer="GGACA",
        ... )
        SinglePrediction(predicted_m6A_prob=0.71, predicted_m6A_status='Positive')
    """
    record = FeatureRecord(
        gc_content=gc_content,
        RNA_type=RNA_type,
        RNA_region=RNA_region,
        exon_length=exon_length,
        distance_to_junction=distance_to_junction,
        evolutionary_conservation=evolutionary_conservation,
        DNA_5mer=DNA_5mer,
    )
    result_df = prediction_multiple(ml_fit, record.to_frame(), positive_threshold)

    first = result_df.iloc[0]
    return SinglePrediction(
        predicted_m6A_prob=float(first[PROB_COLUMN]),
        predicted_m6A_status=str(first[STATUS_COLUMN]),
    )
