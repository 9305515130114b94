"""
Batch and single-site m6A prediction.
"""

from m6aprediction.predict.batch import (
    prediction_multiple,
    encode_features,
    call_status,
    check_threshold,
    PROB_COLUMN,
    STATUS_COLUMN,
)

from m6aprediction.predict.single import (
    prediction_single,
    SinglePrediction,
)

__all__ = [
    "prediction_multiple",
    "prediction_single",
    "SinglePrediction",
    "encode_features",
    "call_status",
    "check_threshold",
    "PROB_COLUMN",
    "STATUS_COLUMN",
]
