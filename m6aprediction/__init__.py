"""
m6aprediction: m6A RNA Modification Site Prediction

This package provides tools for:
- Per-position categorical encoding of DNA 5-mers
- Validation of m6A feature tables against a fixed schema
- Batch and single-site prediction with a pre-trained classifier
- Reading feature tables and writing prediction tables

Built on top of pandas for tabular data, with any scikit-learn style
classifier (``predict_proba`` + ``classes_``) as the model.
"""

__version__ = "0.1.0"
__author__ = "m6aprediction Contributors"

from m6aprediction.sequence import (
    dna_encoding,
    DNA_LEVELS,
    SequenceLengthError,
)

from m6aprediction.features import (
    FeatureRecord,
    MissingFeatureError,
    REQUIRED_FEATURES,
    RNA_TYPE_LEVELS,
    RNA_REGION_LEVELS,
)

from m6aprediction.models import (
    Classifier,
    load_model,
    positive_class_probability,
)

from m6aprediction.predict import (
    prediction_multiple,
    prediction_single,
    SinglePrediction,
)

from m6aprediction.io import (
    read_feature_table,
    write_predictions,
    example_data_path,
)

from m6aprediction.config import PredictionConfig

__all__ = [
    # Sequence encoding
    "dna_encoding",
    "DNA_LEVELS",
    "SequenceLengthError",
    # Feature schema
    "FeatureRecord",
    "MissingFeatureError",
    "REQUIRED_FEATURES",
    "RNA_TYPE_LEVELS",
    "RNA_REGION_LEVELS",
    # Classifier
    "Classifier",
    "load_model",
    "positive_class_probability",
    # Prediction
    "prediction_multiple",
    "prediction_single",
    "SinglePrediction",
    # I/O
    "read_feature_table",
    "write_predictions",
    "example_data_path",
    # Configuration
    "PredictionConfig",
]
