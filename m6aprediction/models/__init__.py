"""
Classifier interface: Positive-class probabilities and model loading.
"""

from m6aprediction.models.classifier import (
    Classifier,
    load_model,
    positive_class_probability,
    POSITIVE_CLASS,
    NEGATIVE_CLASS,
)

__all__ = [
    "Classifier",
    "load_model",
    "positive_class_probability",
    "POSITIVE_CLASS",
    "NEGATIVE_CLASS",
]
