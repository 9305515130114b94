"""
Minimal interface to the pre-trained m6A classifier.

Any object following the scikit-learn convention (``predict_proba`` plus a
``classes_`` attribute) can be used: a fitted ``RandomForestClassifier``, a
``Pipeline`` that one-hot encodes the categorical columns first, or a
custom wrapper.
"""

import logging
from pathlib import Path
from typing import Any, Protocol, Sequence, Union, runtime_checkable

import joblib
import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

POSITIVE_CLASS = "Positive"
NEGATIVE_CLASS = "Negative"


@runtime_checkable
class Classifier(Protocol):
    """Anything that returns per-class probabilities for a feature table."""

    def predict_proba(self, X: pd.DataFrame) -> Any:
        ...


def positive_class_probability(
    ml_fit: Classifier,
    X: pd.DataFrame,
    positive_class: str = POSITIVE_CLASS
) -> np.ndarray:
    """
    Probability of the positive class for every row of ``X``.

    Args:
        ml_fit: Fitted classifier exposing ``predict_proba``
        X: Encoded feature table
        positive_class: Label of the class whose probability is returned

    Returns:
        numpy array of shape (len(X),)

    Raises:
        ValueError: If the classifier has no ``positive_class`` output
    """
    probs = ml_fit.predict_proba(X)

    if isinstance(probs, pd.DataFrame):
        if positive_class not in probs.columns:
            raise ValueError(
                f"Classifier output has no '{positive_class}' column; "
                f"got {list(probs.columns)}"
            )
        return probs[positive_class].to_numpy(dtype=float)

    classes: Sequence = list(getattr(ml_fit, "classes_", []))
    if positive_class not in classes:
        raise ValueError(
            f"Classifier classes {classes} do not include '{positive_class}'"
        )

    probs = np.asarray(probs, dtype=float)
    if probs.ndim != 2 or probs.shape[1] != len(classes):
        raise ValueError(
            f"predict_proba returned shape {probs.shape}, "
            f"expected ({len(X)}, {len(classes)})"
        )
    return probs[:, classes.index(positive_class)]


def load_model(model_path: Union[str, Path]) -> Classifier:
    """
    Load a serialized classifier.

    Args:
        model_path: Path to a joblib/pickle file holding the fitted model

    Returns:
        The deserialized classifier

    Raises:
        FileNotFoundError: If ``model_path`` does not exist
        TypeError: If the loaded object has no ``predict_proba``
    """
    model_path = Path(model_path)
    if not model_path.exists():
        raise FileNotFoundError(f"Model file not found: {model_path}")

    ml_fit = joblib.load(model_path)
    if not isinstance(ml_fit, Classifier):
        raise TypeError(
            f"{model_path} holds a {type(ml_fit).__name__}, "
            "which does not implement predict_proba"
        )

    logger.info(f"Loaded {type(ml_fit).__name__} from {model_path}")
    return ml_fit
