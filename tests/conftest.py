import pytest
import numpy as np
import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.ensemble import RandomForestClassifier
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import OneHotEncoder

from m6aprediction.features.schema import (
    NUMERIC_FEATURES,
    RNA_REGION_LEVELS,
    RNA_TYPE_LEVELS,
)
from m6aprediction.io.table import example_data_path, read_feature_table
from m6aprediction.predict.batch import encode_features
from m6aprediction.sequence.encoding import DNA_LEVELS, position_columns


class GCStubClassifier:
    """Returns gc_content as the Positive probability and records its calls."""

    classes_ = np.array(["Negative", "Positive"])

    def __init__(self):
        self.calls = []

    def predict_proba(self, X):
        self.calls.append(X.copy())
        pos = X["gc_content"].to_numpy(dtype=float)
        return np.column_stack([1.0 - pos, pos])


class FailingClassifier:
    """Raises the way a model trained on a different schema would."""

    classes_ = np.array(["Negative", "Positive"])

    def predict_proba(self, X):
        raise ValueError("columns are missing: {'nt_pos6'}")


def make_feature_df(n_rows, seed=0):
    rng = np.random.default_rng(seed)
    kmers = ["".join(rng.choice(DNA_LEVELS, size=5)) for _ in range(n_rows)]
    return pd.DataFrame({
        "gc_content": rng.uniform(0.2, 0.8, n_rows).round(3),
        "RNA_type": rng.choice(RNA_TYPE_LEVELS, n_rows),
        "RNA_region": rng.choice(RNA_REGION_LEVELS, n_rows),
        "exon_length": rng.uniform(5, 15, n_rows).round(2),
        "distance_to_junction": rng.uniform(1, 15, n_rows).round(2),
        "evolutionary_conservation": rng.uniform(0, 1, n_rows).round(3),
        "DNA_5mer": kmers,
    })


@pytest.fixture
def example_df():
    """The example feature table bundled with the package."""
    return read_feature_table(example_data_path())


@pytest.fixture
def feature_df():
    """Synthetic feature table with 25 rows."""
    return make_feature_df(25, seed=1)


@pytest.fixture
def stub_classifier():
    return GCStubClassifier()


@pytest.fixture
def failing_classifier():
    return FailingClassifier()


@pytest.fixture(scope="session")
def fitted_pipeline():
    """Random forest behind a one-hot encoder, trained on synthetic sites."""
    train_df = make_feature_df(300, seed=42)
    labels = np.where(
        (train_df["DNA_5mer"].str[1:4] == "GAC") | (train_df["evolutionary_conservation"] > 0.6),
        "Positive",
        "Negative",
    )

    nt_cols = position_columns(5)
    preprocess = ColumnTransformer([
        ("num", "passthrough", NUMERIC_FEATURES),
        (
            "cat",
            OneHotEncoder(
                categories=[RNA_TYPE_LEVELS, RNA_REGION_LEVELS] + [DNA_LEVELS] * len(nt_cols),
                handle_unknown="ignore",
            ),
            ["RNA_type", "RNA_region"] + nt_cols,
        ),
    ])
    model = Pipeline([
        ("preprocess", preprocess),
        ("rf", RandomForestClassifier(n_estimators=25, random_state=0)),
    ])
    model.fit(encode_features(train_df), labels)
    return model
