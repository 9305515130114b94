"""
Configuration for m6A prediction runs.

A YAML file with the same keys as ``PredictionConfig`` can be passed to the
command line tool, e.g.::

    model_path: models/rf_fit.joblib
    positive_threshold: 0.6
    log_level: DEBUG
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from m6aprediction.predict.batch import check_threshold


@dataclass
class PredictionConfig:
    """
    Settings shared by batch and single-site prediction.

    Attributes:
        model_path: Serialized classifier loaded with ``load_model``
        positive_threshold: Probability above which a site is called
            "Positive"
        log_level: Logging level name used by the command line tool
    """

    model_path: Optional[Path] = None
    positive_threshold: float = 0.5
    log_level: str = "INFO"

    def __post_init__(self):
        if self.model_path is not None:
            self.model_path = Path(self.model_path)

    def validate(self) -> "PredictionConfig":
        self.positive_threshold = check_threshold(self.positive_threshold)
        self.log_level = str(self.log_level).upper()
        return self

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "PredictionConfig":
        """Load settings from a YAML mapping; unknown keys are rejected."""
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{config_path} must contain a YAML mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration key(s) in {config_path}: {unknown}")

        return cls(**data).validate()
