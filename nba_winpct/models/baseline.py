"""
Linear regression reference model.

Fits ordinary least squares on the same normalized stats the dense network
sees. Used only to put the network's held-out error in context.
"""

import logging
from pathlib import Path

import numpy as np
from sklearn.linear_model import LinearRegression

from nba_winpct.core.interfaces import BaseModel
from nba_winpct.core.schema import TrainingBundle
from nba_winpct.models.registry import register

log = logging.getLogger(__name__)


@register("linear_baseline")
class LinearBaseline(BaseModel):
    """Least-squares baseline on normalized team stats."""

    def __init__(self):
        self.model: LinearRegression | None = None

    def fit(self, train: TrainingBundle, val: TrainingBundle) -> dict:
        self.model = LinearRegression()
        self.model.fit(train.features, train.labels)
        log.info(f"Linear baseline trained on {train.n_samples} samples")
        return {"coef": self.model.coef_.tolist(), "intercept": float(self.model.intercept_)}

    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        """Predict win% for each row, clipped to [0, 1]."""
        if self.model is None:
            raise RuntimeError("Model not fitted")
        return np.clip(self.model.predict(np.asarray(X, dtype=np.float32)), 0.0, 1.0)

    def save(self, path: str, **extra):
        import joblib
        if self.model is None:
            raise RuntimeError("Model not fitted")
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        joblib.dump({"model": self.model, **extra}, path)
        log.info(f"Linear baseline saved to {path}")

    def load(self, path: str) -> dict:
        """Restore the regressor. Returns the full saved dict (including extras)."""
        import joblib
        data = joblib.load(path)
        self.model = data["model"]
        return data
