"""
Abstract base classes defining contracts between modules.

Models consume TrainingBundles of already-normalized features.
"""

from abc import ABC, abstractmethod

import numpy as np

from nba_winpct.core.schema import TrainingBundle


class BaseModel(ABC):
    """Contract: normalized feature arrays → win-percentage predictions."""

    @abstractmethod
    def fit(self, train: TrainingBundle, val: TrainingBundle) -> dict:
        """Train on data. Return training history dict."""
        ...

    @abstractmethod
    def predict_proba(self, X: np.ndarray) -> np.ndarray:
        """Return predicted win% in [0, 1] for each row. Shape: (N,)."""
        ...

    @abstractmethod
    def save(self, path: str, **extra) -> None:
        """Persist the fitted model; extra keys are stored alongside it."""
        ...

    @abstractmethod
    def load(self, path: str) -> dict:
        """Restore the model. Returns everything that was saved."""
        ...
