"""Fixed-maxima feature scaling shared by training and inference."""

import numpy as np

from nba_winpct.core.schema import FEATURE_DIM, FEATURE_NAMES, TeamStats

# wins, losses (82-game season), points, rebounds, assists per game
DEFAULT_MAXIMA = (82.0, 82.0, 120.0, 50.0, 30.0)


class Normalizer:
    """Divides each raw stat by an assumed per-feature maximum.

    One instance must serve both training and prediction; the maxima are
    stored alongside saved weights and checked on load.
    """

    def __init__(self, maxima=DEFAULT_MAXIMA):
        maxima = np.asarray(maxima, dtype=np.float32)
        if maxima.shape != (FEATURE_DIM,):
            raise ValueError(f"Expected {FEATURE_DIM} maxima, got shape {maxima.shape}")
        if (maxima <= 0).any():
            raise ValueError(f"Maxima must be positive, got {maxima.tolist()}")
        self.maxima = maxima

    def normalize(self, X: np.ndarray) -> np.ndarray:
        """Scale raw features (N, 5) or (5,) into model space."""
        return (np.asarray(X, dtype=np.float32) / self.maxima).astype(np.float32)

    def denormalize(self, X: np.ndarray) -> np.ndarray:
        return (np.asarray(X, dtype=np.float32) * self.maxima).astype(np.float32)

    def transform_stats(self, stats: TeamStats) -> np.ndarray:
        """Single TeamStats → (1, 5) normalized row."""
        return self.normalize(stats.as_vector()).reshape(1, -1)

    def as_dict(self) -> dict:
        return dict(zip(FEATURE_NAMES, self.maxima.tolist()))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Normalizer):
            return NotImplemented
        return bool(np.array_equal(self.maxima, other.maxima))

    def __repr__(self) -> str:
        return f"Normalizer(maxima={self.maxima.tolist()})"
