"""
NBA Win% domain objects.

User input, the embedded dataset and model-ready arrays all flow through
these types. Every module in the project depends on this file; this file
depends on nothing else.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

import numpy as np


FEATURE_NAMES = (
    "wins",
    "losses",
    "points_per_game",
    "rebounds_per_game",
    "assists_per_game",
)
FEATURE_DIM = len(FEATURE_NAMES)

# Sweep key → TeamStats field
SWEEP_FIELDS = {
    "points": "points_per_game",
    "rebounds": "rebounds_per_game",
    "assists": "assists_per_game",
}

_CAMEL_KEYS = {
    "wins": "wins",
    "losses": "losses",
    "pointsPerGame": "points_per_game",
    "reboundsPerGame": "rebounds_per_game",
    "assistsPerGame": "assists_per_game",
}


# ── Errors ─────────────────────────────────────────────────────────────

class WinPctError(Exception):
    """Base class for estimator errors."""


class ModelNotReadyError(WinPctError, RuntimeError):
    def __init__(self, message: str = "Model is not ready yet. Please try again in a moment."):
        super().__init__(message)


class NoGamesPlayedError(WinPctError, ValueError):
    def __init__(self, message: str = "Please enter at least one win or loss."):
        super().__init__(message)


# ── Domain Objects ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class TeamStats:
    """Season stats for one team, as entered by a user.

    Values are not range-checked: negative or absurd numbers pass through
    to the model unchanged.
    """
    wins: int = 0
    losses: int = 0
    points_per_game: float = 0.0
    rebounds_per_game: float = 0.0
    assists_per_game: float = 0.0

    @property
    def total_games(self) -> int:
        return self.wins + self.losses

    def as_vector(self) -> np.ndarray:
        """Raw feature vector in FEATURE_NAMES order."""
        return np.array([getattr(self, name) for name in FEATURE_NAMES], dtype=np.float32)

    def with_offset(self, field_name: str, delta: float) -> "TeamStats":
        """Copy with one field shifted by delta, floored at 0."""
        if field_name not in FEATURE_NAMES:
            raise ValueError(f"Unknown stat field '{field_name}'")
        return replace(self, **{field_name: max(0, getattr(self, field_name) + delta)})

    @classmethod
    def from_dict(cls, data: dict) -> "TeamStats":
        """Build from a dict with snake_case or camelCase keys.

        Missing keys default to 0. Fractional wins and losses are truncated
        toward zero (50.7 → 50). Values that cannot be read as finite
        numbers (text, lists, NaN, infinity) raise ValueError.
        """
        values = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in FEATURE_NAMES and value is not None and value != "":
                try:
                    values[name] = float(value)
                except TypeError:
                    raise ValueError(f"{key} must be a number, got {value!r}") from None
                if not math.isfinite(values[name]):
                    raise ValueError(f"{key} must be a finite number, got {value!r}")
        for name in ("wins", "losses"):
            if name in values:
                values[name] = int(values[name])
        return cls(**values)

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in FEATURE_NAMES}


@dataclass(frozen=True)
class DatasetRow:
    """One team-season from the embedded training set."""
    wins: int
    losses: int
    points_per_game: float
    rebounds_per_game: float
    assists_per_game: float
    win_pct: float

    def __post_init__(self):
        if not 0.0 <= self.win_pct <= 1.0:
            raise ValueError(f"win_pct must be in [0, 1], got {self.win_pct}")
        if self.wins < 0 or self.losses < 0:
            raise ValueError(f"wins/losses must be >= 0, got {self.wins}/{self.losses}")

    @property
    def stats(self) -> TeamStats:
        return TeamStats(
            wins=self.wins,
            losses=self.losses,
            points_per_game=self.points_per_game,
            rebounds_per_game=self.rebounds_per_game,
            assists_per_game=self.assists_per_game,
        )


# ── Data Transfer Objects ──────────────────────────────────────────────

@dataclass
class TrainingBundle:
    """Standardized container for model-ready data.

    This is the contract between data/features and models/.
    """
    features: np.ndarray    # (N, FEATURE_DIM)
    labels: np.ndarray      # (N,) — win percentage in [0, 1]

    def __post_init__(self):
        if self.features.ndim != 2 or self.features.shape[1] != FEATURE_DIM:
            raise ValueError(
                f"features must have shape (N, {FEATURE_DIM}), got {self.features.shape}"
            )
        if self.features.shape[0] != len(self.labels):
            raise ValueError(
                f"features has {self.features.shape[0]} rows, "
                f"expected {len(self.labels)}"
            )

    @property
    def n_samples(self) -> int:
        return len(self.labels)

    def subset(self, index: np.ndarray) -> "TrainingBundle":
        """Return a new TrainingBundle filtered by boolean mask or index array."""
        return TrainingBundle(features=self.features[index], labels=self.labels[index])


@dataclass
class SensitivitySweep:
    """Predicted win% as each per-game stat is nudged around its entered value."""
    offsets: list[int]
    series: dict[str, list[int]] = field(default_factory=dict)

    def __post_init__(self):
        for name, values in self.series.items():
            if len(values) != len(self.offsets):
                raise ValueError(
                    f"series '{name}' has {len(values)} points, expected {len(self.offsets)}"
                )

    def to_chart_data(self) -> dict:
        """Line-chart payload: string labels plus one dataset per stat."""
        datasets = []
        for name, values in self.series.items():
            border, background = CHART_COLORS.get(name, ("#6b7280", "rgba(107, 114, 128, 0.5)"))
            datasets.append({
                "label": name.capitalize(),
                "data": list(values),
                "borderColor": border,
                "backgroundColor": background,
            })
        return {"labels": [str(o) for o in self.offsets], "datasets": datasets}


CHART_COLORS = {
    "points": ("#3b82f6", "rgba(59, 130, 246, 0.5)"),
    "rebounds": ("#10b981", "rgba(16, 185, 129, 0.5)"),
    "assists": ("#f59e0b", "rgba(245, 158, 11, 0.5)"),
}
