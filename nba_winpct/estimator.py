"""
Win-percentage estimator.

Owns the embedded dataset, the model (the dense network unless configured
otherwise) and the normalizer, and moves through exactly two states:
UNTRAINED → READY. Training may run on a background thread; predictions
only look at the readiness flag and refuse until it is set.
"""

import logging
import threading
from enum import Enum

import numpy as np
from sklearn.model_selection import train_test_split

from nba_winpct.core.schema import (
    DatasetRow,
    ModelNotReadyError,
    NoGamesPlayedError,
    SWEEP_FIELDS,
    SensitivitySweep,
    TeamStats,
    TrainingBundle,
)
from nba_winpct.data.dataset import NBA_2021_22, load_dataset
from nba_winpct.evaluation.metrics import evaluate_predictions
from nba_winpct.features.normalize import DEFAULT_MAXIMA, Normalizer
from nba_winpct.core.interfaces import BaseModel
from nba_winpct.models.registry import create_model, list_models

log = logging.getLogger(__name__)


class EstimatorState(Enum):
    UNTRAINED = "untrained"
    READY = "ready"


def to_percentage(p: float) -> int:
    """Win fraction → integer percent, rounded half up and clamped to [0, 100]."""
    pct = int(np.floor(float(p) * 100.0 + 0.5))
    return max(0, min(100, pct))


class WinPctEstimator:

    def __init__(
        self,
        model_name: str = "dense",
        hidden_sizes: list[int] = None,
        epochs: int = 200,
        lr: float = 0.001,
        batch_size: int = 32,
        val_fraction: float = 0.2,
        random_seed: int | None = None,
        maxima=DEFAULT_MAXIMA,
        sweep_range: int = 5,
        rows: tuple[DatasetRow, ...] = NBA_2021_22,
    ):
        if model_name not in list_models():
            available = ", ".join(list_models())
            raise ValueError(f"Unknown model '{model_name}'. Available: {available}")
        self.model_name = model_name
        self.hidden_sizes = list(hidden_sizes or [16, 8])
        self.epochs = epochs
        self.lr = lr
        self.batch_size = batch_size
        self.val_fraction = val_fraction
        self.random_seed = random_seed
        self.normalizer = Normalizer(maxima)
        self.sweep_range = sweep_range
        self.rows = rows

        self.model: BaseModel | None = None
        self.history: dict | None = None
        self.train_data: TrainingBundle | None = None
        self.val_data: TrainingBundle | None = None
        self._ready = threading.Event()

    # ── State ──

    @property
    def state(self) -> EstimatorState:
        return EstimatorState.READY if self._ready.is_set() else EstimatorState.UNTRAINED

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    def wait_until_ready(self, timeout: float | None = None) -> bool:
        return self._ready.wait(timeout)

    # ── Training ──

    def split(self) -> tuple[TrainingBundle, TrainingBundle]:
        """Shuffle the dataset and split it into normalized train/val bundles."""
        raw = load_dataset(self.rows)
        bundle = TrainingBundle(
            features=self.normalizer.normalize(raw.features),
            labels=raw.labels,
        )
        train_idx, val_idx = train_test_split(
            np.arange(bundle.n_samples),
            test_size=self.val_fraction,
            shuffle=True,
            random_state=self.random_seed,
        )
        return bundle.subset(train_idx), bundle.subset(val_idx)

    def train(self) -> dict:
        """Fit a fresh model and replace the owned model. Returns loss history."""
        train_data, val_data = self.split()
        log.info(f"Training on {train_data.n_samples} rows, validating on {val_data.n_samples}")

        model = self._build_model()
        history = model.fit(train_data, val_data)

        self.model = model
        self.history = history
        self.train_data = train_data
        self.val_data = val_data
        self._ready.set()

        if history.get("train_loss"):
            log.info(
                f"Training finished after {len(history['train_loss'])} epochs: "
                f"loss={history['train_loss'][-1]:.5f} val_loss={history['val_loss'][-1]:.5f}"
            )
        else:
            log.info(f"Training finished ({self.model_name})")
        return history

    def _build_model(self) -> BaseModel:
        """Fresh, unfitted model from the registry."""
        if self.model_name == "dense":
            return create_model(
                "dense",
                hidden_sizes=self.hidden_sizes,
                lr=self.lr,
                epochs=self.epochs,
                batch_size=self.batch_size,
                seed=self.random_seed,
            )
        return create_model(self.model_name)

    def start_training(self) -> threading.Thread:
        """Run train() on a daemon thread and return it."""
        thread = threading.Thread(target=self._train_in_background, name="winpct-train", daemon=True)
        thread.start()
        return thread

    def _train_in_background(self):
        try:
            self.train()
        except Exception:
            # Estimator stays UNTRAINED; predictions keep reporting not-ready.
            log.exception("Background training failed")

    def evaluate(self) -> dict:
        """Metrics of the current model on the held-out split from the last train()."""
        self._require_ready()
        if self.val_data is None:
            raise RuntimeError("No held-out split available; model was loaded, not trained")
        metrics = evaluate_predictions(self.val_data.labels, self.model.predict_proba(self.val_data.features))
        log.info(f"Evaluation: mse={metrics['mse']:.5f} mae={metrics['mae']:.5f}")
        return metrics

    # ── Inference ──

    def predict(self, stats: TeamStats) -> int:
        """Predicted win percentage, an int in [0, 100]."""
        self._check_request(stats)
        p = self.model.predict_proba(self.normalizer.transform_stats(stats))[0]
        return to_percentage(p)

    def sweep(self, stats: TeamStats) -> SensitivitySweep:
        """Predict win% with each per-game stat shifted by -range..+range."""
        self._check_request(stats)
        offsets = list(range(-self.sweep_range, self.sweep_range + 1))
        series = {}
        for name, field_name in SWEEP_FIELDS.items():
            X = np.stack([stats.with_offset(field_name, o).as_vector() for o in offsets])
            preds = self.model.predict_proba(self.normalizer.normalize(X))
            series[name] = [to_percentage(p) for p in preds]
        return SensitivitySweep(offsets=offsets, series=series)

    def _require_ready(self):
        if not self._ready.is_set():
            raise ModelNotReadyError()

    def _check_request(self, stats: TeamStats):
        self._require_ready()
        if stats.total_games == 0:
            raise NoGamesPlayedError()

    # ── Persistence ──

    def save(self, path: str):
        self._require_ready()
        self.model.save(path, maxima=self.normalizer.maxima.tolist())

    def load(self, path: str):
        """Restore saved weights and mark the estimator READY."""
        model = self._build_model()
        checkpoint = model.load(path)
        saved = Normalizer(checkpoint.get("maxima", DEFAULT_MAXIMA))
        if saved != self.normalizer:
            raise ValueError(
                f"Saved model was trained with {saved!r}, estimator uses {self.normalizer!r}"
            )
        self.model = model
        if "config" in checkpoint:
            self.hidden_sizes = list(checkpoint["config"]["hidden_sizes"])
        self._ready.set()
        log.info(f"Loaded model from {path}")
