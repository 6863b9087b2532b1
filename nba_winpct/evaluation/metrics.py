"""
Regression metrics for held-out win-percentage predictions.

All inputs are win fractions in [0, 1].
"""

import logging

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

log = logging.getLogger(__name__)


def compute_mse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Mean squared error — the training objective."""
    return float(mean_squared_error(y_true, y_pred))


def compute_mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    return float(mean_absolute_error(y_true, y_pred))


def compute_r2(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """R² score; NaN when fewer than two samples make it undefined."""
    if len(y_true) < 2:
        return float("nan")
    return float(r2_score(y_true, y_pred))


def evaluate_predictions(y_true: np.ndarray, y_pred: np.ndarray) -> dict:
    """Compute all metrics for one model.

    Returns:
        dict with mse, mae, r2, n_samples
    """
    y_true = np.asarray(y_true, dtype=np.float64)
    y_pred = np.asarray(y_pred, dtype=np.float64)
    if y_true.shape != y_pred.shape:
        raise ValueError(f"Shape mismatch: y_true {y_true.shape} vs y_pred {y_pred.shape}")
    if len(y_true) == 0:
        raise ValueError("Cannot evaluate on an empty split")
    return {
        "mse": compute_mse(y_true, y_pred),
        "mae": compute_mae(y_true, y_pred),
        "r2": compute_r2(y_true, y_pred),
        "n_samples": int(len(y_true)),
    }


def compare_models(y_true: np.ndarray, model_preds: np.ndarray, baseline_preds: np.ndarray) -> dict:
    """Metrics for both models plus the dense model's MSE improvement (positive = better)."""
    model = evaluate_predictions(y_true, model_preds)
    baseline = evaluate_predictions(y_true, baseline_preds)
    result = {
        "model": model,
        "baseline": baseline,
        "mse_improvement": baseline["mse"] - model["mse"],
    }
    log.info(
        f"Held-out MSE: model={model['mse']:.5f} baseline={baseline['mse']:.5f} "
        f"(improvement {result['mse_improvement']:+.5f})"
    )
    return result
