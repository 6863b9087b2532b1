"""
Training pipeline runner.

Wires config → estimator → training → baseline comparison → saved weights.
"""

import logging
from pathlib import Path

from nba_winpct.evaluation.metrics import compare_models
from nba_winpct.models.registry import create_model
from nba_winpct.orchestration.config import build_estimator, load_config

log = logging.getLogger(__name__)


def run_training(
    config_path: str = "configs/default.yaml",
    save_path: str | None = None,
    cfg: dict | None = None,
) -> dict:
    """Train the estimator, compare it with the linear baseline, optionally save.

    Returns dict with the trained estimator, its history, the held-out
    comparison and the saved model path (or None).
    """
    cfg = cfg or load_config(config_path)

    # ── 1. Train ──
    estimator = build_estimator(cfg)
    log.info(f"Step 1: Training {estimator.model_name} model")
    history = estimator.train()

    # ── 2. Baseline on the same split ──
    log.info("Step 2: Training linear baseline")
    baseline = create_model("linear_baseline")
    train_data, val_data = estimator.train_data, estimator.val_data
    baseline.fit(train_data, val_data)

    # ── 3. Compare on held-out rows ──
    log.info("Step 3: Held-out comparison")
    comparison = compare_models(
        val_data.labels,
        estimator.model.predict_proba(val_data.features),
        baseline.predict_proba(val_data.features),
    )

    # ── 4. Save ──
    if save_path is None and cfg.get("paths", {}).get("models"):
        suffix = ".pt" if estimator.model_name == "dense" else ".joblib"
        save_path = str(Path(cfg["paths"]["models"]) / f"{estimator.model_name}{suffix}")
    if save_path:
        estimator.save(save_path)

    return {
        "estimator": estimator,
        "history": history,
        "comparison": comparison,
        "model_path": save_path,
    }
