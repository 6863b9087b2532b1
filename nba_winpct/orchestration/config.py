"""Config loading with validation."""

import yaml
from pathlib import Path

from nba_winpct.estimator import WinPctEstimator


def load_config(path: str = "configs/default.yaml") -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(p) as f:
        cfg = yaml.safe_load(f) or {}

    # Validate required keys
    for key in ("model", "training", "normalization"):
        if key not in cfg:
            raise ValueError(f"Missing config key: {key}")
    return cfg


def build_estimator(cfg: dict) -> WinPctEstimator:
    """Construct an untrained estimator from a loaded config."""
    model_cfg = cfg["model"]
    train_cfg = cfg["training"]
    return WinPctEstimator(
        model_name=model_cfg.get("name", "dense"),
        hidden_sizes=model_cfg.get("hidden_sizes", [16, 8]),
        epochs=train_cfg.get("epochs", 200),
        lr=train_cfg.get("learning_rate", 0.001),
        batch_size=train_cfg.get("batch_size", 32),
        val_fraction=train_cfg.get("val_fraction", 0.2),
        random_seed=train_cfg.get("random_seed"),
        maxima=cfg["normalization"]["maxima"],
        sweep_range=cfg.get("sweep", {}).get("offset_range", 5),
    )
