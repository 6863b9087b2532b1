"""Integration test: config → training pipeline → saved model → reload."""

from pathlib import Path

import pytest
import yaml

from nba_winpct.core.schema import TeamStats
from nba_winpct.estimator import WinPctEstimator
from nba_winpct.orchestration.config import build_estimator, load_config
from nba_winpct.orchestration.pipeline import run_training

DEFAULT_CONFIG = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"


def _write_config(tmp_path, **overrides):
    cfg = {
        "model": {"name": "dense", "hidden_sizes": [16, 8]},
        "training": {"epochs": 20, "learning_rate": 0.001, "batch_size": 32,
                     "val_fraction": 0.2, "random_seed": 42},
        "normalization": {"maxima": [82, 82, 120, 50, 30]},
        "sweep": {"offset_range": 5},
    }
    cfg.update(overrides)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(cfg))
    return str(path)


class TestConfig:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "absent.yaml"))

    def test_missing_key(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.safe_dump({"model": {"name": "dense"}}))
        with pytest.raises(ValueError, match="Missing config key"):
            load_config(str(path))

    def test_build_estimator(self, tmp_path):
        est = build_estimator(load_config(_write_config(tmp_path)))
        assert isinstance(est, WinPctEstimator)
        assert est.epochs == 20
        assert est.random_seed == 42
        assert est.sweep_range == 5

    def test_model_name_selects_registry_entry(self, tmp_path):
        cfg = load_config(_write_config(tmp_path, model={"name": "linear_baseline"}))
        assert build_estimator(cfg).model_name == "linear_baseline"

    def test_unknown_model_rejected(self, tmp_path):
        cfg = load_config(_write_config(tmp_path, model={"name": "nonexistent_model"}))
        with pytest.raises(ValueError, match="Unknown model"):
            build_estimator(cfg)

    def test_default_config_loads(self):
        cfg = load_config(str(DEFAULT_CONFIG))
        assert cfg["training"]["epochs"] == 200
        assert cfg["normalization"]["maxima"] == [82, 82, 120, 50, 30]


class TestRunTraining:
    def test_full_flow(self, tmp_path):
        save_path = str(tmp_path / "models" / "dense.pt")
        result = run_training(_write_config(tmp_path), save_path=save_path)

        assert len(result["history"]["train_loss"]) == 20
        comp = result["comparison"]
        assert comp["model"]["n_samples"] == 4
        assert "mse_improvement" in comp
        assert result["model_path"] == save_path

        reloaded = WinPctEstimator()
        reloaded.load(save_path)
        stats = TeamStats(50, 32, 110.0, 44.0, 25.0)
        assert reloaded.predict(stats) == result["estimator"].predict(stats)

    def test_no_save_without_paths(self, tmp_path):
        result = run_training(_write_config(tmp_path))
        assert result["model_path"] is None
