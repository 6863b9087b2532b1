"""Tests for the dense network, the linear baseline and the registry."""

import numpy as np
import pytest
import torch

from nba_winpct.core.schema import TrainingBundle
from nba_winpct.models.baseline import LinearBaseline
from nba_winpct.models.dense import DenseModel, WinPctNetwork
from nba_winpct.models.registry import create_model, list_models


def _make_bundle(n=16):
    return TrainingBundle(
        features=np.random.rand(n, 5).astype(np.float32),
        labels=np.random.rand(n).astype(np.float32),
    )


class TestWinPctNetwork:
    def test_forward_shape(self):
        net = WinPctNetwork()
        out = net(torch.randn(4, 5))
        assert out.shape == (4,)

    def test_output_in_unit_interval(self):
        net = WinPctNetwork()
        out = net(torch.randn(64, 5) * 100)
        assert (out >= 0).all() and (out <= 1).all()

    def test_default_layer_sizes(self):
        linears = [m for m in WinPctNetwork().net if isinstance(m, torch.nn.Linear)]
        assert [(l.in_features, l.out_features) for l in linears] == [(5, 16), (16, 8), (8, 1)]


class TestDenseModel:
    def test_fit_predict(self):
        m = DenseModel(epochs=5, seed=0)
        train, val = _make_bundle(16), _make_bundle(4)
        history = m.fit(train, val)
        assert len(history["train_loss"]) == 5
        assert len(history["val_loss"]) == 5
        preds = m.predict_proba(val.features)
        assert preds.shape == (4,)
        assert 0 <= preds.min() <= preds.max() <= 1

    def test_predict_before_fit(self):
        with pytest.raises(RuntimeError, match="not fitted"):
            DenseModel().predict_proba(np.zeros((1, 5)))

    def test_seed_reproducible(self):
        train, val = _make_bundle(16), _make_bundle(4)
        p1 = DenseModel(epochs=10, seed=7)
        p2 = DenseModel(epochs=10, seed=7)
        p1.fit(train, val)
        p2.fit(train, val)
        np.testing.assert_array_almost_equal(
            p1.predict_proba(val.features), p2.predict_proba(val.features)
        )

    def test_seeded_fit_leaves_global_rng_alone(self):
        torch.manual_seed(123)
        expected = torch.rand(3)

        torch.manual_seed(123)
        DenseModel(epochs=2, seed=7).fit(_make_bundle(16), _make_bundle(4))
        np.testing.assert_array_equal(torch.rand(3).numpy(), expected.numpy())

    def test_save_load(self, tmp_path):
        m = DenseModel(epochs=5, seed=1)
        train, val = _make_bundle(16), _make_bundle(4)
        m.fit(train, val)
        path = str(tmp_path / "dense.pt")
        m.save(path, maxima=[1, 2, 3, 4, 5])

        m2 = DenseModel()
        checkpoint = m2.load(path)
        assert checkpoint["maxima"] == [1, 2, 3, 4, 5]
        np.testing.assert_array_almost_equal(
            m.predict_proba(val.features), m2.predict_proba(val.features)
        )


class TestLinearBaseline:
    def test_fit_predict(self):
        m = LinearBaseline()
        m.fit(_make_bundle(16), _make_bundle(4))
        preds = m.predict_proba(np.random.rand(4, 5) * 10)
        assert preds.shape == (4,)
        assert 0 <= preds.min() <= preds.max() <= 1

    def test_predict_before_fit_raises(self):
        with pytest.raises(RuntimeError, match="not fitted"):
            LinearBaseline().predict_proba(np.zeros((1, 5)))

    def test_save_load(self, tmp_path):
        m = LinearBaseline()
        val = _make_bundle(4)
        m.fit(_make_bundle(16), val)
        path = str(tmp_path / "baseline.joblib")
        m.save(path)

        m2 = LinearBaseline()
        m2.load(path)
        np.testing.assert_array_almost_equal(
            m.predict_proba(val.features), m2.predict_proba(val.features)
        )


class TestRegistry:
    def test_list_models(self):
        models = list_models()
        assert "dense" in models
        assert "linear_baseline" in models

    def test_create(self):
        assert isinstance(create_model("linear_baseline"), LinearBaseline)
        assert isinstance(create_model("dense", epochs=3), DenseModel)

    def test_unknown_model(self):
        with pytest.raises(ValueError, match="Unknown model"):
            create_model("nonexistent_model")
