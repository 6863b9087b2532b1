"""Tests for the Flask API."""

import pytest

from nba_winpct.web.app import create_app

PAYLOAD = {
    "wins": 50, "losses": 32,
    "pointsPerGame": 110, "reboundsPerGame": 44, "assistsPerGame": 25,
}


@pytest.fixture
def client(trained_estimator):
    app = create_app(trained_estimator, start_training=False)
    return app.test_client()


@pytest.fixture
def cold_client(untrained_estimator):
    app = create_app(untrained_estimator, start_training=False)
    return app.test_client()


class TestStatus:
    def test_health(self, client):
        assert client.get("/health").get_json() == {"status": "ok"}

    def test_ready(self, client):
        assert client.get("/api/status").get_json() == {"state": "ready", "ready": True}

    def test_untrained(self, cold_client):
        assert cold_client.get("/api/status").get_json() == {"state": "untrained", "ready": False}


class TestPredict:
    def test_success(self, client, trained_estimator):
        resp = client.post("/api/predict", json=PAYLOAD)
        assert resp.status_code == 200
        body = resp.get_json()
        assert 0 <= body["win_pct"] <= 100
        assert body["chart"]["labels"] == [str(i) for i in range(-5, 6)]
        assert len(body["chart"]["datasets"]) == 3

    def test_not_ready(self, cold_client):
        resp = cold_client.post("/api/predict", json=PAYLOAD)
        assert resp.status_code == 503
        assert "not ready" in resp.get_json()["message"]

    def test_zero_games(self, client):
        resp = client.post("/api/predict", json={"wins": 0, "losses": 0, "pointsPerGame": 110})
        assert resp.status_code == 400
        assert "at least one win or loss" in resp.get_json()["message"]

    def test_missing_body(self, client):
        resp = client.post("/api/predict", data="nope", content_type="text/plain")
        assert resp.status_code == 400

    def test_non_numeric(self, client):
        resp = client.post("/api/predict", json={"wins": "lots", "losses": 3})
        assert resp.status_code == 400

    @pytest.mark.parametrize("payload", [
        {"wins": "Infinity", "losses": 3},
        {"wins": 50, "losses": 32, "pointsPerGame": "nan"},
    ])
    def test_non_finite_rejected(self, client, payload):
        resp = client.post("/api/predict", json=payload)
        assert resp.status_code == 400
        assert "finite" in resp.get_json()["message"]

    def test_overflowing_json_number_rejected(self, client):
        resp = client.post(
            "/api/predict", data='{"wins": 1e999, "losses": 3}', content_type="application/json"
        )
        assert resp.status_code == 400


class TestSweep:
    def test_success(self, client):
        resp = client.post("/api/sweep", json=PAYLOAD)
        assert resp.status_code == 200
        datasets = resp.get_json()["chart"]["datasets"]
        assert all(len(d["data"]) == 11 for d in datasets)

    def test_not_ready(self, cold_client):
        assert cold_client.post("/api/sweep", json=PAYLOAD).status_code == 503


def test_create_app_starts_training():
    from nba_winpct.estimator import WinPctEstimator

    est = WinPctEstimator(epochs=3, random_seed=0)
    create_app(est)
    assert est.wait_until_ready(timeout=60)
