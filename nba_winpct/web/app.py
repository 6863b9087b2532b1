"""
Flask API for the win-percentage frontend.

- GET  /health        — liveness
- GET  /api/status    — estimator state (untrained | ready)
- POST /api/predict   — win% plus sensitivity chart for posted team stats
- POST /api/sweep     — sensitivity chart only
"""

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from nba_winpct.core.schema import ModelNotReadyError, NoGamesPlayedError, TeamStats
from nba_winpct.estimator import WinPctEstimator

log = logging.getLogger(__name__)


def _read_stats() -> TeamStats:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object of team stats")
    return TeamStats.from_dict(data)


def create_app(estimator: WinPctEstimator, start_training: bool = True) -> Flask:
    """Build the Flask app around an explicitly owned estimator.

    When start_training is set and the estimator is not ready yet, training
    is kicked off on a background thread before the app is returned.
    """
    app = Flask(__name__)
    CORS(app)
    app.extensions["winpct_estimator"] = estimator

    if start_training and not estimator.is_ready:
        log.info("Starting background training")
        estimator.start_training()

    @app.before_request
    def log_request():
        log.info(f"{request.method} {request.path}")

    @app.errorhandler(ModelNotReadyError)
    def not_ready(e):
        log.warning("Prediction requested before model is ready")
        return jsonify({"status": "error", "message": str(e)}), 503

    @app.errorhandler(NoGamesPlayedError)
    def no_games(e):
        return jsonify({"status": "error", "message": str(e)}), 400

    @app.errorhandler(ValueError)
    def bad_input(e):
        return jsonify({"status": "error", "message": str(e)}), 400

    @app.errorhandler(Exception)
    def internal_error(e):
        if isinstance(e, HTTPException):
            return e
        log.error(f"Unhandled error: {e}", exc_info=True)
        return jsonify({"status": "error", "message": str(e)}), 500

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/status")
    def status():
        return jsonify({"state": estimator.state.value, "ready": estimator.is_ready})

    @app.route("/api/predict", methods=["POST"])
    def predict():
        stats = _read_stats()
        win_pct = estimator.predict(stats)
        chart = estimator.sweep(stats).to_chart_data()
        log.info(f"Predicted {win_pct}% for {stats.to_dict()}")
        return jsonify({"status": "success", "win_pct": win_pct, "chart": chart})

    @app.route("/api/sweep", methods=["POST"])
    def sweep():
        stats = _read_stats()
        return jsonify({"status": "success", "chart": estimator.sweep(stats).to_chart_data()})

    return app
