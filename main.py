#!/usr/bin/env python3
"""
NBA Win% CLI.

Usage:
    python main.py train --save models/saved/dense.pt
    python main.py predict --wins 50 --losses 32 --ppg 110 --rpg 44 --apg 25
    python main.py sweep --wins 50 --losses 32 --ppg 110 --rpg 44 --apg 25 --model models/saved/dense.pt
"""

import sys
import json
import logging
import argparse

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger("nba_winpct")


def _ready_estimator(args):
    from nba_winpct.orchestration.config import build_estimator, load_config

    estimator = build_estimator(load_config(args.config))
    if args.model:
        estimator.load(args.model)
    else:
        estimator.train()
    return estimator


def _stats(args):
    from nba_winpct.core.schema import TeamStats

    return TeamStats(
        wins=args.wins,
        losses=args.losses,
        points_per_game=args.ppg,
        rebounds_per_game=args.rpg,
        assists_per_game=args.apg,
    )


def cmd_train(args):
    from nba_winpct.orchestration.pipeline import run_training

    result = run_training(args.config, save_path=args.save)
    comp = result["comparison"]
    log.info(
        f"Held-out MSE {comp['model']['mse']:.5f} "
        f"(linear baseline {comp['baseline']['mse']:.5f})"
    )
    if result["model_path"]:
        log.info(f"Model saved to {result['model_path']}")


def cmd_predict(args):
    from nba_winpct.core.schema import WinPctError

    estimator = _ready_estimator(args)
    try:
        win_pct = estimator.predict(_stats(args))
    except WinPctError as e:
        log.error(str(e))
        sys.exit(1)
    print(f"Predicted win %: {win_pct}")


def cmd_sweep(args):
    from nba_winpct.core.schema import WinPctError

    estimator = _ready_estimator(args)
    try:
        sweep = estimator.sweep(_stats(args))
    except WinPctError as e:
        log.error(str(e))
        sys.exit(1)
    print(json.dumps(sweep.to_chart_data(), indent=2))


def _add_stat_args(parser):
    parser.add_argument("--wins", type=int, default=0)
    parser.add_argument("--losses", type=int, default=0)
    parser.add_argument("--ppg", type=float, default=0.0, help="Points per game")
    parser.add_argument("--rpg", type=float, default=0.0, help="Rebounds per game")
    parser.add_argument("--apg", type=float, default=0.0, help="Assists per game")
    parser.add_argument("--model", default=None, help="Saved model file (skip training)")


def main():
    p = argparse.ArgumentParser(description="NBA Win% CLI")
    p.add_argument("--config", default="configs/default.yaml")
    sub = p.add_subparsers(dest="command")

    tr = sub.add_parser("train")
    tr.add_argument("--save", default=None, help="Where to write the trained weights")

    _add_stat_args(sub.add_parser("predict"))
    _add_stat_args(sub.add_parser("sweep"))

    args = p.parse_args()
    if args.command == "train":
        cmd_train(args)
    elif args.command == "predict":
        cmd_predict(args)
    elif args.command == "sweep":
        cmd_sweep(args)
    else:
        p.print_help()


if __name__ == "__main__":
    main()
