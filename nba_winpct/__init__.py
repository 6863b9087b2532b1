"""
NBA Win% — team win-percentage estimation from season stats.

Trains a small dense network on 2021-22 team stats and predicts a win
percentage, plus a sensitivity sweep for charting.
"""

__version__ = "0.1.0"
