"""
Embedded 2021-22 NBA team-season dataset.

Twenty team rows: wins, losses, points/rebounds/assists per game and the
resulting win percentage. This is the only training data the estimator
ever sees.
"""

import numpy as np

from nba_winpct.core.schema import DatasetRow, TrainingBundle

_RAW_ROWS = (
    (52, 30, 112.1, 44.3, 25.2, 0.634),
    (51, 31, 115.9, 46.0, 28.7, 0.622),
    (56, 26, 111.7, 46.0, 23.8, 0.683),
    (53, 29, 112.1, 44.2, 27.4, 0.646),
    (51, 31, 110.0, 42.7, 23.4, 0.622),
    (44, 38, 112.0, 45.3, 25.2, 0.537),
    (48, 34, 112.1, 43.8, 25.4, 0.585),
    (46, 36, 109.9, 45.3, 25.0, 0.561),
    (44, 38, 108.6, 45.3, 23.7, 0.537),
    (49, 33, 106.6, 45.3, 25.4, 0.598),
    (46, 36, 110.3, 42.0, 25.4, 0.561),
    (44, 38, 109.8, 45.6, 25.2, 0.537),
    (48, 34, 110.0, 44.3, 27.8, 0.585),
    (42, 40, 111.5, 45.0, 24.8, 0.512),
    (36, 46, 108.4, 43.7, 23.7, 0.439),
    (27, 55, 103.7, 43.0, 22.0, 0.329),
    (22, 60, 104.8, 43.5, 21.9, 0.268),
    (25, 57, 106.6, 42.8, 23.4, 0.305),
    (24, 58, 108.0, 42.0, 25.2, 0.293),
    (20, 62, 103.9, 42.8, 22.0, 0.244),
)

NBA_2021_22: tuple[DatasetRow, ...] = tuple(DatasetRow(*r) for r in _RAW_ROWS)


def load_dataset(rows: tuple[DatasetRow, ...] = NBA_2021_22) -> TrainingBundle:
    """Raw (unnormalized) features and win% labels as a TrainingBundle."""
    features = np.stack([row.stats.as_vector() for row in rows])
    labels = np.array([row.win_pct for row in rows], dtype=np.float32)
    return TrainingBundle(features=features, labels=labels)
