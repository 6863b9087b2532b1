# Import all models so they register with the registry
from nba_winpct.models.baseline import LinearBaseline  # noqa: F401
from nba_winpct.models.dense import DenseModel  # noqa: F401
