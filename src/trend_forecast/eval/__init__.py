from .metrics import mae, rmse, mape, r2, score
from .backtest import holdout_backtest

__all__ = ["mae", "rmse", "mape", "r2", "score", "holdout_backtest"]
