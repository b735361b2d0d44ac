from .models import ZATOSHI_PER_ZEC, AccountBalance, Pool
from .service import BalanceAggregator

__all__ = ["AccountBalance", "BalanceAggregator", "Pool", "ZATOSHI_PER_ZEC"]
