from .base import TrendStore
from .trend_repository import TrendRepository

__all__ = ["TrendStore", "TrendRepository"]
