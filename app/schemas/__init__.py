"""
HomeLens 스키마 패키지
점수화 엔진과 API의 입출력 스키마를 정의합니다.
"""

from .listing import Listing, PropertyType
from .search import UserSearch, RiskTolerance, WeightOverrides
from .signals import NeighborhoodSignals, MarketSignals, InventoryLevel
from .results import (
    WeightVector,
    FactorScores,
    ScoreBreakdown,
    ShortlistItem,
    ErrorBody,
    ErrorDetail,
    FACTOR_ORDER,
)

__all__ = [
    "Listing",
    "PropertyType",
    "UserSearch",
    "RiskTolerance",
    "WeightOverrides",
    "NeighborhoodSignals",
    "MarketSignals",
    "InventoryLevel",
    "WeightVector",
    "FactorScores",
    "ScoreBreakdown",
    "ShortlistItem",
    "ErrorBody",
    "ErrorDetail",
    "FACTOR_ORDER",
]
