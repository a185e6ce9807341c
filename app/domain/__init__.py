"""
HomeLens 도메인 로직 패키지
주거비 추정, 요인별 점수화, 가중치 정규화, 근거 생성을 담당합니다.
외부 데이터 호출은 이 레이어에 관여하지 않습니다.
"""

from .finance import monthly_payment, monthly_taxes_insurance, total_monthly_payment
from .weights import DEFAULT_WEIGHTS, normalize_weights
from .reasons import generate_score_reasons
from .scoring import (
    calculate_affordability_score,
    calculate_commute_score,
    calculate_neighborhood_score,
    calculate_property_quality_score,
    calculate_market_momentum_score,
    score_listing,
)
from .filters import ListingFilter

__all__ = [
    "monthly_payment",
    "monthly_taxes_insurance",
    "total_monthly_payment",
    "DEFAULT_WEIGHTS",
    "normalize_weights",
    "generate_score_reasons",
    "calculate_affordability_score",
    "calculate_commute_score",
    "calculate_neighborhood_score",
    "calculate_property_quality_score",
    "calculate_market_momentum_score",
    "score_listing",
    "ListingFilter",
]
