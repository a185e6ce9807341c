"""
점수화 엔진
규칙 기반으로 요인별 점수(0-100)를 산정하고 가중 합산합니다.

모든 함수는 입력만 읽는 순수 함수이며, 입력은 호출 측에서 검증되었다고 가정합니다.
"""

import math
from datetime import datetime
from typing import Optional

from loguru import logger

from app.domain.finance import total_monthly_payment
from app.domain.reasons import generate_score_reasons
from app.domain.weights import normalize_weights
from app.schemas.listing import Listing, PropertyType
from app.schemas.results import FactorScores, ScoreBreakdown
from app.schemas.search import RiskTolerance, UserSearch
from app.schemas.signals import InventoryLevel, MarketSignals, NeighborhoodSignals

# 예산 → 월 상환 여력 환산 계수 (월 소득 근사치, 실제 DTI 계산 아님)
BUDGET_TO_MONTHLY_DIVISOR = 360
SAFE_PAYMENT_RATIO = 0.25
MAX_PAYMENT_RATIO = 0.33

NEUTRAL_COMMUTE_SCORE = 75
COMMUTE_BUFFER_RATIO = 0.2
COMMUTE_OVERAGE_PENALTY = 5  # 초과 1분당 감점

SCHOOL_WEIGHT = 0.4
SAFETY_WEIGHTS = {
    RiskTolerance.LOW: 0.4,
    RiskTolerance.MEDIUM: 0.3,
    RiskTolerance.HIGH: 0.2,
}

MAX_FEATURE_BONUS = 15


def round_half_up(value: float) -> int:
    """0.5는 올림 (round()의 은행가 반올림 대신)"""
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float = 0, high: float = 100) -> float:
    return min(high, max(low, value))


def calculate_affordability_score(listing: Listing, search: UserSearch) -> int:
    """
    구매 여력 점수

    예산 평균을 360으로 나눈 값을 월 상환 여력으로 보고,
    그 25% 이하면 100점, 33% 초과면 0점, 사이는 선형 보간합니다.
    """
    payment = total_monthly_payment(listing)

    capacity = (search.budget_min + search.budget_max) / 2 / BUDGET_TO_MONTHLY_DIVISOR
    safe_payment = capacity * SAFE_PAYMENT_RATIO
    max_payment = capacity * MAX_PAYMENT_RATIO

    if payment > max_payment:
        return 0
    # safe == max 인 경우도 여기서 종료 (보간 분모 0 방지)
    if payment <= safe_payment:
        return 100

    return round_half_up((max_payment - payment) / (max_payment - safe_payment) * 100)


def calculate_commute_score(
    actual_minutes: float, max_minutes: Optional[float]
) -> int:
    """통근 점수: 조건 없으면 중립 75점"""
    if not max_minutes:
        return NEUTRAL_COMMUTE_SCORE

    if actual_minutes <= max_minutes:
        buffer = max_minutes * COMMUTE_BUFFER_RATIO
        if actual_minutes <= max_minutes - buffer:
            return 100
        # 여유분을 쓸수록 100 → 75
        return round_half_up(
            100 - ((actual_minutes - (max_minutes - buffer)) / buffer) * 25
        )

    overage = actual_minutes - max_minutes
    return max(0, round_half_up(NEUTRAL_COMMUTE_SCORE - overage * COMMUTE_OVERAGE_PENALTY))


def calculate_neighborhood_score(
    signals: NeighborhoodSignals, risk_tolerance: RiskTolerance
) -> int:
    """지역 점수: 위험 회피 성향일수록 치안 비중이 큼"""
    safety_weight = SAFETY_WEIGHTS[RiskTolerance(risk_tolerance)]
    walkability_weight = 1 - SCHOOL_WEIGHT - safety_weight

    school_score = signals.school_rating / 10 * 100

    return round_half_up(
        school_score * SCHOOL_WEIGHT
        + signals.safety_index * safety_weight
        + signals.walkability * walkability_weight
    )


def calculate_property_quality_score(
    listing: Listing, current_year: Optional[int] = None
) -> int:
    """매물 품질 점수: 연식, 면적, 특징, 주택 유형"""
    score = 50

    if listing.year_built:
        age = (current_year or datetime.now().year) - listing.year_built
        if age <= 5:
            score += 20
        elif age <= 20:
            score += 10
        elif age > 50:
            score -= 15

    if listing.sqft > 2500:
        score += 10
    elif listing.sqft < 1200:
        score -= 5

    score += min(len(listing.features) * 5, MAX_FEATURE_BONUS)

    if listing.property_type == PropertyType.SINGLE_FAMILY:
        score += 5

    return _clamp(score)


def calculate_market_momentum_score(signals: MarketSignals) -> int:
    """시장 점수: 매수자에게 유리할수록 높음"""
    score = 50

    days = signals.median_days_on_market
    if days <= 14:
        score += 10
    elif days > 60:
        score += 15
    elif days > 30:
        score += 5

    if signals.inventory_level == InventoryLevel.HIGH:
        score += 15
    elif signals.inventory_level == InventoryLevel.LOW:
        score -= 15

    yoy = signals.yoy_price_change_pct
    if yoy < -2:
        score += 15
    elif yoy < 2:
        score += 5
    elif yoy > 5:
        score -= 10

    return _clamp(score)


def score_listing(
    listing: Listing,
    search: UserSearch,
    neighborhood_signals: NeighborhoodSignals,
    market_signals: MarketSignals,
    commute_minutes: float,
) -> ScoreBreakdown:
    """
    매물 종합 점수를 산정합니다.

    Args:
        listing: 매물 정보
        search: 검색 조건
        neighborhood_signals: 지역 신호
        market_signals: 시장 신호
        commute_minutes: 예상 통근 시간 (분)

    Returns:
        ScoreBreakdown: 요인별 점수, 종합 점수, 근거 3개, 적용 가중치
    """
    weights = normalize_weights(search.weights)

    scores = FactorScores(
        affordability=calculate_affordability_score(listing, search),
        commute=calculate_commute_score(commute_minutes, search.commute_max_minutes),
        neighborhood=calculate_neighborhood_score(
            neighborhood_signals, search.risk_tolerance
        ),
        property_quality=calculate_property_quality_score(listing),
        market_momentum=calculate_market_momentum_score(market_signals),
    )

    overall = round_half_up(
        sum(score * getattr(weights, name) for name, score in scores.items())
    )

    breakdown = ScoreBreakdown(
        listing_id=listing.id,
        affordability_score=scores.affordability,
        commute_score=scores.commute,
        neighborhood_score=scores.neighborhood,
        property_quality_score=scores.property_quality,
        market_momentum_score=scores.market_momentum,
        overall_score=overall,
        reasons=generate_score_reasons(listing, search, scores),
        weights=weights,
    )

    logger.debug(f"Score for {listing.id}: {overall}")
    return breakdown

