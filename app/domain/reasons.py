"""
점수 근거 생성
요인별 점수를 정렬해 상위 3개를 설명 문장으로 반환합니다.
"""

from app.schemas.listing import Listing
from app.schemas.results import FactorScores
from app.schemas.search import UserSearch

TOP_REASON_COUNT = 3


def format_number(value: float, grouping: bool = True) -> str:
    """소수점 최대 3자리 (끝자리 0 제거, 지수 표기 없음), grouping이면 천 단위 구분"""
    text = f"{value:,.3f}" if grouping else f"{value:.3f}"
    text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _affordability_reason(score: float) -> str:
    if score > 75:
        return "Monthly payment fits comfortably in budget"
    if score > 50:
        return "Monthly payment within acceptable range"
    return "Monthly payment may stretch budget"


def _commute_reason(score: float, search: UserSearch) -> str:
    target = search.commute_max_minutes
    if target:
        target = format_number(target, grouping=False)

    if score > 80:
        if target:
            return f"Commute is well under {target} minute target"
        return "Excellent commute profile"
    if score > 50:
        if target:
            return f"Commute near target of {target} minutes"
        return "Reasonable commute"
    if target:
        return f"Commute exceeds {target} minute target"
    return "Longer commute may be a concern"


def _neighborhood_reason(score: float) -> str:
    if score > 75:
        return "Strong schools, safety, and walkability"
    if score > 50:
        return "Good neighborhood profile"
    return "Neighborhood signals are mixed"


def _property_quality_reason(score: float, listing: Listing) -> str:
    layout = f"{listing.beds}bd/{format_number(listing.baths, grouping=False)}ba"
    if score > 75:
        return f"{layout}, {format_number(listing.sqft)}sqft with good features"
    if score > 50:
        return f"{layout} with adequate size and features"
    return "Property is functional but may have limited appeal"


def _market_momentum_reason(score: float) -> str:
    if score > 75:
        return "Buyer-friendly market conditions"
    if score > 50:
        return "Market conditions are neutral"
    return "Competitive seller market"


def generate_score_reasons(
    listing: Listing, search: UserSearch, scores: FactorScores
) -> list[str]:
    """
    상위 3개 요인의 설명 문장을 반환합니다.

    점수 내림차순으로 정렬하며, 동점이면 요인 순서
    (affordability, commute, neighborhood, property_quality, market_momentum)를 따릅니다.

    Returns:
        list[str]: 항상 3개
    """
    reasons = {
        "affordability": _affordability_reason(scores.affordability),
        "commute": _commute_reason(scores.commute, search),
        "neighborhood": _neighborhood_reason(scores.neighborhood),
        "property_quality": _property_quality_reason(scores.property_quality, listing),
        "market_momentum": _market_momentum_reason(scores.market_momentum),
    }

    # sorted()는 안정 정렬이므로 동점은 FACTOR_ORDER 순서 유지
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [reasons[name] for name, _ in ranked[:TOP_REASON_COUNT]]
