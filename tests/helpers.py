"""
테스트 공용 데이터
"""

from datetime import datetime
from uuid import UUID

from app.schemas.listing import Listing, PropertyType
from app.schemas.search import UserSearch

SAMPLE_LISTING_ID = UUID("550e8400-e29b-41d4-a716-446655440000")


def make_listing(**overrides) -> Listing:
    """Land O Lakes 단독주택 (450k, 세금/보험 추정치 있음)"""
    fields = dict(
        id=SAMPLE_LISTING_ID,
        address_masked="1234 *** St, Land O Lakes, FL",
        city="Land O Lakes",
        state="FL",
        zip="34639",
        lat=28.15,
        lng=-82.45,
        price=450000,
        beds=3,
        baths=2,
        sqft=2000,
        lot_sqft=7500,
        year_built=2015,
        property_type=PropertyType.SINGLE_FAMILY,
        hoa_monthly=None,
        taxes_annual_estimate=5400,
        insurance_annual_estimate=2700,
        features=["garage", "pool", "fenced yard"],
        photos=["/photos/home1.jpg"],
        created_at=datetime(2024, 1, 15),
    )
    fields.update(overrides)
    return Listing(**fields)


def make_search(**overrides) -> UserSearch:
    fields = dict(
        location_query="34639",
        budget_min=350000,
        budget_max=500000,
        beds_min=3,
        baths_min=2,
        must_haves=["garage"],
        commute_to=None,
        commute_max_minutes=None,
        risk_tolerance="MEDIUM",
    )
    fields.update(overrides)
    return UserSearch(**fields)


def search_payload(**overrides) -> dict:
    """API 요청용 camelCase 검색 조건"""
    payload = {
        "locationQuery": "34639",
        "budgetMin": 350000,
        "budgetMax": 500000,
        "bedsMin": 3,
        "bathsMin": 2,
        "mustHaves": ["garage"],
        "commuteTo": None,
        "commuteMaxMinutes": None,
        "riskTolerance": "MEDIUM",
    }
    payload.update(overrides)
    return payload
