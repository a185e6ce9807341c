"""
HomeLens 테스트 - 스키마 검증
"""

import pytest
from pydantic import ValidationError

from app.domain.weights import DEFAULT_WEIGHTS
from app.schemas import (
    InventoryLevel,
    MarketSignals,
    NeighborhoodSignals,
    ScoreBreakdown,
    UserSearch,
    WeightVector,
)
from tests.helpers import SAMPLE_LISTING_ID, make_listing, make_search, search_payload


class TestListing:
    """매물 스키마"""

    def test_features_deduplicated(self):
        listing = make_listing(features=["pool", "garage", "pool"])

        assert listing.features == ("pool", "garage")

    @pytest.mark.parametrize("field,value", [
        ("price", 0),
        ("beds", 0),
        ("baths", -1),
        ("sqft", 0),
    ])
    def test_positive_fields(self, field, value):
        with pytest.raises(ValidationError):
            make_listing(**{field: value})

    def test_camel_case_aliases(self):
        data = make_listing().model_dump(by_alias=True)

        assert "addressMasked" in data
        assert "taxesAnnualEstimate" in data
        assert "address_masked" not in data

    def test_immutable(self):
        listing = make_listing()

        with pytest.raises(ValidationError):
            listing.price = 1

    def test_summary(self):
        assert make_listing().to_summary() == (
            "1234 *** St, Land O Lakes, FL | $450,000 | 3bd/2ba | 2,000sqft"
        )


class TestUserSearch:
    """검색 조건 스키마"""

    def test_from_camel_case(self):
        search = UserSearch.model_validate(search_payload(weights={"propertyQuality": 0.5}))

        assert search.location_query == "34639"
        assert search.weights.property_quality == 0.5

    def test_budget_order(self):
        with pytest.raises(ValidationError):
            make_search(budget_min=600000, budget_max=500000)

    def test_equal_budget_allowed(self):
        assert make_search(budget_min=500000, budget_max=500000).budget_max == 500000

    def test_weight_override_range(self):
        with pytest.raises(ValidationError):
            make_search(weights={"commute": 1.5})

    def test_default_risk_tolerance(self):
        payload = search_payload()
        del payload["riskTolerance"]

        assert UserSearch.model_validate(payload).risk_tolerance == "MEDIUM"


class TestSignals:
    """외부 신호 스키마"""

    def test_ranges(self):
        with pytest.raises(ValidationError):
            NeighborhoodSignals(school_rating=11, safety_index=50, walkability=50)
        with pytest.raises(ValidationError):
            MarketSignals(
                median_days_on_market=-1,
                yoy_price_change_pct=0,
                inventory_level=InventoryLevel.LOW,
            )

    def test_inventory_level_values(self):
        signals = MarketSignals.model_validate(
            {"medianDaysOnMarket": 30, "yoyPriceChangePct": -2.5, "inventoryLevel": "HIGH"}
        )

        assert signals.inventory_level == InventoryLevel.HIGH


class TestScoreBreakdown:
    """점수 결과 불변식"""

    def make_fields(self, **overrides):
        fields = dict(
            listing_id=SAMPLE_LISTING_ID,
            affordability_score=80,
            commute_score=75,
            neighborhood_score=70,
            property_quality_score=65,
            market_momentum_score=60,
            overall_score=72,
            reasons=["a", "b", "c"],
            weights=DEFAULT_WEIGHTS,
        )
        fields.update(overrides)
        return fields

    def test_valid(self):
        breakdown = ScoreBreakdown(**self.make_fields())

        assert breakdown.factor_scores.affordability == 80
        assert breakdown.model_dump(by_alias=True)["overallScore"] == 72

    @pytest.mark.parametrize("overrides", [
        {"reasons": ["a", "b"]},
        {"reasons": ["a", "", "c"]},
        {"overall_score": 101},
        {"commute_score": -1},
        {"weights": WeightVector(
            affordability=0.5, commute=0.5, neighborhood=0.5,
            property_quality=0, market_momentum=0,
        )},
    ])
    def test_invalid(self, overrides):
        with pytest.raises(ValidationError):
            ScoreBreakdown(**self.make_fields(**overrides))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
