"""
HomeLens 테스트 - 요인별 점수 / 종합 점수
"""

import pytest

from app.domain.scoring import (
    calculate_affordability_score,
    calculate_commute_score,
    calculate_market_momentum_score,
    calculate_neighborhood_score,
    calculate_property_quality_score,
    round_half_up,
    score_listing,
)
from app.schemas.listing import PropertyType
from app.schemas.results import FACTOR_ORDER
from app.schemas.signals import InventoryLevel, MarketSignals, NeighborhoodSignals
from tests.helpers import make_listing, make_search


class TestAffordabilityScore:
    """구매 여력 점수"""

    def setup_method(self):
        self.listing = make_listing()  # 월 약 2,950

    def test_unaffordable_is_zero(self):
        search = make_search(budget_max=200000, budget_min=100000)

        assert calculate_affordability_score(self.listing, search) == 0

    def test_comfortable_is_100(self):
        """월 납입액이 여력의 25% 이하"""
        search = make_search(budget_min=4_000_000, budget_max=5_000_000)

        assert calculate_affordability_score(self.listing, search) == 100

    def test_between_thresholds_interpolates(self):
        search = make_search(budget_min=3_500_000, budget_max=4_000_000)

        score = calculate_affordability_score(self.listing, search)

        assert 0 < score < 100

    def test_monotonic_in_budget_max(self):
        """예산 상한을 늘리면 점수는 줄지 않음"""
        previous = -1
        for budget_max in range(400_000, 8_000_001, 100_000):
            search = make_search(budget_min=350000, budget_max=budget_max)
            score = calculate_affordability_score(self.listing, search)
            assert score >= previous
            previous = score

    def test_zero_capacity_does_not_divide_by_zero(self):
        """safe == max (여력 0) 이어도 예외 없이 경계값 반환"""
        # 검증을 우회해 여력 0인 조건 생성
        search = make_search().model_copy(update={"budget_min": 0, "budget_max": 0})

        assert calculate_affordability_score(self.listing, search) == 0


class TestCommuteScore:
    """통근 점수"""

    def test_well_within_target(self):
        assert calculate_commute_score(10, 30) == 100

    def test_no_constraint_is_neutral(self):
        assert calculate_commute_score(100, None) == 75

    def test_over_target(self):
        score = calculate_commute_score(40, 30)

        assert 0 < score < 75

    def test_buffer_zone_decays_to_75(self):
        """여유분(20%) 구간: 100 → 75"""
        assert calculate_commute_score(24, 30) == 100
        assert calculate_commute_score(28, 30) == 83
        assert calculate_commute_score(30, 30) == 75

    def test_over_target_penalty_per_minute(self):
        assert calculate_commute_score(31, 30) == 70
        assert calculate_commute_score(35, 30) == 50

    def test_far_over_target_floors_at_zero(self):
        assert calculate_commute_score(90, 30) == 0


class TestNeighborhoodScore:
    """지역 점수"""

    def test_good_signals(self):
        signals = NeighborhoodSignals(school_rating=9, safety_index=85, walkability=80)

        assert calculate_neighborhood_score(signals, "MEDIUM") > 80

    def test_low_safety_hurts_risk_averse_more(self):
        signals = NeighborhoodSignals(school_rating=8, safety_index=40, walkability=70)

        low = calculate_neighborhood_score(signals, "LOW")
        high = calculate_neighborhood_score(signals, "HIGH")

        assert low < high
        assert low == 62
        assert high == 68


class TestPropertyQualityScore:
    """매물 품질 점수"""

    def test_recent_large_home(self):
        listing = make_listing(year_built=2023, sqft=3000, features=["pool", "garage"])

        assert calculate_property_quality_score(listing, current_year=2026) > 70

    def test_old_small_home(self):
        listing = make_listing(year_built=1960, sqft=1000, features=[])

        assert calculate_property_quality_score(listing, current_year=2026) < 60

    def test_feature_bonus_is_capped(self):
        few = make_listing(year_built=None, features=["a", "b", "c"])
        many = make_listing(year_built=None, features=["a", "b", "c", "d", "e", "f"])

        assert calculate_property_quality_score(few) == calculate_property_quality_score(many)

    def test_duplicate_features_count_once(self):
        listing = make_listing(year_built=None, features=["pool", "pool", "garage"])

        # 50 + 10(특징 2개) + 5(단독주택)
        assert calculate_property_quality_score(listing) == 65

    def test_unknown_year_built_has_no_age_adjustment(self):
        listing = make_listing(
            year_built=None, sqft=2000, features=[], property_type=PropertyType.CONDO
        )

        assert calculate_property_quality_score(listing) == 50

    def test_middle_aged_home_has_no_age_adjustment(self):
        listing = make_listing(
            year_built=1990, sqft=2000, features=[], property_type=PropertyType.TOWNHOME
        )

        assert calculate_property_quality_score(listing, current_year=2026) == 50

    def test_max_score_stays_within_bounds(self):
        listing = make_listing(year_built=2025, sqft=4000, features=["a", "b", "c", "d"])

        assert calculate_property_quality_score(listing, current_year=2026) == 100


class TestMarketMomentumScore:
    """시장 점수"""

    def test_buyer_friendly_market(self):
        signals = MarketSignals(
            median_days_on_market=90, yoy_price_change_pct=-1, inventory_level="HIGH"
        )

        assert calculate_market_momentum_score(signals) > 70

    def test_seller_market(self):
        signals = MarketSignals(
            median_days_on_market=5, yoy_price_change_pct=8, inventory_level="LOW"
        )

        assert calculate_market_momentum_score(signals) < 40

    def test_declining_prices_bonus(self):
        signals = MarketSignals(
            median_days_on_market=45,
            yoy_price_change_pct=-3,
            inventory_level=InventoryLevel.MEDIUM,
        )

        # 50 + 5(31-60일) + 15(하락)
        assert calculate_market_momentum_score(signals) == 70

    def test_moderate_appreciation_has_no_price_adjustment(self):
        signals = MarketSignals(
            median_days_on_market=20,
            yoy_price_change_pct=3.5,
            inventory_level=InventoryLevel.MEDIUM,
        )

        assert calculate_market_momentum_score(signals) == 50


class TestScoreListing:
    """종합 점수"""

    def setup_method(self):
        self.listing = make_listing()
        self.neighborhood = NeighborhoodSignals(
            school_rating=7, safety_index=70, walkability=50
        )
        self.market = MarketSignals(
            median_days_on_market=45, yoy_price_change_pct=3.0, inventory_level="MEDIUM"
        )

    def _score(self, search, commute_minutes=25):
        return score_listing(
            self.listing, search, self.neighborhood, self.market, commute_minutes
        )

    def test_breakdown_shape(self):
        result = self._score(make_search())

        assert result.listing_id == self.listing.id
        assert len(result.reasons) == 3
        assert all(result.reasons)
        assert result.weights.total() == pytest.approx(1.0, abs=1e-6)

    @pytest.mark.parametrize(
        "search_overrides",
        [
            {},
            {"budget_min": 3_500_000, "budget_max": 4_000_000},
            {"commute_max_minutes": 30, "risk_tolerance": "LOW"},
            {"weights": {"affordability": 1, "commute": 0}},
            {"weights": {"market_momentum": 0.7}, "risk_tolerance": "HIGH"},
        ],
    )
    def test_overall_is_weighted_sum(self, search_overrides):
        result = self._score(make_search(**search_overrides))

        expected = round_half_up(
            sum(
                getattr(result.factor_scores, name) * getattr(result.weights, name)
                for name in FACTOR_ORDER
            )
        )
        assert result.overall_score == expected
        assert 0 <= result.overall_score <= 100

    def test_uses_normalized_custom_weights(self):
        result = self._score(make_search(weights={"affordability": 1.0}))

        assert result.weights.affordability == pytest.approx(1.0 / 1.75)

    def test_commute_constraint_applied(self):
        result = self._score(make_search(commute_max_minutes=30), commute_minutes=10)

        assert result.commute_score == 100

    def test_is_deterministic(self):
        search = make_search(commute_max_minutes=30)

        assert self._score(search) == self._score(search)


class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(87.5) == 88
        assert round_half_up(0.5) == 1
        assert round_half_up(2.4999) == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
