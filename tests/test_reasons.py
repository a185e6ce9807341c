"""
HomeLens 테스트 - 점수 근거 생성
"""

import pytest

from app.domain.reasons import format_number, generate_score_reasons
from app.schemas.results import FactorScores
from tests.helpers import make_listing, make_search


def _scores(**values) -> FactorScores:
    fields = dict(
        affordability=50,
        commute=50,
        neighborhood=50,
        property_quality=50,
        market_momentum=50,
    )
    fields.update(values)
    return FactorScores(**fields)


class TestGenerateScoreReasons:
    """근거 3개 생성"""

    def setup_method(self):
        self.listing = make_listing()
        self.search = make_search()

    def test_exactly_three_non_empty(self):
        reasons = generate_score_reasons(
            self.listing,
            self.search,
            _scores(
                affordability=85,
                commute=70,
                neighborhood=80,
                property_quality=75,
                market_momentum=60,
            ),
        )

        assert len(reasons) == 3
        assert all(isinstance(r, str) and r for r in reasons)

    def test_highest_factor_first(self):
        reasons = generate_score_reasons(
            self.listing,
            self.search,
            _scores(
                affordability=90,
                commute=50,
                neighborhood=40,
                property_quality=70,
                market_momentum=60,
            ),
        )

        assert reasons[0] == "Monthly payment fits comfortably in budget"
        assert reasons[1] == "3bd/2ba with adequate size and features"
        assert reasons[2] == "Market conditions are neutral"

    def test_ties_follow_factor_order(self):
        """동점이면 affordability, commute, neighborhood 순"""
        reasons = generate_score_reasons(
            self.listing,
            self.search,
            _scores(
                affordability=60,
                commute=60,
                neighborhood=60,
                property_quality=60,
                market_momentum=60,
            ),
        )

        assert reasons == [
            "Monthly payment within acceptable range",
            "Reasonable commute",
            "Good neighborhood profile",
        ]

    def test_later_factor_wins_when_higher(self):
        reasons = generate_score_reasons(
            self.listing, self.search, _scores(market_momentum=90)
        )

        assert reasons[0] == "Buyer-friendly market conditions"

    def test_commute_reason_mentions_target(self):
        search = make_search(commute_max_minutes=30)

        high = generate_score_reasons(self.listing, search, _scores(commute=95))
        low = generate_score_reasons(
            self.listing,
            search,
            _scores(
                affordability=10,
                commute=20,
                neighborhood=10,
                property_quality=10,
                market_momentum=10,
            ),
        )

        assert high[0] == "Commute is well under 30 minute target"
        assert low[0] == "Commute exceeds 30 minute target"

    def test_commute_reason_without_target(self):
        reasons = generate_score_reasons(self.listing, self.search, _scores(commute=95))

        assert reasons[0] == "Excellent commute profile"

    def test_property_reason_uses_listing_details(self):
        reasons = generate_score_reasons(
            self.listing, self.search, _scores(property_quality=85)
        )

        assert reasons[0] == "3bd/2ba, 2,000sqft with good features"

    def test_fractional_sqft_and_baths(self):
        listing = make_listing(sqft=1850.5, baths=2.5)

        reasons = generate_score_reasons(listing, self.search, _scores(property_quality=85))

        assert reasons[0] == "3bd/2.5ba, 1,850.5sqft with good features"

    def test_large_commute_target_without_exponent(self):
        search = make_search(commute_max_minutes=1500000)

        reasons = generate_score_reasons(self.listing, search, _scores(commute=95))

        assert reasons[0] == "Commute is well under 1500000 minute target"

    def test_low_scores_still_produce_three_reasons(self):
        reasons = generate_score_reasons(
            self.listing,
            self.search,
            _scores(
                affordability=0,
                commute=0,
                neighborhood=0,
                property_quality=0,
                market_momentum=0,
            ),
        )

        assert reasons == [
            "Monthly payment may stretch budget",
            "Longer commute may be a concern",
            "Neighborhood signals are mixed",
        ]


class TestFormatNumber:
    """근거 문장 숫자 표기"""

    @pytest.mark.parametrize("value,grouping,expected", [
        (2000, True, "2,000"),
        (1850.5, True, "1,850.5"),
        (12345678, True, "12,345,678"),
        (30, False, "30"),
        (22.5, False, "22.5"),
        (1500000, False, "1500000"),
        (0, True, "0"),
    ])
    def test_format(self, value, grouping, expected):
        assert format_number(value, grouping=grouping) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
