"""
Mock 데이터 제공자
외부 API 없이 개발/테스트할 수 있도록 결정적인 값을 생성합니다.

같은 입력이면 항상 같은 값을 반환합니다 (문자 코드 합 기반 체크섬).
"""

import math
from typing import Optional
from uuid import UUID

from loguru import logger

from app.data_sources.base import (
    CommuteTimeProvider,
    ListingsProvider,
    MarketSignalsProvider,
    NeighborhoodSignalsProvider,
)
from app.data_sources.seed import SEED_LISTINGS
from app.domain.filters import ListingFilter
from app.domain.scoring import round_half_up
from app.schemas.listing import Listing
from app.schemas.search import UserSearch
from app.schemas.signals import InventoryLevel, MarketSignals, NeighborhoodSignals


def char_code_checksum(text: str) -> int:
    """문자 코드 합"""
    return sum(ord(char) for char in text)


class MockListingsProvider(ListingsProvider):
    """
    Mock 매물 제공자
    고정 매물 목록에서 조건에 맞는 매물을 가격 오름차순으로 반환합니다.
    """

    def __init__(
        self,
        listings: Optional[list[Listing]] = None,
        limit: int = 20,
    ):
        self.listings = list(SEED_LISTINGS if listings is None else listings)
        self.limit = limit
        self.filter = ListingFilter()
        self.logger = logger.bind(source="MockListings")

    async def search(self, search: UserSearch) -> list[Listing]:
        results = self.filter.apply(self.listings, search)
        results.sort(key=lambda listing: listing.price)

        self.logger.info(
            f"Search '{search.location_query}': {len(results)} matched, "
            f"returning {min(len(results), self.limit)}"
        )
        return results[: self.limit]

    async def get_by_id(self, listing_id: UUID) -> Optional[Listing]:
        listing_id = UUID(str(listing_id))
        for listing in self.listings:
            if listing.id == listing_id:
                return listing
        return None


class MockNeighborhoodSignalsProvider(NeighborhoodSignalsProvider):
    """
    Mock 지역 신호
    도시별 기본값에 우편번호 체크섬 기반 변동(-10 ~ +9)을 더합니다.
    """

    # (학군, 치안, 보행성)
    CITY_BASES = [
        (("winter park",), (9, 82, 75)),
        (("coral gables",), (8, 78, 70)),
        (("carrollwood",), (8, 75, 55)),
        (("land o lakes",), (7, 70, 50)),
        (("downtown", "miami"), (6, 60, 85)),
    ]
    DEFAULT_BASE = (6, 65, 60)

    async def get_signals(self, zip: str, city: str, state: str) -> NeighborhoodSignals:
        school, safety, walk = self._base_for(city)
        variation = char_code_checksum(zip) % 20 - 10

        return NeighborhoodSignals(
            school_rating=max(1, min(10, school + variation / 10)),
            safety_index=max(1, min(100, safety + variation)),
            walkability=max(1, min(100, walk + variation)),
        )

    def _base_for(self, city: str) -> tuple[int, int, int]:
        city = city.lower()
        for keywords, base in self.CITY_BASES:
            if any(keyword in city for keyword in keywords):
                return base
        return self.DEFAULT_BASE


class MockMarketSignalsProvider(MarketSignalsProvider):
    """
    Mock 시장 신호
    도심 지역은 빠른 거래/낮은 재고, 교외 가족 지역은 균형 시장으로 가정합니다.
    """

    async def get_signals(self, zip: str, city: str, state: str) -> MarketSignals:
        city = city.lower()

        days_on_market = 35
        yoy_change = 2.5
        inventory = InventoryLevel.MEDIUM

        if "downtown" in city or "miami" in city:
            days_on_market = 18
            yoy_change = 4.5
            inventory = InventoryLevel.LOW
        elif "carrollwood" in city or "land o lakes" in city:
            days_on_market = 40
            yoy_change = 2.0
            inventory = InventoryLevel.MEDIUM

        variation = (char_code_checksum(zip) * 7) % 30 - 15  # -15 ~ +14

        return MarketSignals(
            median_days_on_market=max(3, days_on_market + math.floor(variation / 2)),
            yoy_price_change_pct=yoy_change + variation / 10,
            inventory_level=inventory,
        )


class MockCommuteTimeProvider(CommuteTimeProvider):
    """
    Mock 통근 시간
    기준점(탬파 도심)까지 직선거리 기반 추정 + 목적지 체크섬 변동
    """

    REFERENCE_LAT = 27.97
    REFERENCE_LNG = -82.46
    MILES_PER_DEGREE = 69
    MINUTES_PER_MILE = 2  # 평균 30mph 가정
    MIN_MINUTES = 5

    async def get_estimated_minutes(
        self, lat: float, lng: float, destination: str
    ) -> float:
        lat_diff = abs(lat - self.REFERENCE_LAT)
        lng_diff = abs(lng - self.REFERENCE_LNG)
        miles = math.sqrt(lat_diff * lat_diff + lng_diff * lng_diff) * self.MILES_PER_DEGREE

        variation = char_code_checksum(destination) % 20 - 10
        return max(self.MIN_MINUTES, round_half_up(miles * self.MINUTES_PER_MILE + variation))
