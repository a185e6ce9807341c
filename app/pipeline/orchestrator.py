"""
Scoring Pipeline
외부 신호를 비동기로 수집한 뒤 매물별 점수화를 실행합니다.
"""

import asyncio
from typing import Optional
from uuid import UUID

import httpx
from loguru import logger
from pydantic import BaseModel, Field

from app.data_sources.base import ProviderError
from app.data_sources.factory import ProviderSet
from app.domain.scoring import score_listing
from app.schemas.listing import Listing
from app.schemas.results import ScoreBreakdown
from app.schemas.search import UserSearch
from app.schemas.signals import MarketSignals, NeighborhoodSignals


class ListingSignals(BaseModel):
    """매물 하나에 대한 외부 신호 묶음"""
    neighborhood: NeighborhoodSignals
    market: MarketSignals
    commute_minutes: float


class ScoringReport(BaseModel):
    """파이프라인 출력"""
    listings: list[Listing] = Field(default_factory=list)
    scores: list[ScoreBreakdown] = Field(default_factory=list)
    skipped: list[UUID] = Field(
        default_factory=list,
        description="신호 수집 실패로 제외된 매물 ID"
    )


def rank(scores: list[ScoreBreakdown]) -> list[ScoreBreakdown]:
    """종합 점수 내림차순 정렬 (비교 화면 순서)"""
    return sorted(scores, key=lambda score: score.overall_score, reverse=True)


class ScoringPipeline:
    """
    점수화 파이프라인

    [1] 매물 조회 (ID 목록 또는 검색)
    [2] 매물별 지역/시장/통근 신호 동시 수집
    [3] 점수화 (순수 함수, 매물 간 병렬)

    신호 수집에 실패한 매물은 로그를 남기고 제외합니다. 재시도하지 않습니다.
    """

    def __init__(
        self,
        providers: ProviderSet,
        default_destination: str = "downtown",
    ):
        self.providers = providers
        self.default_destination = default_destination
        self.logger = logger.bind(component="Pipeline")

    async def fetch_signals(self, listing: Listing, search: UserSearch) -> ListingSignals:
        """신호 3종을 동시에 조회"""
        destination = search.commute_to or self.default_destination

        neighborhood, market, commute_minutes = await asyncio.gather(
            self.providers.neighborhood.get_signals(listing.zip, listing.city, listing.state),
            self.providers.market.get_signals(listing.zip, listing.city, listing.state),
            self.providers.commute.get_estimated_minutes(listing.lat, listing.lng, destination),
        )

        return ListingSignals(
            neighborhood=neighborhood,
            market=market,
            commute_minutes=commute_minutes,
        )

    async def score_one(self, listing: Listing, search: UserSearch) -> ScoreBreakdown:
        signals = await self.fetch_signals(listing, search)
        return score_listing(
            listing,
            search,
            signals.neighborhood,
            signals.market,
            signals.commute_minutes,
        )

    async def _score_or_skip(
        self, listing: Listing, search: UserSearch
    ) -> Optional[ScoreBreakdown]:
        # 신호 수집 실패만 제외 처리, 점수화 오류는 그대로 전파
        try:
            signals = await self.fetch_signals(listing, search)
        except (ProviderError, httpx.HTTPError) as e:
            self.logger.warning(f"Signals failed for {listing.id}, skipping: {e}")
            return None

        return score_listing(
            listing,
            search,
            signals.neighborhood,
            signals.market,
            signals.commute_minutes,
        )

    async def score_listings(
        self, listings: list[Listing], search: UserSearch
    ) -> ScoringReport:
        """
        매물 목록 점수화

        Returns:
            ScoringReport: 입력 순서를 유지한 점수 목록과 제외된 매물 ID
        """
        self.logger.info(f"Scoring {len(listings)} listings")

        results = await asyncio.gather(
            *(self._score_or_skip(listing, search) for listing in listings)
        )

        report = ScoringReport(listings=list(listings))
        for listing, result in zip(listings, results):
            if result is None:
                report.skipped.append(listing.id)
            else:
                report.scores.append(result)

        self.logger.info(
            f"Scoring complete: {len(report.scores)} scored, {len(report.skipped)} skipped"
        )
        return report

    async def fetch_listings(self, listing_ids: list[UUID]) -> list[Listing]:
        """ID로 매물 조회 (없는 ID는 제외)"""
        found = await asyncio.gather(
            *(self.providers.listings.get_by_id(listing_id) for listing_id in listing_ids)
        )
        listings = [listing for listing in found if listing is not None]

        if len(listings) < len(listing_ids):
            self.logger.info(f"{len(listing_ids) - len(listings)} listing ids not found")
        return listings

    async def score_by_ids(
        self, listing_ids: list[UUID], search: UserSearch
    ) -> ScoringReport:
        listings = await self.fetch_listings(listing_ids)
        return await self.score_listings(listings, search)

    async def search_and_score(self, search: UserSearch) -> ScoringReport:
        """검색 결과 전체를 점수화하고 종합 점수순으로 정렬"""
        listings = await self.providers.listings.search(search)
        report = await self.score_listings(listings, search)
        report.scores = rank(report.scores)
        return report
