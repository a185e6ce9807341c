"""
데이터 제공자 선택
연동 모드(mock/real)를 주입받아 제공자 묶음을 생성합니다.
비즈니스 로직은 환경변수를 직접 읽지 않습니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import httpx
from loguru import logger

from app.config import Settings
from app.data_sources.base import (
    CommuteTimeProvider,
    ListingsProvider,
    MarketSignalsProvider,
    NeighborhoodSignalsProvider,
)
from app.data_sources.mock import (
    MockCommuteTimeProvider,
    MockListingsProvider,
    MockMarketSignalsProvider,
    MockNeighborhoodSignalsProvider,
)
from app.data_sources.real import (
    HttpJsonClient,
    RealCommuteTimeProvider,
    RealListingsProvider,
    RealMarketSignalsProvider,
    RealNeighborhoodSignalsProvider,
)


class IntegrationsMode(str, Enum):
    """연동 모드"""
    MOCK = "mock"
    REAL = "real"


@dataclass(frozen=True)
class ProviderSet:
    """파이프라인이 사용하는 제공자 묶음"""
    listings: ListingsProvider
    neighborhood: NeighborhoodSignalsProvider
    market: MarketSignalsProvider
    commute: CommuteTimeProvider


def build_providers(
    mode: IntegrationsMode,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ProviderSet:
    """
    연동 모드에 맞는 제공자 묶음을 생성합니다.

    Args:
        mode: mock 또는 real
        settings: URL/키/타임아웃 등 설정
        transport: real 모드 httpx 전송 계층 (테스트용)
    """
    mode = IntegrationsMode(mode)
    logger.info(f"Building providers (mode={mode.value})")

    if mode is IntegrationsMode.MOCK:
        return ProviderSet(
            listings=MockListingsProvider(limit=settings.MOCK_SEARCH_LIMIT),
            neighborhood=MockNeighborhoodSignalsProvider(),
            market=MockMarketSignalsProvider(),
            commute=MockCommuteTimeProvider(),
        )

    def client(name: str, base_url: str, api_key: str) -> HttpJsonClient:
        return HttpJsonClient(
            name=name,
            base_url=base_url,
            api_key=api_key,
            timeout=settings.PROVIDER_TIMEOUT,
            transport=transport,
        )

    return ProviderSet(
        listings=RealListingsProvider(
            client("ListingsAPI", settings.LISTINGS_API_BASE_URL, settings.LISTINGS_API_KEY)
        ),
        neighborhood=RealNeighborhoodSignalsProvider(
            client(
                "NeighborhoodAPI",
                settings.NEIGHBORHOOD_API_BASE_URL,
                settings.NEIGHBORHOOD_API_KEY,
            )
        ),
        market=RealMarketSignalsProvider(
            client("MarketAPI", settings.MARKET_API_BASE_URL, settings.MARKET_API_KEY)
        ),
        commute=RealCommuteTimeProvider(
            client("CommuteAPI", settings.COMMUTE_API_BASE_URL, settings.COMMUTE_API_KEY)
        ),
    )
