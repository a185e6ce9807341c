"""
Real 데이터 제공자
설정된 외부 JSON API를 httpx로 호출합니다.

환경변수:
- LISTINGS_API_BASE_URL / LISTINGS_API_KEY: 매물 API (MLS/RESO 게이트웨이)
- NEIGHBORHOOD_API_BASE_URL / NEIGHBORHOOD_API_KEY: 학군/치안/보행성 API
- MARKET_API_BASE_URL / MARKET_API_KEY: 시장 통계 API
- COMMUTE_API_BASE_URL / COMMUTE_API_KEY: 경로/통근 시간 API
"""

import math
from typing import Any, Optional
from uuid import UUID

import httpx
from loguru import logger
from pydantic import ValidationError

from app.data_sources.base import (
    CommuteTimeProvider,
    ListingsProvider,
    MarketSignalsProvider,
    NeighborhoodSignalsProvider,
    ProviderError,
    ProviderNotConfiguredError,
)
from app.schemas.listing import Listing
from app.schemas.search import UserSearch
from app.schemas.signals import MarketSignals, NeighborhoodSignals


class HttpJsonClient:
    """
    외부 JSON API 공통 클라이언트

    - Bearer 토큰 인증
    - 200 이외 응답은 ProviderError (404는 호출 측 선택에 따라 None)
    - 요청마다 AsyncClient를 열고 닫습니다
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        api_key: str = "",
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.name = name
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport
        self.logger = logger.bind(source=name)

        if not self.base_url:
            self.logger.warning(f"{name} base URL이 없습니다. real 모드 호출 시 실패합니다.")

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def get_json(
        self,
        path: str,
        params: Optional[dict] = None,
        allow_not_found: bool = False,
    ) -> Any:
        if not self.base_url:
            raise ProviderNotConfiguredError(f"{self.name} is not configured")

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.get(path, params=params)
        except httpx.HTTPError as e:
            self.logger.error(f"Request failed: {e}")
            raise ProviderError(f"{self.name} request failed: {e}") from e

        if response.status_code == 404 and allow_not_found:
            return None

        if response.status_code != 200:
            self.logger.error(f"HTTP error: {response.status_code} ({path})")
            raise ProviderError(f"{self.name} returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(f"{self.name} returned invalid JSON") from e


def _validate(model, payload: Any, source: str):
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise ProviderError(f"{source} returned malformed {model.__name__}: {e}") from e


class RealListingsProvider(ListingsProvider):
    """매물 API 연동"""

    def __init__(self, client: HttpJsonClient):
        self.client = client

    async def search(self, search: UserSearch) -> list[Listing]:
        params = {
            "location": search.location_query,
            "minPrice": search.budget_min,
            "maxPrice": search.budget_max,
            "minBeds": search.beds_min,
            "minBaths": search.baths_min,
        }
        if search.must_haves:
            params["features"] = ",".join(search.must_haves)

        data = await self.client.get_json("/listings", params=params)
        items = data.get("listings", []) if isinstance(data, dict) else data
        return [_validate(Listing, item, self.client.name) for item in items]

    async def get_by_id(self, listing_id: UUID) -> Optional[Listing]:
        data = await self.client.get_json(f"/listings/{listing_id}", allow_not_found=True)
        if data is None:
            return None
        return _validate(Listing, data, self.client.name)


class RealNeighborhoodSignalsProvider(NeighborhoodSignalsProvider):
    """학군/치안/보행성 API 연동"""

    def __init__(self, client: HttpJsonClient):
        self.client = client

    async def get_signals(self, zip: str, city: str, state: str) -> NeighborhoodSignals:
        data = await self.client.get_json(
            "/neighborhood", params={"zip": zip, "city": city, "state": state}
        )
        return _validate(NeighborhoodSignals, data, self.client.name)


class RealMarketSignalsProvider(MarketSignalsProvider):
    """시장 통계 API 연동"""

    def __init__(self, client: HttpJsonClient):
        self.client = client

    async def get_signals(self, zip: str, city: str, state: str) -> MarketSignals:
        data = await self.client.get_json(
            "/market", params={"zip": zip, "city": city, "state": state}
        )
        return _validate(MarketSignals, data, self.client.name)


class RealCommuteTimeProvider(CommuteTimeProvider):
    """경로 API 연동"""

    def __init__(self, client: HttpJsonClient):
        self.client = client

    async def get_estimated_minutes(
        self, lat: float, lng: float, destination: str
    ) -> float:
        data = await self.client.get_json(
            "/commute", params={"fromLat": lat, "fromLng": lng, "to": destination}
        )
        try:
            minutes = float(data["minutes"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(f"{self.client.name} returned no commute minutes") from e

        if not math.isfinite(minutes) or minutes < 0:
            raise ProviderError(f"{self.client.name} returned invalid commute minutes: {minutes}")
        return minutes
