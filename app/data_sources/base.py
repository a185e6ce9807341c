"""
외부 데이터 제공자 인터페이스
매물/지역/시장/통근 데이터는 모두 이 인터페이스 뒤에서 제공됩니다.
구현체는 mock, real 두 가지입니다.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from app.schemas.listing import Listing
from app.schemas.search import UserSearch
from app.schemas.signals import MarketSignals, NeighborhoodSignals


class ProviderError(Exception):
    """외부 데이터 조회 실패"""
    pass


class ProviderNotConfiguredError(ProviderError):
    """real 모드에 필요한 URL/키가 설정되지 않음"""
    pass


class ListingsProvider(ABC):
    """매물 검색/조회"""

    @abstractmethod
    async def search(self, search: UserSearch) -> list[Listing]:
        pass

    @abstractmethod
    async def get_by_id(self, listing_id: UUID) -> Optional[Listing]:
        """없으면 None"""
        pass


class NeighborhoodSignalsProvider(ABC):
    """학군/치안/보행성"""

    @abstractmethod
    async def get_signals(self, zip: str, city: str, state: str) -> NeighborhoodSignals:
        pass


class MarketSignalsProvider(ABC):
    """시장 동향"""

    @abstractmethod
    async def get_signals(self, zip: str, city: str, state: str) -> MarketSignals:
        pass


class CommuteTimeProvider(ABC):
    """예상 통근 시간 (분)"""

    @abstractmethod
    async def get_estimated_minutes(
        self, lat: float, lng: float, destination: str
    ) -> float:
        pass
