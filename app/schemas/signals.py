"""
외부 신호 스키마
지역/시장 데이터 제공자가 반환하는 값입니다.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InventoryLevel(str, Enum):
    """매물 재고 수준"""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class NeighborhoodSignals(BaseModel):
    """학군/치안/보행성"""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    school_rating: float = Field(ge=1, le=10, description="학군 평점 (1-10)")
    safety_index: float = Field(ge=1, le=100, description="치안 지수 (1-100)")
    walkability: float = Field(ge=1, le=100, description="보행성 (1-100)")


class MarketSignals(BaseModel):
    """시장 동향"""
    model_config = ConfigDict(
        frozen=True,
        use_enum_values=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    median_days_on_market: float = Field(ge=0, description="중위 판매 소요일")
    yoy_price_change_pct: float = Field(
        description="전년 대비 가격 변동률 (%), 예: 3.5 = +3.5%"
    )
    inventory_level: InventoryLevel
