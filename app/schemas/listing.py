"""
매물 정보 스키마
Listings Provider가 반환하는 매물 데이터를 구조화합니다.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class PropertyType(str, Enum):
    """주택 유형"""
    SINGLE_FAMILY = "SINGLE_FAMILY"
    TOWNHOME = "TOWNHOME"
    CONDO = "CONDO"


class Listing(BaseModel):
    """
    매물 정보 스키마

    점수화 엔진의 기본 입력입니다. 생성 후 변경되지 않습니다.
    JSON 입출력은 camelCase 필드명을 사용합니다 (addressMasked, hoaMonthly 등).
    """
    model_config = ConfigDict(
        frozen=True,
        use_enum_values=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    # === 식별 정보 ===
    id: UUID = Field(
        description="매물 고유 ID",
        examples=["550e8400-e29b-41d4-a716-446655440000"]
    )
    address_masked: str = Field(
        description="마스킹된 주소",
        examples=["1234 *** St, Land O Lakes, FL"]
    )

    # === 위치 정보 ===
    city: str = Field(examples=["Land O Lakes"])
    state: str = Field(examples=["FL"])
    zip: str = Field(examples=["34639"])
    lat: float = Field(description="위도")
    lng: float = Field(description="경도")

    # === 가격/규모 ===
    price: float = Field(gt=0, description="매매가 (USD)", examples=[450000])
    beds: int = Field(gt=0, description="침실 수")
    baths: float = Field(gt=0, description="욕실 수 (0.5 단위 가능)")
    sqft: float = Field(gt=0, description="실내 면적 (sqft)")
    lot_sqft: Optional[float] = Field(default=None, ge=0, description="대지 면적 (sqft)")
    year_built: Optional[int] = Field(default=None, description="준공연도")
    property_type: PropertyType = Field(description="주택 유형")

    # === 보유 비용 ===
    hoa_monthly: Optional[float] = Field(default=None, ge=0, description="월 HOA")
    taxes_annual_estimate: Optional[float] = Field(
        default=None, ge=0, description="연간 재산세 추정치"
    )
    insurance_annual_estimate: Optional[float] = Field(
        default=None, ge=0, description="연간 보험료 추정치"
    )

    # === 기타 ===
    features: tuple[str, ...] = Field(
        default=(),
        description="특징 태그 (중복 제거)",
        examples=[["garage", "pool", "fenced yard"]]
    )
    photos: tuple[str, ...] = Field(default=())
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("features", mode="before")
    @classmethod
    def _distinct_features(cls, value):
        # 태그는 집합 의미: 첫 등장 순서를 유지하며 중복 제거
        if value is None:
            return ()
        return tuple(dict.fromkeys(value))

    def to_summary(self) -> str:
        """매물 요약 문자열 생성"""
        return (
            f"{self.address_masked} | ${self.price:,.0f} | "
            f"{self.beds}bd/{self.baths:g}ba | {self.sqft:,.0f}sqft"
        )
