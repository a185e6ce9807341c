"""
검색 조건 스키마
구매자가 입력하는 조건을 구조화합니다.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class RiskTolerance(str, Enum):
    """위험 감수 성향"""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class WeightOverrides(BaseModel):
    """
    사용자 지정 가중치 (부분 입력 가능)

    입력되지 않은 항목은 기본 가중치를 사용합니다.
    합계가 1일 필요는 없습니다 (정규화 단계에서 처리).
    """
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    affordability: Optional[float] = Field(default=None, ge=0, le=1)
    commute: Optional[float] = Field(default=None, ge=0, le=1)
    neighborhood: Optional[float] = Field(default=None, ge=0, le=1)
    property_quality: Optional[float] = Field(default=None, ge=0, le=1)
    market_momentum: Optional[float] = Field(default=None, ge=0, le=1)


class UserSearch(BaseModel):
    """
    검색 조건 스키마

    API 요청 검증 단계에서 구조적 오류는 모두 걸러집니다.
    점수화 엔진은 검증된 값만 받습니다.
    """
    model_config = ConfigDict(
        use_enum_values=True,
        populate_by_name=True,
        alias_generator=to_camel,
        json_schema_extra={
            "example": {
                "locationQuery": "34639",
                "budgetMin": 350000,
                "budgetMax": 500000,
                "bedsMin": 3,
                "bathsMin": 2,
                "mustHaves": ["garage"],
                "commuteTo": "Downtown Tampa",
                "commuteMaxMinutes": 30,
                "riskTolerance": "MEDIUM",
                "weights": {"affordability": 0.4},
            }
        },
    )

    # === 위치 조건 ===
    location_query: str = Field(
        description="우편번호 또는 도시명",
        examples=["34639", "Winter Park"]
    )

    # === 예산 조건 ===
    budget_min: float = Field(ge=0, description="최소 예산 (USD)")
    budget_max: float = Field(gt=0, description="최대 예산 (USD)")

    # === 주택 조건 ===
    beds_min: int = Field(gt=0, description="최소 침실 수")
    baths_min: float = Field(gt=0, description="최소 욕실 수")
    must_haves: list[str] = Field(
        default_factory=list,
        description="필수 특징 태그",
        examples=[["garage", "pool"]]
    )

    # === 통근 조건 ===
    commute_to: Optional[str] = Field(default=None, description="통근 목적지 주소")
    commute_max_minutes: Optional[float] = Field(
        default=None, gt=0, description="최대 통근 시간 (분)"
    )

    # === 성향/가중치 ===
    risk_tolerance: RiskTolerance = Field(default=RiskTolerance.MEDIUM)
    weights: Optional[WeightOverrides] = Field(default=None)

    @model_validator(mode="after")
    def _check_budget_range(self):
        if self.budget_min > self.budget_max:
            raise ValueError("budgetMin must not exceed budgetMax")
        return self
