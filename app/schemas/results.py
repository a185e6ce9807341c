"""
결과 스키마
점수화 엔진과 숏리스트의 출력 결과를 정의합니다.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# 가중치 합계 허용 오차
WEIGHT_SUM_TOLERANCE = 1e-6

# 요인 순서 (동점 시 이 순서가 우선)
FACTOR_ORDER = (
    "affordability",
    "commute",
    "neighborhood",
    "property_quality",
    "market_momentum",
)


class WeightVector(BaseModel):
    """요인별 가중치 (정규화 후 합계 1)"""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    affordability: float = Field(ge=0)
    commute: float = Field(ge=0)
    neighborhood: float = Field(ge=0)
    property_quality: float = Field(ge=0)
    market_momentum: float = Field(ge=0)

    def total(self) -> float:
        return sum(getattr(self, name) for name in FACTOR_ORDER)


class FactorScores(BaseModel):
    """요인별 점수 (각 0-100)"""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    affordability: float = Field(ge=0, le=100)
    commute: float = Field(ge=0, le=100)
    neighborhood: float = Field(ge=0, le=100)
    property_quality: float = Field(ge=0, le=100)
    market_momentum: float = Field(ge=0, le=100)

    def items(self) -> list[tuple[str, float]]:
        """(요인명, 점수) 목록 - FACTOR_ORDER 순서"""
        return [(name, getattr(self, name)) for name in FACTOR_ORDER]


class ScoreBreakdown(BaseModel):
    """
    점수화 결과

    (매물, 검색조건, 신호) 조합마다 한 번 생성되며 이후 변경되지 않습니다.
    API 응답과 숏리스트 저장에 그대로 사용됩니다.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    listing_id: UUID
    affordability_score: float = Field(ge=0, le=100)
    commute_score: float = Field(ge=0, le=100)
    neighborhood_score: float = Field(ge=0, le=100)
    property_quality_score: float = Field(ge=0, le=100)
    market_momentum_score: float = Field(ge=0, le=100)
    overall_score: int = Field(ge=0, le=100, description="종합 점수")
    reasons: list[str] = Field(min_length=3, max_length=3, description="상위 3개 근거")
    weights: WeightVector = Field(description="실제 적용된 가중치")

    @model_validator(mode="after")
    def _check_invariants(self):
        if any(not reason for reason in self.reasons):
            raise ValueError("reasons must be non-empty strings")
        if abs(self.weights.total() - 1) > WEIGHT_SUM_TOLERANCE:
            raise ValueError("weights must sum to 1")
        return self

    @property
    def factor_scores(self) -> FactorScores:
        return FactorScores(
            affordability=self.affordability_score,
            commute=self.commute_score,
            neighborhood=self.neighborhood_score,
            property_quality=self.property_quality_score,
            market_momentum=self.market_momentum_score,
        )


class ShortlistItem(BaseModel):
    """
    숏리스트 항목
    매물과 점수는 직렬화된 JSON 문자열로 그대로 보관합니다.
    """
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: str = Field(description="생성된 항목 ID")
    listing_id: str
    listing_json: str
    score_json: str
    created_at: datetime = Field(default_factory=datetime.now)


class ErrorDetail(BaseModel):
    """API 오류 본문"""
    code: str = Field(examples=["VALIDATION_ERROR", "NOT_FOUND", "INTERNAL_ERROR"])
    message: str
    details: Optional[list] = None


class ErrorBody(BaseModel):
    """API 오류 응답"""
    error: ErrorDetail
