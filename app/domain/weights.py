"""
가중치 정규화
사용자 지정 가중치를 기본값에 병합하고 합계 1로 맞춥니다.
"""

from typing import Optional, Union

from app.schemas.results import FACTOR_ORDER, WEIGHT_SUM_TOLERANCE, WeightVector
from app.schemas.search import WeightOverrides

DEFAULT_WEIGHTS = WeightVector(
    affordability=0.25,
    commute=0.20,
    neighborhood=0.25,
    property_quality=0.20,
    market_momentum=0.10,
)


def _check_default_weights() -> None:
    # 모듈 로드 시점에 한 번만 검사
    total = DEFAULT_WEIGHTS.total()
    if abs(total - 1) > WEIGHT_SUM_TOLERANCE:
        raise ValueError(f"DEFAULT_WEIGHTS must sum to 1 (got {total})")


_check_default_weights()


def normalize_weights(
    overrides: Optional[Union[WeightOverrides, dict]] = None,
) -> WeightVector:
    """
    부분 가중치를 정규화합니다.

    Args:
        overrides: 일부 요인만 지정한 가중치 (None 가능)

    Returns:
        WeightVector: 합계 1인 가중치. 병합 결과 합계가 0이면 기본값
    """
    if overrides is None:
        partial = {}
    else:
        if isinstance(overrides, dict):
            overrides = WeightOverrides.model_validate(overrides)
        partial = overrides.model_dump(exclude_none=True)

    merged = {name: partial.get(name, getattr(DEFAULT_WEIGHTS, name)) for name in FACTOR_ORDER}
    total = sum(merged.values())

    if total == 0:
        return DEFAULT_WEIGHTS

    return WeightVector(**{name: value / total for name, value in merged.items()})
