"""
FastAPI 의존성
연동 모드는 설정에서 한 번 읽어 제공자 생성 시 주입합니다.
"""

from functools import lru_cache

from fastapi import Depends

from app.config import settings
from app.data_sources.factory import IntegrationsMode, ProviderSet, build_providers
from app.pipeline import ScoringPipeline
from app.storage import ShortlistStore


@lru_cache
def get_providers() -> ProviderSet:
    return build_providers(IntegrationsMode(settings.INTEGRATIONS_MODE), settings)


def get_pipeline(providers: ProviderSet = Depends(get_providers)) -> ScoringPipeline:
    return ScoringPipeline(
        providers,
        default_destination=settings.DEFAULT_COMMUTE_DESTINATION,
    )


@lru_cache
def get_shortlist_store() -> ShortlistStore:
    return ShortlistStore(settings.SHORTLIST_PATH)
