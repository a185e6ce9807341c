"""
데이터 소스 모듈
"""

from .base import (
    ListingsProvider,
    NeighborhoodSignalsProvider,
    MarketSignalsProvider,
    CommuteTimeProvider,
    ProviderError,
    ProviderNotConfiguredError,
)
from .mock import (
    MockListingsProvider,
    MockNeighborhoodSignalsProvider,
    MockMarketSignalsProvider,
    MockCommuteTimeProvider,
)
from .real import (
    HttpJsonClient,
    RealListingsProvider,
    RealNeighborhoodSignalsProvider,
    RealMarketSignalsProvider,
    RealCommuteTimeProvider,
)
from .factory import IntegrationsMode, ProviderSet, build_providers
from .seed import SEED_LISTINGS

__all__ = [
    "ListingsProvider",
    "NeighborhoodSignalsProvider",
    "MarketSignalsProvider",
    "CommuteTimeProvider",
    "ProviderError",
    "ProviderNotConfiguredError",
    "MockListingsProvider",
    "MockNeighborhoodSignalsProvider",
    "MockMarketSignalsProvider",
    "MockCommuteTimeProvider",
    "HttpJsonClient",
    "RealListingsProvider",
    "RealNeighborhoodSignalsProvider",
    "RealMarketSignalsProvider",
    "RealCommuteTimeProvider",
    "IntegrationsMode",
    "ProviderSet",
    "build_providers",
    "SEED_LISTINGS",
]
