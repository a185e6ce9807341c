"""
파이프라인 패키지
"""

from .orchestrator import ScoringPipeline, ScoringReport, ListingSignals, rank

__all__ = ["ScoringPipeline", "ScoringReport", "ListingSignals", "rank"]
