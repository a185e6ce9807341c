"""
저장소 모듈
"""

from .shortlist import ShortlistStore

__all__ = ["ShortlistStore"]
