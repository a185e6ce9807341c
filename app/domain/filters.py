"""
필터 엔진
검색 조건으로 매물을 걸러냅니다 (Mock 매물 검색에서 사용).
"""

from typing import Callable

from loguru import logger

from app.schemas.listing import Listing
from app.schemas.search import UserSearch


class ListingFilter:
    """
    규칙 기반 매물 필터

    모든 조건을 통과해야 검색 결과에 포함됩니다.
    실패한 조건은 사유와 함께 반환합니다.
    """

    def __init__(self):
        # 필터 함수 레지스트리: 조건명 -> 체크함수
        self._filters: dict[str, Callable[[Listing, UserSearch], tuple[bool, str]]] = {
            "budget": self._check_budget,
            "beds_baths": self._check_beds_baths,
            "location": self._check_location,
            "must_haves": self._check_must_haves,
        }

    def failures(self, listing: Listing, search: UserSearch) -> dict[str, str]:
        """
        실패한 조건과 사유를 반환합니다.

        Returns:
            dict[str, str]: 조건명 -> 사유 (모두 통과하면 빈 dict)
        """
        failed = {}
        for name, check_func in self._filters.items():
            is_pass, reason = check_func(listing, search)
            if not is_pass:
                failed[name] = reason

        if failed:
            logger.debug(f"Filtered out {listing.id}: {', '.join(failed)}")
        return failed

    def matches(self, listing: Listing, search: UserSearch) -> bool:
        return not self.failures(listing, search)

    def apply(self, listings: list[Listing], search: UserSearch) -> list[Listing]:
        """조건을 모두 통과한 매물만 반환"""
        return [listing for listing in listings if self.matches(listing, search)]

    # === 개별 필터 함수들 ===

    def _check_budget(
        self, listing: Listing, search: UserSearch
    ) -> tuple[bool, str]:
        if search.budget_min <= listing.price <= search.budget_max:
            return True, ""
        return False, (
            f"price ${listing.price:,.0f} outside "
            f"${search.budget_min:,.0f}-${search.budget_max:,.0f}"
        )

    def _check_beds_baths(
        self, listing: Listing, search: UserSearch
    ) -> tuple[bool, str]:
        if listing.beds < search.beds_min:
            return False, f"{listing.beds} beds < {search.beds_min}"
        if listing.baths < search.baths_min:
            return False, f"{listing.baths:g} baths < {search.baths_min:g}"
        return True, ""

    def _check_location(
        self, listing: Listing, search: UserSearch
    ) -> tuple[bool, str]:
        # 우편번호 일치 또는 도시명 부분 일치
        query = search.location_query
        if listing.zip == query or query.lower() in listing.city.lower():
            return True, ""
        return False, f"{listing.city} {listing.zip} does not match '{query}'"

    def _check_must_haves(
        self, listing: Listing, search: UserSearch
    ) -> tuple[bool, str]:
        features = {feature.lower() for feature in listing.features}
        missing = [must for must in search.must_haves if must.lower() not in features]
        if missing:
            return False, f"missing {', '.join(missing)}"
        return True, ""
