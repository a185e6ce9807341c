#!/usr/bin/env python
"""
HomeLens 운영 CLI

사용법:
    python scripts/homelens_cli.py rank 34639 350000 500000   # 검색 + 점수순 출력
    python scripts/homelens_cli.py status                     # 숏리스트 상태
    python scripts/homelens_cli.py shortlist                  # 숏리스트 목록
    python scripts/homelens_cli.py show <item_id>             # 숏리스트 항목 상세
    python scripts/homelens_cli.py remove <item_id>           # 숏리스트 항목 삭제
    python scripts/homelens_cli.py clear                      # 숏리스트 전체 삭제
"""

import asyncio
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import settings
from app.data_sources import IntegrationsMode, build_providers
from app.pipeline import ScoringPipeline
from app.schemas.search import UserSearch
from app.storage import ShortlistStore


def get_store() -> ShortlistStore:
    return ShortlistStore(settings.SHORTLIST_PATH)


def cmd_rank(location: str, budget_min: str, budget_max: str):
    """검색 결과를 종합 점수순으로 출력"""
    providers = build_providers(IntegrationsMode(settings.INTEGRATIONS_MODE), settings)
    pipeline = ScoringPipeline(providers, settings.DEFAULT_COMMUTE_DESTINATION)

    search = UserSearch(
        location_query=location,
        budget_min=float(budget_min),
        budget_max=float(budget_max),
        beds_min=1,
        baths_min=1,
    )
    report = asyncio.run(pipeline.search_and_score(search))
    listings = {listing.id: listing for listing in report.listings}

    print("=" * 72)
    print(f"🏠 '{location}' 검색 결과 {len(report.scores)}건")
    print("=" * 72)

    if not report.scores:
        print("  (결과 없음)")
        return

    for score in report.scores:
        listing = listings[score.listing_id]
        print(f"{score.overall_score:>3}  {listing.to_summary()}")
        for reason in score.reasons:
            print(f"       - {reason}")

    if report.skipped:
        print(f"⚠️  신호 수집 실패로 제외: {len(report.skipped)}건")
    print("=" * 72)


def cmd_status():
    """숏리스트 상태 간단히 출력"""
    store = get_store()
    stats = store.get_stats()

    print("=" * 40)
    print("📦 HomeLens 숏리스트 상태")
    print("=" * 40)
    print(f"  저장된 항목: {stats['count']}개")
    print(f"  총 용량: {stats['size_kb']}KB")
    print(f"  저장 위치: {store.store_dir}")
    print("=" * 40)


def cmd_shortlist():
    """숏리스트 목록 출력"""
    store = get_store()
    items = store.list_items()

    if not items:
        print("  (숏리스트 없음)")
        return

    for item in items:
        listing = store.load_listing(item)
        score = store.load_score(item)
        print(
            f"{item.id}  {item.created_at:%Y-%m-%d %H:%M}  "
            f"{score.overall_score:>3}  {listing.address_masked}"
        )


def cmd_show(item_id: str):
    """숏리스트 항목 상세 출력"""
    store = get_store()
    item = store.get(item_id)

    if item is None:
        print(f"❌ 항목을 찾을 수 없음: {item_id}")
        return

    listing = store.load_listing(item)
    score = store.load_score(item)

    print("=" * 72)
    print(f"📌 {listing.to_summary()}")
    print(f"   저장: {item.created_at:%Y-%m-%d %H:%M}")
    print("=" * 72)
    print(f"  종합 점수: {score.overall_score}")
    for name, value in score.factor_scores.items():
        weight = getattr(score.weights, name)
        print(f"  {name:<18} {value:>5.0f}  (가중치 {weight:.2f})")
    for reason in score.reasons:
        print(f"  - {reason}")
    print("=" * 72)


def cmd_remove(item_id: str):
    """숏리스트 항목 삭제"""
    if get_store().delete(item_id):
        print(f"🗑️  {item_id} 삭제됨")
    else:
        print(f"❌ 항목을 찾을 수 없음: {item_id}")


def cmd_clear():
    """숏리스트 전체 삭제"""
    count = get_store().clear()
    print(f"🗑️  숏리스트 {count}개 삭제됨")


def print_help():
    """도움말 출력"""
    print(__doc__)


def main():
    if len(sys.argv) < 2:
        print_help()
        return

    command = sys.argv[1].lower()

    if command == "rank" and len(sys.argv) >= 5:
        cmd_rank(sys.argv[2], sys.argv[3], sys.argv[4])
    elif command == "status":
        cmd_status()
    elif command == "shortlist":
        cmd_shortlist()
    elif command == "show" and len(sys.argv) >= 3:
        cmd_show(sys.argv[2])
    elif command == "remove" and len(sys.argv) >= 3:
        cmd_remove(sys.argv[2])
    elif command == "clear":
        cmd_clear()
    elif command in ["help", "-h", "--help"]:
        print_help()
    else:
        print(f"❌ 알 수 없는 명령: {' '.join(sys.argv[1:])}")
        print_help()


if __name__ == "__main__":
    main()
