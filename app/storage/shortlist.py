"""
숏리스트 저장소
점수화된 매물을 파일 기반으로 저장합니다.
"""

from pathlib import Path
from typing import Optional
from uuid import UUID, uuid4

from loguru import logger

from app.schemas.listing import Listing
from app.schemas.results import ScoreBreakdown, ShortlistItem


class ShortlistStore:
    """
    숏리스트 저장소
    - 항목당 JSON 파일 하나
    - 매물/점수는 직렬화된 문자열 그대로 보관
    """

    def __init__(self, store_dir: str = ".data/shortlist"):
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)
        self.logger = logger.bind(source="ShortlistStore")

    def _get_item_path(self, item_id: str) -> Optional[Path]:
        """항목 파일 경로 (UUID 형식이 아니면 None)"""
        try:
            item_id = str(UUID(item_id))
        except ValueError:
            return None
        return self.store_dir / f"{item_id}.json"

    def create(self, listing: Listing, score: ScoreBreakdown) -> ShortlistItem:
        """매물과 점수를 저장하고 생성된 항목을 반환"""
        item = ShortlistItem(
            id=str(uuid4()),
            listing_id=str(listing.id),
            listing_json=listing.model_dump_json(by_alias=True),
            score_json=score.model_dump_json(by_alias=True),
        )

        path = self._get_item_path(item.id)
        with open(path, "w", encoding="utf-8") as f:
            f.write(item.model_dump_json(indent=2))

        self.logger.info(f"Shortlisted {item.listing_id} as {item.id}")
        return item

    def get(self, item_id: str) -> Optional[ShortlistItem]:
        path = self._get_item_path(item_id)
        if path is None or not path.exists():
            return None

        with open(path, "r", encoding="utf-8") as f:
            return ShortlistItem.model_validate_json(f.read())

    def list_items(self) -> list[ShortlistItem]:
        """전체 항목 (최신순)"""
        items = []
        for item_file in self.store_dir.glob("*.json"):
            try:
                with open(item_file, "r", encoding="utf-8") as f:
                    items.append(ShortlistItem.model_validate_json(f.read()))
            except (OSError, ValueError) as e:
                self.logger.warning(f"Unreadable shortlist file {item_file.name}: {e}")

        items.sort(key=lambda item: item.created_at, reverse=True)
        return items

    def delete(self, item_id: str) -> bool:
        """항목 삭제 (없으면 False)"""
        path = self._get_item_path(item_id)
        if path is None or not path.exists():
            return False

        path.unlink()
        self.logger.info(f"Removed shortlist item {item_id}")
        return True

    def clear(self) -> int:
        """전체 삭제"""
        count = 0
        for item_file in self.store_dir.glob("*.json"):
            item_file.unlink()
            count += 1
        self.logger.info(f"Shortlist cleared: {count} items")
        return count

    def get_stats(self) -> dict:
        """저장소 통계"""
        files = list(self.store_dir.glob("*.json"))
        total_size = sum(f.stat().st_size for f in files)

        return {
            "count": len(files),
            "size_kb": round(total_size / 1024, 1),
        }

    @staticmethod
    def load_listing(item: ShortlistItem) -> Listing:
        return Listing.model_validate_json(item.listing_json)

    @staticmethod
    def load_score(item: ShortlistItem) -> ScoreBreakdown:
        return ScoreBreakdown.model_validate_json(item.score_json)
