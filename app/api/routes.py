"""
HomeLens API 라우터
요청 검증 후 파이프라인/저장소를 호출하는 얇은 계층입니다.
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.api.dependencies import get_pipeline, get_shortlist_store
from app.api.errors import NotFoundError
from app.pipeline import ScoringPipeline
from app.schemas.listing import Listing
from app.schemas.results import ScoreBreakdown, ShortlistItem
from app.schemas.search import UserSearch
from app.storage import ShortlistStore

router = APIRouter()


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class ScoreRequest(_CamelModel):
    """점수화 요청"""
    listing_ids: list[UUID]
    search: UserSearch


class AddToShortlistRequest(_CamelModel):
    """숏리스트 추가 요청"""
    listing_id: UUID
    search: UserSearch


class SearchResponse(_CamelModel):
    listings: list[Listing]


class ScoreResponse(_CamelModel):
    listings: list[Listing]
    scores: list[ScoreBreakdown]


class ShortlistResponse(_CamelModel):
    items: list[ShortlistItem]


class ShortlistCreatedResponse(_CamelModel):
    shortlist: ShortlistItem


class DeleteResponse(_CamelModel):
    success: bool


@router.post("/search", response_model=SearchResponse)
async def search_listings(
    search: UserSearch,
    pipeline: ScoringPipeline = Depends(get_pipeline),
) -> SearchResponse:
    """조건에 맞는 매물 검색"""
    listings = await pipeline.providers.listings.search(search)
    return SearchResponse(listings=listings)


@router.post("/score", response_model=ScoreResponse)
async def score_listings(
    request: ScoreRequest,
    pipeline: ScoringPipeline = Depends(get_pipeline),
) -> ScoreResponse:
    """
    매물 점수화

    - 없는 ID는 결과에서 제외
    - 신호 수집에 실패한 매물은 점수 목록에서 제외
    """
    report = await pipeline.score_by_ids(request.listing_ids, request.search)
    return ScoreResponse(listings=report.listings, scores=report.scores)


@router.get("/shortlist", response_model=ShortlistResponse)
async def get_shortlist(
    store: ShortlistStore = Depends(get_shortlist_store),
) -> ShortlistResponse:
    """숏리스트 조회 (최신순)"""
    return ShortlistResponse(items=store.list_items())


@router.post("/shortlist", response_model=ShortlistCreatedResponse)
async def add_to_shortlist(
    request: AddToShortlistRequest,
    pipeline: ScoringPipeline = Depends(get_pipeline),
    store: ShortlistStore = Depends(get_shortlist_store),
) -> ShortlistCreatedResponse:
    """매물을 점수화해서 숏리스트에 저장"""
    listing = await pipeline.providers.listings.get_by_id(request.listing_id)
    if listing is None:
        raise NotFoundError("Listing not found")

    score = await pipeline.score_one(listing, request.search)
    return ShortlistCreatedResponse(shortlist=store.create(listing, score))


@router.delete("/shortlist/{item_id}", response_model=DeleteResponse)
async def delete_shortlist_item(
    item_id: str,
    store: ShortlistStore = Depends(get_shortlist_store),
) -> DeleteResponse:
    """숏리스트 항목 삭제"""
    if not store.delete(item_id):
        raise NotFoundError("Shortlist item not found")
    return DeleteResponse(success=True)


@router.get("/schema/search")
async def get_search_schema():
    """검색 조건 스키마 조회"""
    return UserSearch.model_json_schema(by_alias=True)


@router.get("/schema/score")
async def get_score_schema():
    """점수 결과 스키마 조회"""
    return ScoreBreakdown.model_json_schema(by_alias=True)
