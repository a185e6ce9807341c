"""
HomeLens FastAPI 메인
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.routes import router
from app.config import settings
from app.logging_config import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="HomeLens",
    description="구매 조건 기반 매물 점수화 API",
    version="0.1.0",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 프로덕션에서는 제한 필요
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# 라우터 등록
app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """헬스 체크"""
    return {
        "name": "HomeLens",
        "status": "running",
        "version": "0.1.0",
    }


@app.get("/health")
async def health():
    """상세 헬스 체크"""
    return {
        "status": "healthy",
        "integrations_mode": settings.INTEGRATIONS_MODE,
    }
