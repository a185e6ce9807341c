"""
API 오류 처리
모든 오류는 {"error": {"code", "message", "details"}} 형식으로 반환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from app.schemas.results import ErrorBody, ErrorDetail


class ApiError(Exception):
    """API 계층 오류 기본 클래스"""
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ApiError):
    """매물/숏리스트 항목 없음"""
    status_code = 404
    code = "NOT_FOUND"


def error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    body = ErrorBody(error=ErrorDetail(code=code, message=message, details=details))
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.info(f"Validation error on {request.url.path}: {len(details)} issue(s)")
    return error_response(400, "VALIDATION_ERROR", "Invalid request", details)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.code, exc.message)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return error_response(500, "INTERNAL_ERROR", "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)
