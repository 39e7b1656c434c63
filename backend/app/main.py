# backend/app/main.py
"""FastAPI 應用程式入口"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.v1 import temperature
from app.config import configure_logging, settings
from app.dataset import load_dataset
from app.exceptions import AggregationError, InvalidInputError, NoDataError, NotFoundError
from app.schemas.temperature import ApiResponse

VERSION = "0.1.0"

# 錯誤類型對應的 HTTP 狀態碼
ERROR_STATUS_CODES = {
    NotFoundError: 404,
    NoDataError: 404,
    InvalidInputError: 400,
}

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="週氣溫資料統計 API",
    version=VERSION,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup():
    """應用程式啟動時載入資料集，失敗則中止啟動"""
    try:
        app.state.dataset = load_dataset(settings.data_file)
    except Exception:
        logger.exception("Error al cargar %s", settings.data_file)
        raise


@app.exception_handler(AggregationError)
async def aggregation_error_handler(request: Request, exc: AggregationError) -> JSONResponse:
    """將統計錯誤轉為統一的回應格式"""
    status_code = ERROR_STATUS_CODES.get(type(exc), 400)
    logger.info("%s %s -> %d: %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(success=False, error=str(exc)).model_dump(),
    )


@app.get("/health")
async def health_check():
    """健康檢查端點"""
    return {"status": "ok", "version": VERSION}


# 註冊 API 路由
app.include_router(
    temperature.router,
    prefix="/api",
    tags=["temperaturas"]
)

# 儀表板靜態檔案，需在 API 路由之後掛載
if settings.static_dir.is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
