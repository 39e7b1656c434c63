# backend/app/api/v1/temperature.py
"""氣溫查詢 API 路由"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.analytics import engine
from app.dataset import Dataset, get_dataset
from app.models import DAY_NAMES, DatasetFile
from app.schemas.temperature import (
    ApiResponse,
    AverageResponse,
    DaySummaryInfo,
    LocalitiesResponse,
    RangeExtremesResponse,
    ThresholdMatchInfo,
    ThresholdResponse,
    WeeklySummaryResponse,
)

router = APIRouter()


@router.get(
    "/datos",
    response_model=ApiResponse[DatasetFile],
    summary="取得完整資料集",
    description="回傳啟動時載入的所有地區與每日溫度紀錄",
)
async def get_datos(
    dataset: Dataset = Depends(get_dataset),
) -> ApiResponse[DatasetFile]:
    return ApiResponse(success=True, data=dataset.to_model())


@router.get(
    "/localidades",
    response_model=ApiResponse[LocalitiesResponse],
    summary="列出所有地區",
)
async def list_localidades(
    dataset: Dataset = Depends(get_dataset),
) -> ApiResponse[LocalitiesResponse]:
    return ApiResponse(
        success=True,
        data=LocalitiesResponse(localidades=engine.locality_names(dataset)),
    )


@router.get(
    "/media-global",
    response_model=ApiResponse[AverageResponse],
    summary="全域最高溫平均",
    description="所有地區、所有日期最高溫的平均",
)
async def get_media_global(
    dataset: Dataset = Depends(get_dataset),
) -> ApiResponse[AverageResponse]:
    """全域最高溫平均

    Raises:
        404: 資料集中沒有任何紀錄
    """
    return ApiResponse(
        success=True,
        data=AverageResponse(media=engine.global_average(dataset)),
    )


@router.get(
    "/media-localidad/{nombre}",
    response_model=ApiResponse[AverageResponse],
    summary="地區最高溫平均",
)
async def get_media_localidad(
    nombre: str,
    dataset: Dataset = Depends(get_dataset),
) -> ApiResponse[AverageResponse]:
    """地區最高溫平均

    Args:
        nombre: 地區名稱（路徑參數已由框架解碼）
        dataset: 資料集

    Raises:
        404: 找不到指定地區
    """
    return ApiResponse(
        success=True,
        data=AverageResponse(media=engine.locality_average(dataset, nombre)),
    )


@router.get(
    "/media-dia/{dia}",
    response_model=ApiResponse[AverageResponse],
    summary="星期最高溫平均",
    description="所有地區在指定星期（0 = 星期一 ... 6 = 星期日）的最高溫平均",
)
async def get_media_dia(
    dia: str,
    dataset: Dataset = Depends(get_dataset),
) -> ApiResponse[AverageResponse]:
    """星期最高溫平均

    Raises:
        400: 星期索引不是 0-6 的整數
        404: 沒有該星期的資料
    """
    return ApiResponse(
        success=True,
        data=AverageResponse(media=engine.day_of_week_average(dataset, dia)),
    )


@router.get(
    "/filtro-umbral",
    response_model=ApiResponse[ThresholdResponse],
    summary="門檻篩選",
    description="篩選最高溫嚴格高於（mayor）或低於（menor）門檻的紀錄",
)
async def get_filtro_umbral(
    umbral: Optional[str] = Query(None, description="門檻溫度 (°C)"),
    condicion: Optional[str] = Query(None, description="mayor / menor"),
    dataset: Dataset = Depends(get_dataset),
) -> ApiResponse[ThresholdResponse]:
    """門檻篩選

    Raises:
        400: 門檻值不是有限數值或條件無法識別
    """
    matches = engine.threshold_filter(dataset, umbral, condicion)

    return ApiResponse(
        success=True,
        data=ThresholdResponse(
            resultados=[
                ThresholdMatchInfo(localidad=m.locality, dia=m.day, max=m.max)
                for m in matches
            ]
        ),
    )


@router.get(
    "/resumen-semanal/{nombre}",
    response_model=ApiResponse[WeeklySummaryResponse],
    summary="地區週摘要",
    description="地區每日最高溫、最低溫與日均溫",
)
async def get_resumen_semanal(
    nombre: str,
    dataset: Dataset = Depends(get_dataset),
) -> ApiResponse[WeeklySummaryResponse]:
    """地區週摘要

    Raises:
        404: 找不到指定地區
    """
    summary = engine.weekly_summary(dataset, nombre)

    return ApiResponse(
        success=True,
        data=WeeklySummaryResponse(
            localidad=nombre,
            dias=[
                DaySummaryInfo(
                    indice=s.day_index,
                    nombre=DAY_NAMES[s.day_index],
                    dia=s.day,
                    max=s.max,
                    min=s.min,
                    media=s.mean,
                )
                for s in summary
            ],
        ),
    )


@router.get(
    "/analisis",
    response_model=ApiResponse[RangeExtremesResponse],
    summary="日期區間極值",
    description="區間內的最高溫與最低溫及所在地區；起訖順序顛倒時自動對調",
)
async def get_analisis(
    inicio: str = Query(..., description="起始日期 (YYYY-MM-DD)", examples=["2024-06-03"]),
    fin: str = Query(..., description="結束日期 (YYYY-MM-DD)", examples=["2024-06-09"]),
    dataset: Dataset = Depends(get_dataset),
) -> ApiResponse[RangeExtremesResponse]:
    """日期區間極值

    Raises:
        400: 日期格式錯誤
    """
    extremes = engine.date_range_extremes(dataset, inicio, fin)

    return ApiResponse(
        success=True,
        data=RangeExtremesResponse(
            inicio=extremes.start,
            fin=extremes.end,
            max=extremes.max_value,
            localidad_max=extremes.max_locality,
            min=extremes.min_value,
            localidad_min=extremes.min_locality,
        ),
    )
