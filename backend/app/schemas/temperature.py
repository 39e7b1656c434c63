# backend/app/schemas/temperature.py
"""氣溫 API Pydantic Schema 定義"""

from datetime import date
from typing import Generic, Optional, TypeVar, Union

from pydantic import BaseModel, Field

T = TypeVar("T")


class LocalitiesResponse(BaseModel):
    """地區列表回應"""

    localidades: list[str] = Field(..., description="依資料檔順序排列的地區名稱")


class AverageResponse(BaseModel):
    """平均值回應"""

    media: float = Field(..., description="最高溫平均 (°C)，小數點後 2 位")

    class Config:
        json_schema_extra = {
            "example": {
                "media": 29.38
            }
        }


class ThresholdMatchInfo(BaseModel):
    """門檻篩選單筆結果"""

    localidad: str = Field(..., description="地區名稱")
    dia: Union[str, int] = Field(..., description="日期或星期標籤")
    max: float = Field(..., description="最高溫 (°C)")


class ThresholdResponse(BaseModel):
    """門檻篩選回應"""

    resultados: list[ThresholdMatchInfo] = Field(..., description="符合條件的紀錄")


class DaySummaryInfo(BaseModel):
    """單日摘要"""

    indice: int = Field(..., ge=0, le=6, description="星期索引 (0 = 星期一)")
    nombre: str = Field(..., description="星期名稱")
    dia: Union[str, int] = Field(..., description="日期或星期標籤")
    max: float = Field(..., description="最高溫 (°C)")
    min: float = Field(..., description="最低溫 (°C)")
    media: float = Field(..., description="日均溫 (max + min) / 2 (°C)")


class WeeklySummaryResponse(BaseModel):
    """地區週摘要回應"""

    localidad: str = Field(..., description="地區名稱")
    dias: list[DaySummaryInfo] = Field(..., description="星期一到星期日的摘要")


class RangeExtremesResponse(BaseModel):
    """日期區間極值回應"""

    inicio: date = Field(..., description="區間起始日（已排序）")
    fin: date = Field(..., description="區間結束日（已排序）")
    max: Optional[float] = Field(None, description="區間內最高溫 (°C)")
    localidad_max: Optional[str] = Field(None, description="最高溫所在地區")
    min: Optional[float] = Field(None, description="區間內最低溫 (°C)")
    localidad_min: Optional[str] = Field(None, description="最低溫所在地區")


class ApiResponse(BaseModel, Generic[T]):
    """API 回應包裝"""

    success: bool = Field(True, description="請求是否成功")
    data: Optional[T] = Field(None, description="回應資料")
    error: Optional[str] = Field(None, description="錯誤訊息")

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "data": {},
                "error": None
            }
        }
