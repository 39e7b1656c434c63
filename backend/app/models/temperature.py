"""週氣溫資料模型

定義資料檔中的地區與每日溫度紀錄，載入時即驗證結構：
- 每個地區恰好 7 筆紀錄（索引 0 = 星期一 ... 6 = 星期日）
- 地區名稱不可重複
- max / min 以文字儲存，載入時轉為有限浮點數
- 若 dia 為日期，其星期必須與索引一致
"""

from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


DAYS_PER_WEEK = 7

# 星期名稱，索引 0 為星期一
DAY_NAMES = ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo")


def parse_record_date(day: Union[str, int]) -> Optional[date]:
    """將紀錄的 dia 欄位解析為日期

    Args:
        day: 日期字串（ISO 8601）或星期標籤

    Returns:
        解析成功的日期，非日期標籤則返回 None
    """
    if not isinstance(day, str):
        return None

    text = day.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


class DailyRecord(BaseModel):
    """單日溫度紀錄"""

    day: Union[str, int] = Field(..., alias="dia", description="日期或星期標籤")
    max: float = Field(..., allow_inf_nan=False, description="最高溫 (°C)")
    min: float = Field(..., allow_inf_nan=False, description="最低溫 (°C)")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("max", "min", mode="before")
    @classmethod
    def parse_temperature(cls, value):
        # 資料檔以文字儲存溫度，如 "31.2"
        if isinstance(value, bool):
            raise ValueError("溫度不可為布林值")
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("溫度不可為空字串")
        return value


class Locality(BaseModel):
    """地區及其一週的溫度紀錄"""

    name: str = Field(..., alias="nombre", min_length=1, description="地區名稱")
    records: tuple[DailyRecord, ...] = Field(
        ...,
        alias="temperaturas",
        min_length=DAYS_PER_WEEK,
        max_length=DAYS_PER_WEEK,
        description="星期一到星期日的溫度紀錄",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="after")
    def check_weekdays(self) -> "Locality":
        for index, record in enumerate(self.records):
            parsed = parse_record_date(record.day)
            if parsed is not None and parsed.weekday() != index:
                raise ValueError(
                    f"{self.name}: el día {record.day} no es {DAY_NAMES[index]}"
                )
        return self


class DatasetFile(BaseModel):
    """資料檔的最外層結構"""

    localities: tuple[Locality, ...] = Field(..., alias="localidades", description="所有地區")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="after")
    def check_unique_names(self) -> "DatasetFile":
        seen = set()
        for locality in self.localities:
            if locality.name in seen:
                raise ValueError(f"Localidad duplicada: {locality.name}")
            seen.add(locality.name)
        return self
