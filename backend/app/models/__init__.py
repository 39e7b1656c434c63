"""資料模型模組

包含週氣溫資料檔的 Pydantic 模型定義。
"""

from app.models.temperature import (
    DAY_NAMES,
    DAYS_PER_WEEK,
    DailyRecord,
    DatasetFile,
    Locality,
    parse_record_date,
)

__all__ = [
    "DAY_NAMES",
    "DAYS_PER_WEEK",
    "DailyRecord",
    "DatasetFile",
    "Locality",
    "parse_record_date",
]
