"""統計分析引擎

對週氣溫資料集提供統計計算功能，包括：
- 全域平均、地區平均、星期平均（只使用最高溫 max）
- 門檻篩選（嚴格大於 / 小於）
- 日期區間內的最高溫與最低溫
- 地區每日摘要（最高、最低、日均溫）

所有平均值一律四捨五入到小數點後 2 位：
以浮點數的實際二進位值為準，恰好落在中間時遠離零進位，
與 JavaScript 的 toFixed(2) 行為一致。
"""

import logging
import numbers
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

import numpy as np
import pandas as pd

from app.dataset import Dataset
from app.exceptions import InvalidInputError, NoDataError
from app.models import DAYS_PER_WEEK


logger = logging.getLogger(__name__)


# ============================================================================
# 常數定義
# ============================================================================

DECIMAL_PLACES = Decimal("0.01")

CONDITION_ABOVE = "above"
CONDITION_BELOW = "below"

# 外部拼寫（儀表板使用西班牙文）對應到內部條件
CONDITION_ALIASES = {
    CONDITION_ABOVE: CONDITION_ABOVE,
    CONDITION_BELOW: CONDITION_BELOW,
    "mayor": CONDITION_ABOVE,
    "menor": CONDITION_BELOW,
}


# ============================================================================
# 結果資料結構
# ============================================================================


@dataclass(frozen=True)
class ThresholdMatch:
    """門檻篩選的單筆結果"""

    locality: str
    day: Union[str, int]
    max: float


@dataclass(frozen=True)
class RangeExtremes:
    """日期區間內的極值，兩側各自可能不存在"""

    start: date
    end: date
    max_value: Optional[float] = None
    max_locality: Optional[str] = None
    min_value: Optional[float] = None
    min_locality: Optional[str] = None


@dataclass(frozen=True)
class DaySummary:
    """地區單日摘要"""

    day_index: int
    day: Union[str, int]
    max: float
    min: float
    mean: float


# ============================================================================
# 輔助函式
# ============================================================================


def round_temperature(value: float) -> float:
    """四捨五入到小數點後 2 位

    以浮點數的實際二進位值計算，中間值遠離零進位：
    0.125 -> 0.13，-0.125 -> -0.13，1.005 -> 1.0（實際值略小於 1.005）
    """
    return float(Decimal(float(value)).quantize(DECIMAL_PLACES, rounding=ROUND_HALF_UP))


def _mean(values: pd.Series) -> float:
    return round_temperature(values.sum() / len(values))


def parse_day_index(value: Union[int, str]) -> int:
    """驗證星期索引

    Args:
        value: 整數或整數字串，範圍 0-6

    Raises:
        InvalidInputError: 非整數或超出範圍
    """
    if isinstance(value, bool):
        raise InvalidInputError("Día inválido (0-6)")

    if isinstance(value, numbers.Integral):
        index = int(value)
    elif isinstance(value, str):
        try:
            index = int(value.strip())
        except ValueError:
            raise InvalidInputError("Día inválido (0-6)")
    else:
        raise InvalidInputError("Día inválido (0-6)")

    if not 0 <= index < DAYS_PER_WEEK:
        raise InvalidInputError("Día inválido (0-6)")
    return index


def parse_threshold(value: Union[float, str]) -> float:
    """驗證門檻值，必須是有限數值

    Raises:
        InvalidInputError: 非數值、NaN 或無限大
    """
    if isinstance(value, bool) or value is None:
        raise InvalidInputError("Umbral inválido")

    try:
        threshold = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Umbral inválido: {value}")

    if not np.isfinite(threshold):
        raise InvalidInputError(f"Umbral inválido: {value}")
    return threshold


def parse_condition(value: Optional[str]) -> str:
    """將條件標籤轉為內部的 above / below

    Raises:
        InvalidInputError: 無法識別的條件
    """
    condition = CONDITION_ALIASES.get(value) if isinstance(value, str) else None
    if condition is None:
        raise InvalidInputError(f"Condición inválida: {value}")
    return condition


def parse_date(value: Union[date, datetime, str]) -> date:
    """將區間端點解析為日期（YYYY-MM-DD）

    Raises:
        InvalidInputError: 無法解析為日曆日期
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise InvalidInputError(f"Fecha inválida: {value}")


# ============================================================================
# 統計運算
# ============================================================================


def locality_names(dataset: Dataset) -> list[str]:
    """依資料檔順序列出所有地區名稱"""
    return dataset.names()


def global_average(dataset: Dataset) -> float:
    """計算所有地區、所有日期最高溫的平均

    Raises:
        NoDataError: 資料集中沒有任何紀錄
    """
    maxima = dataset.frame["max"]
    if maxima.empty:
        raise NoDataError("No hay temperaturas disponibles")
    return _mean(maxima)


def locality_average(dataset: Dataset, name: str) -> float:
    """計算單一地區一週最高溫的平均

    只以實際存在的紀錄計算。

    Raises:
        NotFoundError: 找不到指定地區
        NoDataError: 該地區沒有任何紀錄
    """
    dataset.find_locality(name)

    frame = dataset.frame
    maxima = frame.loc[frame["locality"] == name, "max"]
    if maxima.empty:
        raise NoDataError(f"No hay temperaturas para {name}")
    return _mean(maxima)


def day_of_week_average(dataset: Dataset, day_index: Union[int, str]) -> float:
    """計算所有地區在指定星期的最高溫平均

    缺少該星期紀錄的地區會被略過。

    Args:
        dataset: 資料集
        day_index: 星期索引，0 = 星期一 ... 6 = 星期日

    Raises:
        InvalidInputError: 索引不是 0-6 的整數
        NoDataError: 沒有任何地區有該星期的紀錄
    """
    index = parse_day_index(day_index)

    frame = dataset.frame
    maxima = frame.loc[frame["day_index"] == index, "max"]
    if maxima.empty:
        raise NoDataError("No hay datos para ese día")
    return _mean(maxima)


def threshold_filter(
    dataset: Dataset, threshold: Union[float, str], condition: str
) -> list[ThresholdMatch]:
    """篩選最高溫嚴格高於或低於門檻的紀錄

    Args:
        dataset: 資料集
        threshold: 門檻值 (°C)
        condition: above / below（或 mayor / menor）

    Returns:
        依地區順序、星期順序排列的符合紀錄，可能為空
    """
    value = parse_threshold(threshold)
    mode = parse_condition(condition)

    frame = dataset.frame
    if mode == CONDITION_ABOVE:
        mask = frame["max"] > value
    else:
        mask = frame["max"] < value

    return [
        ThresholdMatch(locality=row.locality, day=row.day, max=float(row.max))
        for row in frame.loc[mask].itertuples(index=False)
    ]


def date_range_extremes(
    dataset: Dataset,
    start: Union[date, datetime, str],
    end: Union[date, datetime, str],
) -> RangeExtremes:
    """找出日期區間內的最高溫與最低溫

    區間為閉區間；若 start 晚於 end 則自動對調。
    dia 不是日期的紀錄不列入計算。同值時保留掃描順序中的第一筆。

    Returns:
        最高溫（取 max 欄位）與最低溫（取 min 欄位）及所屬地區，
        區間內沒有紀錄時對應欄位為 None
    """
    lower = parse_date(start)
    upper = parse_date(end)
    if lower > upper:
        logger.debug("Rango invertido %s > %s, intercambiando", lower, upper)
        lower, upper = upper, lower

    frame = dataset.frame
    in_range = (frame["date"] >= pd.Timestamp(lower)) & (frame["date"] <= pd.Timestamp(upper))
    window = frame.loc[in_range]

    result = {"start": lower, "end": upper}

    # idxmax / idxmin 同值時回傳第一個出現的索引
    maxima = window["max"]
    if not maxima.empty:
        label = maxima.idxmax()
        result["max_value"] = float(window.at[label, "max"])
        result["max_locality"] = window.at[label, "locality"]

    minima = window["min"]
    if not minima.empty:
        label = minima.idxmin()
        result["min_value"] = float(window.at[label, "min"])
        result["min_locality"] = window.at[label, "locality"]

    return RangeExtremes(**result)


def weekly_summary(dataset: Dataset, name: str) -> list[DaySummary]:
    """地區每日摘要，日均溫 = (max + min) / 2

    Raises:
        NotFoundError: 找不到指定地區
    """
    locality = dataset.find_locality(name)

    return [
        DaySummary(
            day_index=index,
            day=record.day,
            max=record.max,
            min=record.min,
            mean=round_temperature((record.max + record.min) / 2),
        )
        for index, record in enumerate(locality.records)
    ]
