"""統計分析模組

提供週氣溫資料的統計分析功能。
"""

from app.analytics.engine import (
    DaySummary,
    RangeExtremes,
    ThresholdMatch,
    date_range_extremes,
    day_of_week_average,
    global_average,
    locality_average,
    locality_names,
    round_temperature,
    threshold_filter,
    weekly_summary,
)

__all__ = [
    "DaySummary",
    "RangeExtremes",
    "ThresholdMatch",
    "date_range_extremes",
    "day_of_week_average",
    "global_average",
    "locality_average",
    "locality_names",
    "round_temperature",
    "threshold_filter",
    "weekly_summary",
]
