"""錯誤類型定義

- LoadError: 資料集載入失敗，只在啟動時發生，服務不可繼續啟動
- AggregationError: 單一請求的可恢復錯誤，由 API 層轉為結構化回應
"""


class TemperatureServiceError(Exception):
    """服務所有錯誤的基底類別"""


class LoadError(TemperatureServiceError):
    """資料檔遺失、無法讀取或格式不符"""


class AggregationError(TemperatureServiceError):
    """統計運算的可恢復錯誤"""


class NotFoundError(AggregationError):
    """找不到指定名稱的地區"""


class NoDataError(AggregationError):
    """掃描結果為空，無法計算"""


class InvalidInputError(AggregationError):
    """參數格式錯誤（星期索引、門檻值、條件、日期）"""
