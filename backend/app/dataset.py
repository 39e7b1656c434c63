# backend/app/dataset.py
"""資料集存取

啟動時從 JSON 檔一次載入週氣溫資料，之後只讀不寫，
多個請求可同時讀取而不需加鎖。
"""

import json
import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

import pandas as pd
from fastapi import Request
from pydantic import ValidationError

from app.exceptions import LoadError, NotFoundError
from app.models import DatasetFile, Locality, parse_record_date


logger = logging.getLogger(__name__)

# DataFrame 欄位：每筆每日紀錄一列，依地區順序、星期順序排列
FRAME_COLUMNS = ["locality", "day_index", "day", "date", "max", "min"]


def _build_frame(localities: Sequence[Locality]) -> pd.DataFrame:
    """將地區紀錄攤平成掃描順序的 DataFrame"""
    rows = [
        {
            "locality": locality.name,
            "day_index": index,
            "day": record.day,
            "date": parse_record_date(record.day),
            "max": record.max,
            "min": record.min,
        }
        for locality in localities
        for index, record in enumerate(locality.records)
    ]
    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    frame = frame.astype({"day_index": "int64", "max": "float64", "min": "float64"})
    # 非日期標籤轉為 NaT，區間比較時自然被排除
    frame["date"] = pd.to_datetime(frame["date"].astype(object))
    return frame


class Dataset:
    """不可變的週氣溫資料集

    Attributes:
        localities: 依資料檔順序排列的地區
        source: 資料來源檔案路徑（測試資料為 None）
    """

    def __init__(self, localities: Sequence[Locality], source: Optional[Path] = None):
        self._localities = tuple(localities)
        self._by_name = {locality.name: locality for locality in self._localities}
        self._frame = _build_frame(self._localities)
        self.source = source

    @classmethod
    def from_dict(cls, payload: object, source: Optional[Path] = None) -> "Dataset":
        """從已解析的 JSON 建立資料集

        Args:
            payload: json.loads 的結果
            source: 資料來源路徑，僅供記錄

        Returns:
            驗證後的資料集

        Raises:
            LoadError: 結構不符合資料模型
        """
        try:
            model = DatasetFile.model_validate(payload)
        except ValidationError as e:
            raise LoadError(f"Formato de datos inválido: {e}") from e

        for locality in model.localities:
            for record in locality.records:
                if record.max < record.min:
                    logger.warning(
                        "%s %s: max %.2f < min %.2f",
                        locality.name, record.day, record.max, record.min,
                    )

        return cls(model.localities, source=source)

    @property
    def localities(self) -> tuple[Locality, ...]:
        return self._localities

    @property
    def frame(self) -> pd.DataFrame:
        """統計引擎使用的內部 DataFrame（唯讀，請勿修改）"""
        return self._frame

    def get_all(self) -> "Dataset":
        return self

    def names(self) -> list[str]:
        return [locality.name for locality in self._localities]

    def find_locality(self, name: str) -> Locality:
        """依名稱查詢地區（完全比對，區分大小寫）

        Raises:
            NotFoundError: 找不到指定地區
        """
        locality = self._by_name.get(name)
        if locality is None:
            raise NotFoundError(f"Localidad no encontrada: {name}")
        return locality

    def to_frame(self) -> pd.DataFrame:
        """取得 DataFrame 的副本，供外部自由處理"""
        return self._frame.copy()

    def to_model(self) -> DatasetFile:
        return DatasetFile(localities=self._localities)

    def __len__(self) -> int:
        return len(self._localities)

    def __iter__(self) -> Iterator[Locality]:
        return iter(self._localities)


def load_dataset(path: Union[str, Path]) -> Dataset:
    """讀取並驗證資料檔

    Args:
        path: JSON 資料檔路徑

    Returns:
        載入完成的資料集

    Raises:
        LoadError: 檔案不存在、無法讀取、不是合法 JSON 或結構不符
    """
    path = Path(path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"No se pudo leer {path}: {e}") from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise LoadError(f"JSON inválido en {path}: {e}") from e

    dataset = Dataset.from_dict(payload, source=path)
    logger.info("Datos cargados desde %s: %d localidades", path, len(dataset))
    return dataset


def get_dataset(request: Request) -> Dataset:
    """取得啟動時載入的資料集（FastAPI 依賴注入用）"""
    dataset = getattr(request.app.state, "dataset", None)
    if dataset is None:
        raise LoadError("El conjunto de datos no está cargado")
    return dataset
