"""共用測試 fixtures"""

import json
from pathlib import Path

import pytest

from app.dataset import Dataset, load_dataset
from app.models import DailyRecord, Locality


DATA_DIR = Path(__file__).parent / "data"
SAMPLE_FILE = DATA_DIR / "datos_prueba.json"


def build_locality(name, maxima, minima=None, days=None):
    """建立地區，不經過 7 筆紀錄的驗證（用於測試不完整資料）"""
    minima = minima or [value - 10 for value in maxima]
    days = days or [f"D{i}" for i in range(len(maxima))]
    records = tuple(
        DailyRecord.model_construct(day=day, max=float(high), min=float(low))
        for day, high, low in zip(days, maxima, minima)
    )
    return Locality.model_construct(name=name, records=records)


@pytest.fixture
def make_locality():
    return build_locality


@pytest.fixture
def sample_dataset() -> Dataset:
    """Madrid / Sevilla / Bilbao，2024-06-03（星期一）到 2024-06-09"""
    return load_dataset(SAMPLE_FILE)


@pytest.fixture
def sample_payload() -> dict:
    return json.loads(SAMPLE_FILE.read_text(encoding="utf-8"))
