"""資料集載入與查詢測試"""

import copy
import json
import logging
from pathlib import Path

import pandas as pd
import pytest

from app.dataset import Dataset, load_dataset
from app.exceptions import LoadError, NotFoundError


def _write(tmp_path, payload) -> Path:
    path = tmp_path / "datos.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestLoadDataset:
    """測試資料檔載入"""

    def test_load_sample_file(self, sample_dataset):
        """測試載入正常資料檔"""
        assert len(sample_dataset) == 3
        assert sample_dataset.names() == ["Madrid", "Sevilla", "Bilbao"]
        assert len(sample_dataset.frame) == 21

    def test_temperatures_parsed_from_text(self, sample_dataset):
        """溫度以文字儲存，載入後應為浮點數"""
        madrid = sample_dataset.find_locality("Madrid")
        assert madrid.records[0].max == 30.0
        assert madrid.records[0].min == 18.0
        assert isinstance(madrid.records[0].max, float)

    def test_missing_file(self, tmp_path):
        """測試檔案不存在"""
        with pytest.raises(LoadError):
            load_dataset(tmp_path / "no_existe.json")

    def test_invalid_json(self, tmp_path):
        """測試非法 JSON"""
        path = tmp_path / "datos.json"
        path.write_text("{localidades: [", encoding="utf-8")

        with pytest.raises(LoadError):
            load_dataset(path)

    def test_missing_localities_key(self, tmp_path):
        """測試缺少 localidades 欄位"""
        with pytest.raises(LoadError):
            load_dataset(_write(tmp_path, {"ciudades": []}))

    def test_wrong_number_of_days(self, tmp_path, sample_payload):
        """每個地區必須恰好 7 筆紀錄"""
        payload = copy.deepcopy(sample_payload)
        payload["localidades"][1]["temperaturas"].pop()

        with pytest.raises(LoadError):
            load_dataset(_write(tmp_path, payload))

    def test_duplicate_names(self, tmp_path, sample_payload):
        """地區名稱不可重複"""
        payload = copy.deepcopy(sample_payload)
        payload["localidades"].append(copy.deepcopy(payload["localidades"][0]))

        with pytest.raises(LoadError, match="duplicada"):
            load_dataset(_write(tmp_path, payload))

    def test_non_numeric_temperature(self, tmp_path, sample_payload):
        """溫度必須可解析為數值"""
        payload = copy.deepcopy(sample_payload)
        payload["localidades"][0]["temperaturas"][2]["max"] = "caluroso"

        with pytest.raises(LoadError):
            load_dataset(_write(tmp_path, payload))

    def test_nan_temperature_rejected(self, tmp_path, sample_payload):
        """NaN 不是有效溫度"""
        payload = copy.deepcopy(sample_payload)
        payload["localidades"][0]["temperaturas"][2]["min"] = "nan"

        with pytest.raises(LoadError):
            load_dataset(_write(tmp_path, payload))

    def test_weekday_mismatch(self, tmp_path, sample_payload):
        """日期的星期必須與索引一致（索引 0 = 星期一）"""
        payload = copy.deepcopy(sample_payload)
        # 2024-06-04 是星期二，不能放在索引 0
        payload["localidades"][0]["temperaturas"][0]["dia"] = "2024-06-04"

        with pytest.raises(LoadError):
            load_dataset(_write(tmp_path, payload))

    def test_day_labels_accepted(self, tmp_path, sample_payload):
        """dia 可以是星期標籤而非日期"""
        payload = copy.deepcopy(sample_payload)
        labels = ["Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo"]
        for record, label in zip(payload["localidades"][0]["temperaturas"], labels):
            record["dia"] = label

        dataset = load_dataset(_write(tmp_path, payload))
        frame = dataset.frame

        assert frame.loc[frame["locality"] == "Madrid", "date"].isna().all()
        assert frame.loc[frame["locality"] == "Sevilla", "date"].notna().all()

    def test_max_below_min_only_warns(self, tmp_path, sample_payload, caplog):
        """max < min 不阻止載入，只記錄警告"""
        payload = copy.deepcopy(sample_payload)
        payload["localidades"][2]["temperaturas"][0].update({"max": "10", "min": "12"})

        with caplog.at_level(logging.WARNING, logger="app.dataset"):
            dataset = load_dataset(_write(tmp_path, payload))

        assert len(dataset) == 3
        assert "Bilbao" in caplog.text

    def test_empty_dataset(self):
        """沒有地區的資料檔仍可載入"""
        dataset = Dataset.from_dict({"localidades": []})

        assert len(dataset) == 0
        assert dataset.frame.empty
        assert pd.api.types.is_datetime64_any_dtype(dataset.frame["date"])


class TestDatasetQueries:
    """測試資料集查詢"""

    def test_find_locality(self, sample_dataset):
        locality = sample_dataset.find_locality("Sevilla")

        assert locality.name == "Sevilla"
        assert len(locality.records) == 7

    def test_find_locality_is_case_sensitive(self, sample_dataset):
        """名稱比對區分大小寫"""
        with pytest.raises(NotFoundError):
            sample_dataset.find_locality("madrid")

    def test_get_all_returns_same_dataset(self, sample_dataset):
        assert sample_dataset.get_all() is sample_dataset

    def test_snapshot_round_trip(self, sample_dataset, sample_payload):
        """快照的地區名稱與紀錄數應與資料檔一致"""
        snapshot = sample_dataset.to_model().model_dump(by_alias=True)

        assert [loc["nombre"] for loc in snapshot["localidades"]] == [
            loc["nombre"] for loc in sample_payload["localidades"]
        ]
        for loc in snapshot["localidades"]:
            assert len(loc["temperaturas"]) == 7

    def test_to_frame_returns_copy(self, sample_dataset):
        """to_frame 回傳副本，修改不影響資料集"""
        frame = sample_dataset.to_frame()
        frame["max"] = 0.0

        assert sample_dataset.frame["max"].max() == 40.0
