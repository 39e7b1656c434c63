"""應用程式設定模組

使用 pydantic-settings 管理應用程式配置，
支援從環境變數和 .env 檔案載入設定。
"""

import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# 專案根目錄（backend 的上一層）
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """應用程式設定類別

    Attributes:
        app_name: 應用程式名稱
        debug: 是否啟用除錯模式
        data_file: 週氣溫資料 JSON 檔案路徑
        static_dir: 儀表板靜態檔案目錄（不存在則不掛載）
        cors_origins: 允許的跨來源網域
        host: 伺服器綁定位址
        port: 伺服器埠號
        log_level: 日誌等級
    """

    app_name: str = "Temperaturas API"
    debug: bool = False
    data_file: Path = DATA_DIR / "datos.json"
    static_dir: Path = PROJECT_ROOT / "public"
    cors_origins: list[str] = ["http://localhost:3002"]
    host: str = "127.0.0.1"
    port: int = 3002
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def configure_logging(level: str = "INFO") -> None:
    """設定根 logger 的等級與輸出格式"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


# 全域設定實例
settings = Settings()
