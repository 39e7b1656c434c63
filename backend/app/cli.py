"""CLI 命令列工具

提供資料檔驗證、統計輸出與啟動 API 伺服器等命令列功能。
"""

from pathlib import Path
from typing import Optional

import click
import uvicorn

from app.analytics import engine
from app.config import configure_logging, settings
from app.dataset import Dataset, load_dataset
from app.exceptions import LoadError, NoDataError
from app.models import DAY_NAMES, DAYS_PER_WEEK


def _load(data_file: Optional[Path]) -> Dataset:
    """載入資料檔，失敗時以非零狀態碼結束"""
    path = data_file or settings.data_file
    try:
        return load_dataset(path)
    except LoadError as e:
        raise click.ClickException(str(e))


data_file_option = click.option(
    "--data-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="資料檔路徑，預設使用設定值",
)


@click.group()
@click.option("--log-level", default=None, help="日誌等級")
def cli(log_level):
    """週氣溫 CLI 工具"""
    configure_logging(log_level or settings.log_level)


@cli.command()
@data_file_option
def validate(data_file):
    """驗證資料檔格式"""
    dataset = _load(data_file)
    click.echo("資料檔格式正確！")
    click.echo(f"  地區數: {len(dataset)}")
    click.echo(f"  紀錄數: {len(dataset.frame)}")


@cli.command()
@data_file_option
def stats(data_file):
    """輸出各項最高溫平均"""
    dataset = _load(data_file)

    try:
        click.echo(f"Media global: {engine.global_average(dataset):.2f} °C")
    except NoDataError as e:
        click.echo(f"Media global: {e}")
        return

    for name in engine.locality_names(dataset):
        click.echo(f"  {name}: {engine.locality_average(dataset, name):.2f} °C")

    for index in range(DAYS_PER_WEEK):
        try:
            media = engine.day_of_week_average(dataset, index)
        except NoDataError:
            continue
        click.echo(f"  {DAY_NAMES[index]}: {media:.2f} °C")


@cli.command()
@click.option("--host", default=None, help="綁定位址")
@click.option("--port", type=int, default=None, help="埠號")
@click.option("--reload", is_flag=True, help="程式碼變更時自動重新載入")
def serve(host, port, reload):
    """啟動 API 伺服器"""
    uvicorn.run(
        "app.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    cli()
