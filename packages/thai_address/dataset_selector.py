from __future__ import annotations

from typing import Optional

from packages.thai_address.dataset import BundledDataset, DatasetAccessor, FileDataset, HttpDataset
from packages.thai_address.settings import DatasetSettings, bootstrap_env


def get_dataset_accessor(settings: Optional[DatasetSettings] = None) -> DatasetAccessor:
    if settings is None:
        bootstrap_env()
        settings = DatasetSettings.from_env()
    source = settings.source
    if source == "bundled":
        return BundledDataset()
    if source == "file":
        return FileDataset(path=settings.data_path)
    if source == "http":
        if not settings.data_url:
            raise ValueError("http data source requires THAI_ADDRESS_DATA_URL")
        return HttpDataset(settings.data_url, timeout_sec=settings.fetch_timeout_sec)
    raise ValueError(f"unsupported data source: {source}")
