"""Gazetteer accessors.

Every accessor satisfies ``DatasetAccessor``: ``get_dataset()`` returns the same
immutable tuple of ``AddressRecord`` on every call, loading it on first use.
Which accessor a process uses is a deployment decision made by
``dataset_selector.get_dataset_accessor``; the query functions never load data.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, List, Optional, Protocol, Tuple
from urllib.error import URLError
from urllib.request import Request, urlopen

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from packages.thai_address.errors import DatasetFetchError, DatasetFormatError, DatasetNotFoundError
from packages.thai_address.types import AddressRecord

logger = logging.getLogger(__name__)

GEOGRAPHY_FILE_NAME = "geography.json"
PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"

Dataset = Tuple[AddressRecord, ...]


class GeographyItem(BaseModel):
    """One raw row of the geography JSON."""

    model_config = ConfigDict(populate_by_name=True)

    province: str = Field(alias="provinceNameTh", min_length=1)
    district: str = Field(alias="districtNameTh", min_length=1)
    sub_district: str = Field(alias="subdistrictNameTh", min_length=1)
    postal_code: str = Field(alias="postalCode", pattern=r"^[0-9]{5}$")

    @field_validator("postal_code", mode="before")
    @classmethod
    def _postal_code_as_text(cls, value: Any) -> Any:
        # Source files carry postal codes as JSON numbers.
        if isinstance(value, int) and not isinstance(value, bool):
            return f"{value:05d}"
        return value

    def to_record(self) -> AddressRecord:
        return AddressRecord(
            province=self.province,
            district=self.district,
            sub_district=self.sub_district,
            postal_code=self.postal_code,
        )


def parse_geography(payload: Any) -> Dataset:
    if not isinstance(payload, list):
        raise DatasetFormatError(f"geography payload must be a list, got {type(payload).__name__}")
    records: List[AddressRecord] = []
    for index, item in enumerate(payload):
        try:
            records.append(GeographyItem.model_validate(item).to_record())
        except ValidationError as exc:
            raise DatasetFormatError(f"invalid geography row {index}: {exc.errors()[0]['msg']}") from exc
    return tuple(records)


def read_geography_file(path: Path) -> Dataset:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DatasetFormatError(f"geography file is not valid UTF-8 JSON: {path}") from exc
    return parse_geography(payload)


class DatasetAccessor(Protocol):
    def get_dataset(self) -> Dataset:
        ...


class _CachedDataset(ABC):
    """Single-assignment cache around ``_load``; concurrent first calls load once."""

    source_name = "dataset"

    def __init__(self) -> None:
        self._records: Optional[Dataset] = None
        self._lock = threading.Lock()

    @abstractmethod
    def _load(self) -> Dataset:
        """Read the records; called at most once until ``reset``."""

    @property
    def loaded(self) -> bool:
        return self._records is not None

    def get_dataset(self) -> Dataset:
        if self._records is not None:
            return self._records
        with self._lock:
            if self._records is None:
                records = self._load()
                logger.info("Loaded %d address records from %s", len(records), self.source_name)
                self._records = records
        return self._records

    def reset(self) -> None:
        with self._lock:
            self._records = None


class StaticDataset(_CachedDataset):
    source_name = "static"

    def __init__(self, records: Iterable[AddressRecord]) -> None:
        super().__init__()
        self._initial = tuple(records)

    def _load(self) -> Dataset:
        return self._initial


class BundledDataset(_CachedDataset):
    """The sample gazetteer shipped inside the package."""

    source_name = "bundled"

    def __init__(self, path: Optional[Path] = None) -> None:
        super().__init__()
        self._path = Path(path) if path else PACKAGE_DATA_DIR / GEOGRAPHY_FILE_NAME

    def _load(self) -> Dataset:
        if not self._path.exists():
            logger.warning("Bundled geography file missing: %s", self._path)
            raise DatasetNotFoundError(f"bundled geography file not found: {self._path}")
        return read_geography_file(self._path)


class FileDataset(_CachedDataset):
    source_name = "file"

    def __init__(self, path: Optional[str] = None, cwd: Optional[Path] = None) -> None:
        super().__init__()
        self._explicit_path = Path(path) if path else None
        self._cwd = Path(cwd) if cwd else None

    def candidate_paths(self) -> List[Path]:
        # An explicit path is authoritative, with no fallback to the default locations.
        if self._explicit_path is not None:
            return [self._explicit_path]
        cwd = self._cwd or Path(os.getcwd())
        candidates = [
            PACKAGE_DATA_DIR / GEOGRAPHY_FILE_NAME,
            PACKAGE_DATA_DIR / "geography.min.json",
            cwd / "public" / "data" / GEOGRAPHY_FILE_NAME,
            cwd / "dist" / "data" / GEOGRAPHY_FILE_NAME,
            cwd / "data" / GEOGRAPHY_FILE_NAME,
        ]
        unique: List[Path] = []
        for candidate in candidates:
            if candidate not in unique:
                unique.append(candidate)
        return unique

    def resolve_path(self) -> Path:
        candidates = self.candidate_paths()
        for candidate in candidates:
            if candidate.is_file():
                return candidate
        if self._explicit_path is not None:
            logger.warning("Geography file missing at THAI_ADDRESS_DATA_PATH: %s", self._explicit_path)
            raise DatasetNotFoundError(f"geography data file not found: {self._explicit_path}")
        logger.warning("No geography file in %d candidate locations", len(candidates))
        raise DatasetNotFoundError(
            "geography data file not found; set THAI_ADDRESS_DATA_PATH or place geography.json under ./data"
        )

    def _load(self) -> Dataset:
        path = self.resolve_path()
        self.source_name = f"file:{path}"
        return read_geography_file(path)


class HttpDataset(_CachedDataset):
    source_name = "http"

    def __init__(self, url: str, timeout_sec: float = 5.0) -> None:
        super().__init__()
        if not str(url or "").strip():
            raise ValueError("http dataset requires a base url; set THAI_ADDRESS_DATA_URL")
        self.url = self.resolve_url(url)
        self._timeout_sec = timeout_sec

    @staticmethod
    def resolve_url(url: str) -> str:
        value = url.strip()
        if value.lower().endswith(".json"):
            return value
        return f"{value.rstrip('/')}/{GEOGRAPHY_FILE_NAME}"

    def _load(self) -> Dataset:
        request = Request(self.url, headers={"Accept": "application/json"}, method="GET")
        try:
            with urlopen(request, timeout=self._timeout_sec) as resp:
                status = getattr(resp, "status", 200)
                if not 200 <= int(status) < 300:
                    raise DatasetFetchError(f"failed to fetch geography data: HTTP {status} from {self.url}")
                body = resp.read()
        except (URLError, OSError) as exc:
            logger.warning("Geography fetch failed for %s: %s", self.url, exc)
            raise DatasetFetchError(f"failed to fetch geography data from {self.url}: {exc}") from exc

        try:
            raw = body.decode("utf-8")
            payload = json.loads(raw) if raw else None
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DatasetFormatError(f"geography response is not valid UTF-8 JSON: {self.url}") from exc
        self.source_name = f"http:{self.url}"
        return parse_geography(payload)
