from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "THAI_ADDRESS_"


def _project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _read_prefixed_env(path: Path, prefix: str = ENV_PREFIX) -> dict[str, str]:
    """Return ``KEY=value`` pairs from an env file whose keys start with ``prefix``."""
    values: dict[str, str] = {}
    if not path.is_file():
        return values
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key.startswith(prefix):
            continue
        values[key] = value.strip().strip("'").strip('"')
    return values


def bootstrap_env(root: Optional[Path] = None) -> None:
    """Load THAI_ADDRESS_* vars from project-level env files if the process env lacks them."""
    base = root or _project_root()
    for env_path in (base / ".env.local", base / ".env"):
        for key, value in _read_prefixed_env(env_path).items():
            os.environ.setdefault(key, value)


def _env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None


@dataclass
class DatasetSettings:
    source: str = "bundled"
    data_path: Optional[str] = None
    data_url: Optional[str] = None
    fetch_timeout_sec: float = 5.0

    @classmethod
    def from_env(cls) -> "DatasetSettings":
        return cls(
            source=os.getenv("THAI_ADDRESS_DATA_SOURCE", "bundled").strip().lower(),
            data_path=os.getenv("THAI_ADDRESS_DATA_PATH") or None,
            data_url=os.getenv("THAI_ADDRESS_DATA_URL") or None,
            fetch_timeout_sec=_env_float("THAI_ADDRESS_FETCH_TIMEOUT_SEC", "5"),
        )
