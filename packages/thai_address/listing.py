from __future__ import annotations

from typing import List, Sequence, Set

from packages.thai_address.normalize import normalize_text
from packages.thai_address.types import AddressRecord


def list_provinces(records: Sequence[AddressRecord]) -> List[str]:
    return sorted({record.province for record in records})


def list_districts(records: Sequence[AddressRecord], province: str) -> List[str]:
    target = normalize_text(province)
    seen: Set[str] = set()
    for record in records:
        if normalize_text(record.province) == target:
            seen.add(record.district)
    return sorted(seen)


def list_sub_districts(records: Sequence[AddressRecord], district: str, province: str) -> List[str]:
    district_target = normalize_text(district)
    province_target = normalize_text(province)
    seen: Set[str] = set()
    for record in records:
        if normalize_text(record.district) == district_target and normalize_text(record.province) == province_target:
            seen.add(record.sub_district)
    return sorted(seen)
