from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

from packages.thai_address.normalize import is_blank, normalize_text
from packages.thai_address.types import AddressRecord, SearchCriteria

CriteriaLike = Union[SearchCriteria, Mapping[str, Any], None]


def _coerce_criteria(criteria: CriteriaLike) -> Optional[SearchCriteria]:
    if isinstance(criteria, SearchCriteria):
        return criteria
    if isinstance(criteria, Mapping):
        return SearchCriteria.from_mapping(criteria)
    return None


def search_addresses(records: Sequence[AddressRecord], criteria: CriteriaLike) -> List[AddressRecord]:
    parsed = _coerce_criteria(criteria)
    if parsed is None:
        return []

    # Blank values put no constraint on a field; with nothing left to constrain there is no result.
    name_filters = []
    for field_name in ("province", "district", "sub_district"):
        value = getattr(parsed, field_name)
        if not is_blank(value):
            name_filters.append((field_name, normalize_text(value)))
    postal_code = None if is_blank(parsed.postal_code) else parsed.postal_code.strip()
    if not name_filters and postal_code is None:
        return []

    results: List[AddressRecord] = []
    for record in records:
        if postal_code is not None and record.postal_code != postal_code:
            continue
        if all(needle in normalize_text(getattr(record, name)) for name, needle in name_filters):
            results.append(record)
    return results


def find_by_postal_code(records: Sequence[AddressRecord], postal_code: str) -> List[AddressRecord]:
    if is_blank(postal_code):
        return []
    code = postal_code.strip()
    return [record for record in records if record.postal_code == code]


def find_by_province(records: Sequence[AddressRecord], province: str) -> List[AddressRecord]:
    if is_blank(province):
        return []
    needle = normalize_text(province)
    return [record for record in records if needle in normalize_text(record.province)]


def find_by_district(
    records: Sequence[AddressRecord], district: str, province: Optional[str] = None
) -> List[AddressRecord]:
    if is_blank(district):
        return []
    district_needle = normalize_text(district)
    province_needle = None if is_blank(province) else normalize_text(province)

    results: List[AddressRecord] = []
    for record in records:
        if district_needle not in normalize_text(record.district):
            continue
        if province_needle is not None and province_needle not in normalize_text(record.province):
            continue
        results.append(record)
    return results
