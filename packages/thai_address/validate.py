from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Sequence

from packages.thai_address.normalize import is_blank, normalize_text
from packages.thai_address.types import AddressRecord, pick_field

# ASCII only; str.isdigit() would also accept Thai and other Unicode digits.
_POSTAL_CODE = re.compile(r"[0-9]{5}")


def validate_postal_code(postal_code: Any) -> bool:
    if not isinstance(postal_code, str):
        return False
    return _POSTAL_CODE.fullmatch(postal_code.strip()) is not None


def is_valid_province(records: Sequence[AddressRecord], province: str) -> bool:
    if is_blank(province):
        return False
    target = normalize_text(province)
    return any(normalize_text(record.province) == target for record in records)


def is_valid_district(records: Sequence[AddressRecord], district: str, province: Optional[str] = None) -> bool:
    if is_blank(district):
        return False
    target = normalize_text(district)
    province_target = None if is_blank(province) else normalize_text(province)
    for record in records:
        if normalize_text(record.district) != target:
            continue
        if province_target is None or normalize_text(record.province) == province_target:
            return True
    return False


def is_valid_sub_district(
    records: Sequence[AddressRecord],
    sub_district: str,
    district: Optional[str] = None,
    province: Optional[str] = None,
) -> bool:
    if is_blank(sub_district):
        return False
    target = normalize_text(sub_district)
    district_target = None if is_blank(district) else normalize_text(district)
    province_target = None if is_blank(province) else normalize_text(province)
    for record in records:
        if normalize_text(record.sub_district) != target:
            continue
        if district_target is not None and normalize_text(record.district) != district_target:
            continue
        if province_target is not None and normalize_text(record.province) != province_target:
            continue
        return True
    return False


def _coerce_address(address: Any) -> Optional[AddressRecord]:
    if isinstance(address, AddressRecord):
        fields = (address.province, address.district, address.sub_district, address.postal_code)
    elif isinstance(address, Mapping):
        fields = tuple(pick_field(address, name) for name in ("province", "district", "sub_district", "postal_code"))
    else:
        return None
    if any(is_blank(value) for value in fields):
        return None
    return AddressRecord(*fields)


def validate_address(records: Sequence[AddressRecord], address: Any) -> bool:
    """Check that ``address`` is well formed and present in the gazetteer.

    Names are compared in normalized form; the postal code must match exactly.
    Anything that is not an ``AddressRecord`` or a mapping is simply invalid.
    """
    candidate = _coerce_address(address)
    if candidate is None:
        return False
    if not validate_postal_code(candidate.postal_code):
        return False

    province = normalize_text(candidate.province)
    district = normalize_text(candidate.district)
    sub_district = normalize_text(candidate.sub_district)
    return any(
        record.postal_code == candidate.postal_code
        and normalize_text(record.province) == province
        and normalize_text(record.district) == district
        and normalize_text(record.sub_district) == sub_district
        for record in records
    )
