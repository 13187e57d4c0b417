from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

_FIELD_KEYS = {
    "province": ("province",),
    "district": ("district",),
    "sub_district": ("sub_district", "subDistrict"),
    "postal_code": ("postal_code", "postalCode"),
}


def pick_field(data: Mapping[str, Any], field_name: str) -> Any:
    for key in _FIELD_KEYS[field_name]:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True)
class AddressRecord:
    province: str
    district: str
    sub_district: str
    postal_code: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "province": self.province,
            "district": self.district,
            "subDistrict": self.sub_district,
            "postalCode": self.postal_code,
        }


@dataclass
class SearchCriteria:
    province: Optional[str] = None
    district: Optional[str] = None
    sub_district: Optional[str] = None
    postal_code: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SearchCriteria":
        # Accept both the camelCase wire keys and python-style keys; anything else is ignored.
        values = {}
        for field_name in _FIELD_KEYS:
            value = pick_field(data, field_name)
            values[field_name] = value if isinstance(value, str) else None
        return cls(**values)


@dataclass
class AutocompleteQuery:
    query: str
    limit: Optional[int] = 10


@dataclass
class ScoredCandidate:
    record: AddressRecord
    score: int
