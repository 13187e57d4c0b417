from __future__ import annotations

from typing import Any, List, Optional, Union

from packages.thai_address import listing, search, validate
from packages.thai_address.autocomplete import DEFAULT_LIMIT, autocomplete as rank_autocomplete
from packages.thai_address.dataset import Dataset, DatasetAccessor
from packages.thai_address.search import CriteriaLike
from packages.thai_address.types import AddressRecord, AutocompleteQuery


class AddressBook:
    """Query surface bound to one dataset accessor.

    Each call reads ``accessor.get_dataset()``; loading errors raised by the
    accessor propagate unchanged.
    """

    def __init__(self, accessor: DatasetAccessor) -> None:
        self._accessor = accessor

    @property
    def records(self) -> Dataset:
        return self._accessor.get_dataset()

    def search_addresses(self, criteria: CriteriaLike) -> List[AddressRecord]:
        return search.search_addresses(self.records, criteria)

    def find_by_postal_code(self, postal_code: str) -> List[AddressRecord]:
        return search.find_by_postal_code(self.records, postal_code)

    def find_by_province(self, province: str) -> List[AddressRecord]:
        return search.find_by_province(self.records, province)

    def find_by_district(self, district: str, province: Optional[str] = None) -> List[AddressRecord]:
        return search.find_by_district(self.records, district, province)

    def autocomplete(
        self, query: Union[str, AutocompleteQuery], limit: Optional[int] = DEFAULT_LIMIT
    ) -> List[AddressRecord]:
        return rank_autocomplete(self.records, query, limit)

    def validate_postal_code(self, postal_code: Any) -> bool:
        return validate.validate_postal_code(postal_code)

    def is_valid_province(self, province: str) -> bool:
        return validate.is_valid_province(self.records, province)

    def is_valid_district(self, district: str, province: Optional[str] = None) -> bool:
        return validate.is_valid_district(self.records, district, province)

    def is_valid_sub_district(
        self, sub_district: str, district: Optional[str] = None, province: Optional[str] = None
    ) -> bool:
        return validate.is_valid_sub_district(self.records, sub_district, district, province)

    def validate_address(self, address: Any) -> bool:
        return validate.validate_address(self.records, address)

    def list_provinces(self) -> List[str]:
        return listing.list_provinces(self.records)

    def list_districts(self, province: str) -> List[str]:
        return listing.list_districts(self.records, province)

    def list_sub_districts(self, district: str, province: str) -> List[str]:
        return listing.list_sub_districts(self.records, district, province)
