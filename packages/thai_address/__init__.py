from __future__ import annotations

from packages.thai_address.autocomplete import autocomplete, rank_candidates, score_record
from packages.thai_address.dataset import (
    BundledDataset,
    DatasetAccessor,
    FileDataset,
    HttpDataset,
    StaticDataset,
)
from packages.thai_address.dataset_selector import get_dataset_accessor
from packages.thai_address.errors import DatasetError, DatasetFetchError, DatasetFormatError, DatasetNotFoundError
from packages.thai_address.listing import list_districts, list_provinces, list_sub_districts
from packages.thai_address.normalize import normalize_text
from packages.thai_address.search import find_by_district, find_by_postal_code, find_by_province, search_addresses
from packages.thai_address.service import AddressBook
from packages.thai_address.types import AddressRecord, AutocompleteQuery, ScoredCandidate, SearchCriteria
from packages.thai_address.validate import (
    is_valid_district,
    is_valid_province,
    is_valid_sub_district,
    validate_address,
    validate_postal_code,
)

__all__ = [
    "AddressBook",
    "AddressRecord",
    "AutocompleteQuery",
    "BundledDataset",
    "DatasetAccessor",
    "DatasetError",
    "DatasetFetchError",
    "DatasetFormatError",
    "DatasetNotFoundError",
    "FileDataset",
    "HttpDataset",
    "ScoredCandidate",
    "SearchCriteria",
    "StaticDataset",
    "autocomplete",
    "find_by_district",
    "find_by_postal_code",
    "find_by_province",
    "get_dataset_accessor",
    "is_valid_district",
    "is_valid_province",
    "is_valid_sub_district",
    "list_districts",
    "list_provinces",
    "list_sub_districts",
    "normalize_text",
    "rank_candidates",
    "score_record",
    "search_addresses",
    "validate_address",
    "validate_postal_code",
]
