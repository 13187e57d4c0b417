from packages.thai_address.search import find_by_district, find_by_postal_code, find_by_province, search_addresses
from packages.thai_address.types import SearchCriteria


def test_search_addresses_without_criteria_returns_nothing(records) -> None:
    assert search_addresses(records, None) == []
    assert search_addresses(records, {}) == []
    assert search_addresses(records, SearchCriteria()) == []
    assert search_addresses(records, {"village": "ปทุมวัน"}) == []
    assert search_addresses(records, {"province": "   "}) == []


def test_search_addresses_province_is_substring_match(records) -> None:
    results = search_addresses(records, {"province": "กรุงเทพ"})
    assert results == list(records[:7])


def test_search_addresses_combines_fields_with_and(records) -> None:
    results = search_addresses(records, {"province": "กรุงเทพ", "district": "ปทุม"})
    assert [item.sub_district for item in results] == ["รองเมือง", "ปทุมวัน", "ลุมพินี"]
    assert all(item.province == "กรุงเทพมหานคร" for item in results)


def test_search_addresses_postal_code_is_exact_after_trim(records) -> None:
    assert search_addresses(records, {"postalCode": "10100"}) == list(records[1:4])
    assert search_addresses(records, {"postal_code": " 10100 "}) == list(records[1:4])
    assert search_addresses(records, {"postalCode": "1010"}) == []


def test_search_addresses_accepts_dataclass_criteria(records) -> None:
    results = search_addresses(records, SearchCriteria(district="ปทุม", postal_code="10330"))
    assert results == list(records[4:7])


def test_search_addresses_normalizes_case_and_spacing(records) -> None:
    results = search_addresses(records, {"subDistrict": "  LUM phini"})
    assert results == [records[11]]


def test_search_addresses_results_satisfy_every_criterion(records) -> None:
    criteria = {"province": "เชียง", "subDistrict": "ศรี"}
    results = search_addresses(records, criteria)
    assert results
    for item in results:
        assert "เชียง" in item.province
        assert "ศรี" in item.sub_district
        assert item in records


def test_find_by_postal_code(records) -> None:
    assert find_by_postal_code(records, "  50200 ") == [records[8]]
    assert find_by_postal_code(records, "") == []
    assert find_by_postal_code(records, "   ") == []
    assert find_by_postal_code(records, None) == []
    assert find_by_postal_code(records, "5020") == []


def test_find_by_province_normalizes_query(records) -> None:
    assert find_by_province(records, " เชียง ใหม่ ") == list(records[8:11])
    assert find_by_province(records, "bang") == [records[11]]
    assert find_by_province(records, "") == []


def test_find_by_district_with_optional_province(records) -> None:
    assert find_by_district(records, "เมือง") == list(records[7:10])
    assert find_by_district(records, "เมือง", "เชียงใหม่") == list(records[8:10])
    assert find_by_district(records, "ปทุมวัน", "") == list(records[4:7])
    assert find_by_district(records, "ปทุมวัน", "เชียงใหม่") == []
    assert find_by_district(records, "  ") == []
