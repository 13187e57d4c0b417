from packages.thai_address.listing import list_districts, list_provinces, list_sub_districts


def test_list_provinces_sorted_and_unique(records) -> None:
    provinces = list_provinces(records)
    assert provinces == sorted({record.province for record in records})
    assert len(provinces) == len(set(provinces)) == 4
    assert len(provinces) <= len(records)


def test_list_districts_scoped_to_province(records) -> None:
    districts = list_districts(records, " กรุงเทพมหานคร ")
    assert districts == sorted(["พระนคร", "ป้อมปราบศัตรูพ่าย", "สัมพันธวงศ์", "ปทุมวัน"])
    assert list_districts(records, "bangkok") == ["Pathum Wan"]
    assert list_districts(records, "กรุงเทพ") == []


def test_list_sub_districts_scoped_to_district_and_province(records) -> None:
    sub_districts = list_sub_districts(records, "ปทุมวัน", "กรุงเทพมหานคร")
    assert sub_districts == sorted(["รองเมือง", "ปทุมวัน", "ลุมพินี"])
    assert list_sub_districts(records, "ปทุมวัน", "เชียงใหม่") == []
    assert list_sub_districts(records, "", "") == []
