from typing import Tuple

import pytest

from packages.thai_address.types import AddressRecord

BANGKOK = "กรุงเทพมหานคร"
CHIANG_MAI = "เชียงใหม่"

FIXTURE_RECORDS: Tuple[AddressRecord, ...] = (
    AddressRecord(BANGKOK, "พระนคร", "พระบรมมหาราชวัง", "10200"),
    AddressRecord(BANGKOK, "ป้อมปราบศัตรูพ่าย", "ป้อมปราบ", "10100"),
    AddressRecord(BANGKOK, "ป้อมปราบศัตรูพ่าย", "วัดเทพศิรินทร์", "10100"),
    AddressRecord(BANGKOK, "สัมพันธวงศ์", "จักรวรรดิ", "10100"),
    AddressRecord(BANGKOK, "ปทุมวัน", "รองเมือง", "10330"),
    AddressRecord(BANGKOK, "ปทุมวัน", "ปทุมวัน", "10330"),
    AddressRecord(BANGKOK, "ปทุมวัน", "ลุมพินี", "10330"),
    AddressRecord("ปทุมธานี", "เมืองปทุมธานี", "บางปรอก", "12000"),
    AddressRecord(CHIANG_MAI, "เมืองเชียงใหม่", "ศรีภูมิ", "50200"),
    AddressRecord(CHIANG_MAI, "เมืองเชียงใหม่", "ช้างม่อย", "50300"),
    AddressRecord(CHIANG_MAI, "สันทราย", "สันทรายหลวง", "50210"),
    AddressRecord("Bangkok", "Pathum Wan", "Lumphini", "10330"),
)


@pytest.fixture
def records() -> Tuple[AddressRecord, ...]:
    return FIXTURE_RECORDS
