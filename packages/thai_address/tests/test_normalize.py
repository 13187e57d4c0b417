from packages.thai_address.normalize import is_blank, normalize_text


def test_normalize_text_ignores_case_and_whitespace() -> None:
    assert normalize_text("  Ab  C ") == normalize_text("abc") == "abc"


def test_normalize_text_removes_internal_whitespace_in_thai() -> None:
    assert normalize_text(" เชียง ใหม่\t") == "เชียงใหม่"


def test_normalize_text_is_idempotent() -> None:
    for value in ("  Pathum   Wan ", "กรุงเทพ มหานคร", "", "STRASSE Straße"):
        once = normalize_text(value)
        assert normalize_text(once) == once


def test_normalize_text_casefolds_beyond_lowercase() -> None:
    assert normalize_text("Straße") == normalize_text("STRASSE")


def test_normalize_text_empty_inputs() -> None:
    assert normalize_text("") == ""
    assert normalize_text("   ") == ""
    assert normalize_text(None) == ""


def test_is_blank_treats_non_text_as_blank() -> None:
    assert is_blank(None)
    assert is_blank("  ")
    assert is_blank(10100)
    assert not is_blank(" x ")
