from __future__ import annotations

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """Canonical comparison form: trimmed, case-folded, with all whitespace removed."""
    if not text:
        return ""
    value = str(text).strip().casefold()
    return _WHITESPACE.sub("", value)


def is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()
