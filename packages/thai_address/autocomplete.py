from __future__ import annotations

from typing import List, Optional, Sequence, Union

from packages.thai_address.normalize import is_blank, normalize_text
from packages.thai_address.types import AddressRecord, AutocompleteQuery, ScoredCandidate

DEFAULT_LIMIT = 10

# (field, equals, starts-with, contains) bonuses. The tiers overlap on purpose:
# an exact match also collects the starts-with and contains bonuses.
_FIELD_BONUSES = (
    ("province", 100, 50, 20),
    ("district", 80, 40, 15),
    ("sub_district", 60, 30, 10),
)
POSTAL_CODE_BONUS = 90


def score_record(record: AddressRecord, query: str, normalized_query: str) -> int:
    score = 0
    for field_name, equals_bonus, prefix_bonus, contains_bonus in _FIELD_BONUSES:
        value = normalize_text(getattr(record, field_name))
        if value == normalized_query:
            score += equals_bonus
        if value.startswith(normalized_query):
            score += prefix_bonus
        if normalized_query in value:
            score += contains_bonus

    # Raw comparison: the query is neither trimmed nor normalized for postal codes.
    if record.postal_code == query:
        score += POSTAL_CODE_BONUS
    return score


def rank_candidates(records: Sequence[AddressRecord], query: str) -> List[ScoredCandidate]:
    """Score every record against ``query`` and return the non-zero ones, best first.

    ``list.sort`` is stable, so records with equal scores keep their dataset order.
    """
    if is_blank(query):
        return []
    normalized_query = normalize_text(query)
    candidates: List[ScoredCandidate] = []
    for record in records:
        score = score_record(record, query, normalized_query)
        if score > 0:
            candidates.append(ScoredCandidate(record=record, score=score))
    candidates.sort(key=lambda item: item.score, reverse=True)
    return candidates


def autocomplete(
    records: Sequence[AddressRecord],
    query: Union[str, AutocompleteQuery],
    limit: Optional[int] = DEFAULT_LIMIT,
) -> List[AddressRecord]:
    """Return at most ``limit`` records ranked by relevance to a free-text query.

    ``query`` may be a plain string or an ``AutocompleteQuery``; the latter's limit wins.
    A limit of ``None`` means the default of 10 and any limit <= 0 yields an empty list.
    """
    if isinstance(query, AutocompleteQuery):
        limit = query.limit
        query = query.query
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0 or is_blank(query):
        return []
    return [item.record for item in rank_candidates(records, query)[:limit]]
