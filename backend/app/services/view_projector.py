"""Derived, read-only views over the ledger's collection."""

from collections.abc import Iterable
from enum import StrEnum

from backend.app.models.feature import FeatureRequest

ALL_CATEGORIES = "all"


class SortKey(StrEnum):
    VOTES = "votes"
    RECENT = "recent"


_SORT_FIELDS = {
    SortKey.VOTES: lambda f: f.votes,
    SortKey.RECENT: lambda f: f.date,
}


def project(
    features: Iterable[FeatureRequest],
    category: str = ALL_CATEGORIES,
    sort_key: SortKey = SortKey.VOTES,
) -> list[FeatureRequest]:
    """Filter by exact category (or ``"all"``) and sort descending by ``sort_key``.

    The sort is stable: requests with equal keys keep their collection order.
    Returns a new list holding the same record objects.
    """
    if category == ALL_CATEGORIES:
        selected = list(features)
    else:
        selected = [f for f in features if f.category == category]
    return sorted(selected, key=_SORT_FIELDS[SortKey(sort_key)], reverse=True)
