from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class FeatureStatus(StrEnum):
    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    UNDER_REVIEW = "under-review"


class VoteDirection(StrEnum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True, slots=True)
class FeatureRequest:
    """A single feature request as held by the ledger.

    Records are immutable; the ledger swaps in a new copy when a vote lands.
    """

    id: str
    title: str
    description: str
    status: FeatureStatus
    category: str
    votes: int
    comments: int
    author: str
    date: date
    # Current user's standing vote; None means no vote in effect
    user_vote: VoteDirection | None = None
