"""In-memory ledger of feature requests and the current user's votes.

The ledger owns the authoritative collection. Every mutation rebuilds the
list and replaces only the touched record, so snapshots handed out earlier
never change underneath their holders.
"""

import logging
import uuid
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import UTC, date, datetime

from backend.app.config import settings
from backend.app.models.feature import FeatureRequest, FeatureStatus, VoteDirection

logger = logging.getLogger(__name__)

_STEP = {VoteDirection.UP: 1, VoteDirection.DOWN: -1}


def _today() -> date:
    return datetime.now(UTC).date()


def reconcile_vote(
    current: VoteDirection | None, requested: VoteDirection
) -> tuple[int, VoteDirection | None]:
    """Return ``(delta, new_vote)`` for a vote request against a standing vote.

    Repeating the standing direction retracts it. Switching direction moves
    the tally by two: one to undo the old vote, one to apply the new.
    """
    if current == requested:
        return -_STEP[requested], None
    if current is None:
        return _STEP[requested], requested
    return 2 * _STEP[requested], requested


class VoteLedger:
    def __init__(
        self,
        author: str,
        features: Iterable[FeatureRequest] = (),
        today: Callable[[], date] = _today,
    ) -> None:
        self.author = author
        self._features: list[FeatureRequest] = list(features)
        self._today = today

    @property
    def features(self) -> list[FeatureRequest]:
        """Snapshot of the collection, newest submissions first."""
        return list(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def get(self, feature_id: str) -> FeatureRequest | None:
        for feature in self._features:
            if feature.id == feature_id:
                return feature
        return None

    def apply_vote(self, feature_id: str, direction: VoteDirection) -> list[FeatureRequest]:
        """Apply the current user's vote and return the updated collection.

        An unknown id leaves the collection as it was.
        """
        target = self.get(feature_id)
        if target is None:
            logger.debug("Vote on unknown feature %s ignored", feature_id)
            return self.features

        delta, new_vote = reconcile_vote(target.user_vote, direction)
        updated = replace(target, votes=target.votes + delta, user_vote=new_vote)
        self._features = [updated if f is target else f for f in self._features]

        logger.debug(
            "Vote %s on %s: %s -> %s (votes %d -> %d)",
            direction,
            feature_id,
            target.user_vote,
            new_vote,
            target.votes,
            updated.votes,
        )
        return self.features

    def create_feature(
        self,
        title: str,
        description: str,
        category: str,
        status: FeatureStatus | None = None,
    ) -> FeatureRequest:
        """Create a request carrying the author's own upvote and put it first.

        Inputs are expected to be validated already; nothing is re-checked here.
        ``status`` falls back to the configured default when the caller supplies none.
        """
        feature = FeatureRequest(
            id=str(uuid.uuid4()),
            title=title,
            description=description,
            status=status or settings.default_status,
            category=category,
            votes=1,
            comments=0,
            author=self.author,
            date=self._today(),
            user_vote=VoteDirection.UP,
        )
        self._features = [feature, *self._features]
        logger.info("Feature request created: %s (%s)", feature.title, feature.id)
        return feature

    def category_counts(self) -> dict[str, int]:
        """Number of requests per category, in first-seen collection order."""
        counts: dict[str, int] = {}
        for feature in self._features:
            counts[feature.category] = counts.get(feature.category, 0) + 1
        return counts
