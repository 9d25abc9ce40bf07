from datetime import date

from backend.app.config import settings
from backend.app.models.feature import FeatureRequest, FeatureStatus, VoteDirection
from backend.app.services.vote_ledger import VoteLedger

_ledger: VoteLedger | None = None


def get_ledger() -> VoteLedger:
    """FastAPI dependency for the process-wide ledger."""
    if _ledger is None:
        raise RuntimeError("Ledger not initialised; call init_store() first")
    return _ledger


def init_store() -> VoteLedger:
    """Create a fresh ledger, seeded with the sample board unless disabled."""
    global _ledger
    seed = sample_features() if settings.seed_sample_data else []
    _ledger = VoteLedger(author=settings.user_name, features=seed)
    return _ledger


def sample_features() -> list[FeatureRequest]:
    """The eight requests the demo board starts with."""
    seed = [
        (
            "1",
            "Dark mode support",
            "Add a toggle to switch between light and dark themes "
            "throughout the entire application.",
            FeatureStatus.IN_PROGRESS,
            "UI/UX",
            124,
            18,
            "Sarah Chen",
            date(2024, 1, 15),
            VoteDirection.UP,
        ),
        (
            "2",
            "Keyboard shortcuts",
            "Implement customizable keyboard shortcuts for common actions "
            "to improve productivity.",
            FeatureStatus.PLANNED,
            "Productivity",
            89,
            12,
            "Mike Johnson",
            date(2024, 1, 18),
            None,
        ),
        (
            "3",
            "Export to CSV",
            "Allow users to export all feature requests and voting data "
            "to CSV format for external analysis.",
            FeatureStatus.COMPLETED,
            "Integration",
            156,
            24,
            "Emma Williams",
            date(2024, 1, 10),
            None,
        ),
        (
            "4",
            "Email notifications",
            "Send email alerts when features change status or receive new comments.",
            FeatureStatus.UNDER_REVIEW,
            "Notifications",
            67,
            9,
            "Alex Rodriguez",
            date(2024, 1, 20),
            None,
        ),
        (
            "5",
            "Mobile app",
            "Create native iOS and Android apps for managing feature requests on the go.",
            FeatureStatus.PLANNED,
            "Platform",
            203,
            45,
            "James Lee",
            date(2024, 1, 12),
            None,
        ),
        (
            "6",
            "Advanced filtering",
            "Add more filter options like date range, vote count, and custom tags.",
            FeatureStatus.IN_PROGRESS,
            "Features",
            92,
            15,
            "Lisa Park",
            date(2024, 1, 19),
            None,
        ),
        (
            "7",
            "API webhooks",
            "Trigger webhooks when specific events occur (new feature, status change, etc.).",
            FeatureStatus.PLANNED,
            "Integration",
            78,
            11,
            "David Kim",
            date(2024, 1, 17),
            None,
        ),
        (
            "8",
            "Markdown support in descriptions",
            "Allow rich text formatting in feature descriptions using Markdown syntax.",
            FeatureStatus.COMPLETED,
            "Features",
            134,
            22,
            "Rachel Green",
            date(2024, 1, 8),
            None,
        ),
    ]
    return [
        FeatureRequest(
            id=fid,
            title=title,
            description=desc,
            status=status,
            category=category,
            votes=votes,
            comments=comments,
            author=author,
            date=created,
            user_vote=user_vote,
        )
        for fid, title, desc, status, category, votes, comments, author, created, user_vote in seed
    ]
