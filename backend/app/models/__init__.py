from backend.app.models.feature import FeatureRequest, FeatureStatus, VoteDirection

__all__ = [
    "FeatureRequest",
    "FeatureStatus",
    "VoteDirection",
]
