from backend.app.schemas.feature import (
    CategoryCount,
    CategoryCountsResponse,
    FeatureCreate,
    FeatureResponse,
    FeatureVoteCreate,
    FeatureVoteResponse,
    WidgetCategoriesResponse,
    WidgetFeatureCreate,
    WidgetFeatureResponse,
)
from backend.app.schemas.user import UserResponse

__all__ = [
    "UserResponse",
    "FeatureCreate",
    "FeatureVoteCreate",
    "FeatureResponse",
    "FeatureVoteResponse",
    "CategoryCount",
    "CategoryCountsResponse",
    "WidgetFeatureCreate",
    "WidgetFeatureResponse",
    "WidgetCategoriesResponse",
]
