"""Endpoints backing the embeddable voting widget.

The widget shows a compact, vote-sorted list and a quick submission form
whose category picker is limited to a fixed set of labels.
"""

from fastapi import APIRouter, Depends

from backend.app.api.features import feature_to_dict, record_vote
from backend.app.config import settings
from backend.app.schemas.feature import (
    FeatureVoteCreate,
    FeatureVoteResponse,
    WidgetCategoriesResponse,
    WidgetFeatureCreate,
    WidgetFeatureResponse,
)
from backend.app.services.view_projector import ALL_CATEGORIES, SortKey, project
from backend.app.services.vote_ledger import VoteLedger
from backend.app.store import get_ledger

router = APIRouter(prefix="/widget", tags=["widget"])


@router.get("/features", response_model=list[WidgetFeatureResponse])
async def list_widget_features(
    sort: SortKey = SortKey.VOTES,
    ledger: VoteLedger = Depends(get_ledger),
) -> list[dict]:
    top = project(ledger.features, ALL_CATEGORIES, sort)[: settings.widget_limit]
    return [feature_to_dict(f) for f in top]


@router.get("/categories", response_model=WidgetCategoriesResponse)
async def list_widget_categories() -> dict:
    return {"categories": settings.form_categories, "default": settings.default_category}


@router.post("/features", response_model=WidgetFeatureResponse, status_code=201)
async def submit_feature(
    data: WidgetFeatureCreate, ledger: VoteLedger = Depends(get_ledger)
) -> dict:
    feature = ledger.create_feature(
        title=data.title,
        description=data.description,
        category=data.category,
    )
    return feature_to_dict(feature)


@router.post("/features/{feature_id}/vote", response_model=FeatureVoteResponse)
async def vote_widget_feature(
    feature_id: str,
    data: FeatureVoteCreate,
    ledger: VoteLedger = Depends(get_ledger),
) -> dict:
    return record_vote(ledger, feature_id, data.direction)
