"""Feature request endpoints for the main board."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from backend.app.models.feature import FeatureRequest, VoteDirection
from backend.app.schemas.feature import (
    CategoryCountsResponse,
    FeatureCreate,
    FeatureResponse,
    FeatureVoteCreate,
    FeatureVoteResponse,
)
from backend.app.services.view_projector import ALL_CATEGORIES, SortKey, project
from backend.app.services.vote_ledger import VoteLedger
from backend.app.store import get_ledger

router = APIRouter(prefix="/features", tags=["features"])


def feature_to_dict(feature: FeatureRequest) -> dict:
    return asdict(feature)


def record_vote(ledger: VoteLedger, feature_id: str, direction: VoteDirection) -> dict:
    """Apply a vote and describe the outcome for a vote response."""
    # Votes on a missing request are a no-op, not a 404
    ledger.apply_vote(feature_id, direction)
    feature = ledger.get(feature_id)
    if feature is None:
        return {"status": "ignored", "feature": None}
    return {"status": "voted", "feature": feature_to_dict(feature)}


@router.get("", response_model=list[FeatureResponse])
async def list_features(
    category: str = ALL_CATEGORIES,
    sort: SortKey = SortKey.VOTES,
    ledger: VoteLedger = Depends(get_ledger),
) -> list[dict]:
    return [feature_to_dict(f) for f in project(ledger.features, category, sort)]


@router.post("", response_model=FeatureResponse, status_code=201)
async def create_feature(data: FeatureCreate, ledger: VoteLedger = Depends(get_ledger)) -> dict:
    feature = ledger.create_feature(
        title=data.title,
        description=data.description,
        category=data.category,
        status=data.status,
    )
    return feature_to_dict(feature)


@router.get("/categories", response_model=CategoryCountsResponse)
async def list_categories(ledger: VoteLedger = Depends(get_ledger)) -> dict:
    counts = ledger.category_counts()
    return {
        "total": len(ledger),
        "categories": [{"category": name, "count": n} for name, n in counts.items()],
    }


@router.get("/{feature_id}", response_model=FeatureResponse)
async def get_feature(feature_id: str, ledger: VoteLedger = Depends(get_ledger)) -> dict:
    feature = ledger.get(feature_id)
    if not feature:
        raise HTTPException(status_code=404, detail="Feature not found")
    return feature_to_dict(feature)


@router.post("/{feature_id}/vote", response_model=FeatureVoteResponse)
async def vote_feature(
    feature_id: str,
    data: FeatureVoteCreate,
    ledger: VoteLedger = Depends(get_ledger),
) -> dict:
    return record_vote(ledger, feature_id, data.direction)
