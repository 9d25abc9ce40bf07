"""Shared fixtures: an isolated ledger wired into the app, and record helpers."""

import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from backend.app.main import app
from backend.app.models.feature import FeatureRequest, FeatureStatus, VoteDirection
from backend.app.services.vote_ledger import VoteLedger
from backend.app.store import get_ledger, sample_features

TODAY = date(2024, 2, 1)


def make_feature(
    title: str = "Test Feature",
    description: str = "A test feature",
    category: str = "Features",
    status: FeatureStatus = FeatureStatus.PLANNED,
    votes: int = 0,
    user_vote: VoteDirection | None = None,
    created: date = date(2024, 1, 1),
    feature_id: str | None = None,
    author: str = "someone",
) -> FeatureRequest:
    return FeatureRequest(
        id=feature_id or str(uuid.uuid4()),
        title=title,
        description=description,
        status=status,
        category=category,
        votes=votes,
        comments=0,
        author=author,
        date=created,
        user_vote=user_vote,
    )


@asynccontextmanager
async def api_client(ledger: VoteLedger) -> AsyncIterator[AsyncClient]:
    """HTTP client for the app with ``ledger`` standing in for the process ledger."""
    app.dependency_overrides[get_ledger] = lambda: ledger
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def ledger() -> VoteLedger:
    return VoteLedger(author="tester", today=lambda: TODAY)


@pytest.fixture
def sample_ledger() -> VoteLedger:
    return VoteLedger(author="tester", features=sample_features(), today=lambda: TODAY)


@pytest.fixture
async def client(ledger: VoteLedger) -> AsyncIterator[AsyncClient]:
    async with api_client(ledger) as ac:
        yield ac


@pytest.fixture
async def sample_client(sample_ledger: VoteLedger) -> AsyncIterator[AsyncClient]:
    async with api_client(sample_ledger) as ac:
        yield ac
