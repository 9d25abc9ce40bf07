"""Feature request schemas."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from backend.app.config import settings
from backend.app.models.feature import FeatureStatus, VoteDirection


class FeatureCreate(BaseModel):
    title: str
    description: str
    category: str
    status: FeatureStatus | None = None

    @field_validator("title", "description", "category")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class FeatureVoteCreate(BaseModel):
    direction: VoteDirection


class FeatureResponse(BaseModel):
    id: str
    title: str
    description: str
    status: FeatureStatus
    category: str
    votes: int
    comments: int
    author: str
    date: date
    user_vote: VoteDirection | None = None


class FeatureVoteResponse(BaseModel):
    status: str  # "voted" or "ignored"
    feature: FeatureResponse | None = None


class CategoryCount(BaseModel):
    category: str
    count: int


class CategoryCountsResponse(BaseModel):
    total: int
    categories: list[CategoryCount]


class WidgetFeatureCreate(BaseModel):
    title: str
    description: str
    # Omitted means the form's default; validated against the form's list
    category: str | None = Field(default=None, validate_default=True)

    @field_validator("title", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("category")
    @classmethod
    def _form_category(cls, value: str | None) -> str:
        if value is None:
            return settings.default_category
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        if value not in settings.form_categories:
            raise ValueError(f"unknown category: {value}")
        return value


class WidgetFeatureResponse(BaseModel):
    id: str
    title: str
    status: FeatureStatus
    category: str
    votes: int
    user_vote: VoteDirection | None = None


class WidgetCategoriesResponse(BaseModel):
    categories: list[str]
    default: str
