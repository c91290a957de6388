"""
Pydantic schemas for recipe ratings.

A rating is a 1 to 5 star score with an optional comment, left by a
user for a recipe.  The score range is enforced by ``RatingService``
rather than here so that out of range values produce a domain
``ValidationError``.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .base import utcnow


MAX_COMMENT_LENGTH = 1000


class RatingInput(BaseModel):
    """Schema for creating or updating a rating."""

    score: int = Field(..., description="Rating from 1 to 5")
    comment: str = Field("", description="Optional textual comment")

    @field_validator("comment")
    @classmethod
    def sanitize_comment(cls, v: str) -> str:
        """Trim whitespace from the comment and enforce a maximum length."""
        v = v.strip()
        if len(v) > MAX_COMMENT_LENGTH:
            raise ValueError(f"Comment must be {MAX_COMMENT_LENGTH} characters or fewer")
        return v


class Rating(RatingInput):
    """Schema for a stored rating."""

    id: str
    recipe_id: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class AverageRating(BaseModel):
    """Average score of a recipe."""

    recipe_id: str
    average: float


def new_rating(rating_id: str, recipe_id: str, user_id: str, data: RatingInput) -> Rating:
    now = utcnow()
    return Rating(
        id=rating_id,
        recipe_id=recipe_id,
        user_id=user_id,
        score=data.score,
        comment=data.comment,
        created_at=now,
        updated_at=now,
    )


def update_rating(original: Rating, data: RatingInput) -> Rating:
    """Replace score and comment; id, recipe, owner and creation time are kept."""
    return Rating(
        id=original.id,
        recipe_id=original.recipe_id,
        user_id=original.user_id,
        score=data.score,
        comment=data.comment,
        created_at=original.created_at,
        updated_at=utcnow(),
    )
