"""Recipe domain model.

A ``Recipe`` is one stored document: the author's content plus the embedded
ratings, the favorite membership list and the counters derived from them.
The mutation helpers here keep the per-user uniqueness of ratings and the
``favorite_count == len(favorited_by)`` invariant; persisting the result is
the caller's job.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from recipebox.schemas.base import APIRequest
from recipebox.schemas.recipe import RatingValue, RecipeFields


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class Rating(APIRequest):
    """A single user's rating, unique per (recipe, user)."""

    user: str
    rating: RatingValue
    comment: str = ""
    created_at: datetime = Field(default_factory=utcnow)


class Recipe(RecipeFields):
    """Stored recipe document."""

    id: str
    user: str
    photo: str | None = None
    ratings: list[Rating] = Field(default_factory=list)
    average_rating: float = Field(default=0, ge=0, le=5)
    favorited_by: list[str] = Field(default_factory=list)
    favorite_count: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def find_rating(self, user_id: str) -> Rating | None:
        """Return the rating left by ``user_id``, if any."""
        for entry in self.ratings:
            if entry.user == user_id:
                return entry
        return None

    def upsert_rating(
        self,
        user_id: str,
        rating: int,
        comment: str | None = None,
        now: datetime | None = None,
    ) -> Rating:
        """Insert or overwrite the user's rating.

        An existing comment is only replaced by a non-empty one.
        """
        entry = self.find_rating(user_id)
        if entry is not None:
            entry.rating = rating
            if comment:
                entry.comment = comment
            return entry

        entry = Rating(
            user=user_id,
            rating=rating,
            comment=comment or "",
            created_at=now or utcnow(),
        )
        self.ratings.append(entry)
        return entry

    def toggle_favorite(self, user_id: str) -> bool:
        """Flip the user's favorite membership and return the new state."""
        if user_id in self.favorited_by:
            self.favorited_by.remove(user_id)
            favorited = False
        else:
            self.favorited_by.append(user_id)
            favorited = True
        self.favorite_count = len(self.favorited_by)
        return favorited

    def is_favorited_by(self, user_id: str) -> bool:
        return user_id in self.favorited_by

    def record_view(self) -> int:
        """Count one retrieval and return the new total."""
        self.views += 1
        return self.views

    def touch(self, now: datetime | None = None) -> None:
        """Refresh ``updated_at`` before a save."""
        self.updated_at = now or utcnow()

    @property
    def rating_values(self) -> list[int]:
        return [entry.rating for entry in self.ratings]
