"""Uniform success envelopes wrapping every API payload.

``Envelope`` carries a single object, ``ListEnvelope`` adds ``count`` and
``PageEnvelope`` adds ``pagination`` on top of that.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from recipebox.schemas.base import APIResponse


T = TypeVar("T")


class PageRef(APIResponse):
    """Pointer to a neighbouring page."""

    page: int
    limit: int


class Pagination(APIResponse):
    """Pagination metadata for list responses."""

    total: int
    page: int
    limit: int
    next: PageRef | None = None
    prev: PageRef | None = None

    @classmethod
    def build(cls, *, total: int, page: int, limit: int) -> Pagination:
        """Compute next/prev references from the total item count."""
        return cls(
            total=total,
            page=page,
            limit=limit,
            next=PageRef(page=page + 1, limit=limit) if page * limit < total else None,
            prev=PageRef(page=page - 1, limit=limit) if page > 1 else None,
        )


class Envelope(APIResponse, Generic[T]):
    """``{success, data}`` wrapper."""

    success: bool = True
    data: T


class ListEnvelope(APIResponse, Generic[T]):
    """``{success, count, data}`` wrapper for collections."""

    success: bool = True
    count: int
    data: list[T]

    @classmethod
    def of(cls, items: list[T]) -> ListEnvelope[T]:
        return cls(count=len(items), data=items)


class PageEnvelope(ListEnvelope[T], Generic[T]):
    """Collection wrapper with pagination metadata."""

    pagination: Pagination


class EmptyData(APIResponse):
    """Empty object payload returned by deletes."""
