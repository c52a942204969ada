"""Recipe endpoints.

Provides:
- Public listing, ranking and lookup of recipes
- Authoring (create, update, delete, photo upload) for owners and admins
- Rating and favoriting for signed-in users
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from recipebox.api.dependencies import get_recipe_service, validated_photo
from recipebox.api.guards import require_recipe_delete, require_recipe_update
from recipebox.auth.dependencies import CurrentUser, RequirePermissions
from recipebox.auth.permissions import Permission
from recipebox.mappers import (
    build_favorite_response,
    build_recipe_response,
    build_recipe_responses,
)
from recipebox.schemas.envelope import (
    EmptyData,
    Envelope,
    ListEnvelope,
    PageEnvelope,
)
from recipebox.schemas.recipe import (
    FavoriteToggleResponse,
    RatingRequest,
    RecipeCreate,
    RecipeListParams,
    RecipeResponse,
    RecipeUpdate,
)
from recipebox.services.recipes import Recipe, RecipeService
from recipebox.storage import PhotoUpload


router = APIRouter(prefix="/recipes", tags=["Recipes"])

RecipeId = Annotated[str, Path(description="Recipe identifier")]
Service = Annotated[RecipeService, Depends(get_recipe_service)]

_NOT_FOUND = {404: {"description": "Recipe not found"}}
_AUTH_ERRORS = {
    401: {"description": "Missing credentials, or not the owner/admin"},
    403: {"description": "Insufficient permissions"},
}


# =============================================================================
# Collections
# =============================================================================


@router.get(
    "",
    response_model=PageEnvelope[RecipeResponse],
    summary="List recipes",
    description=(
        "Paginated recipe listing. Filters: cuisine, difficulty, tag, diet, "
        "search. Sort with a comma-separated field list, '-' for descending."
    ),
)
async def list_recipes(
    params: Annotated[RecipeListParams, Query()],
    service: Service,
) -> PageEnvelope[RecipeResponse]:
    recipes, pagination = await service.list_recipes(params)
    data = build_recipe_responses(recipes)
    return PageEnvelope[RecipeResponse](
        count=len(data),
        data=data,
        pagination=pagination,
    )


@router.get(
    "/top-rated",
    response_model=ListEnvelope[RecipeResponse],
    summary="Top rated recipes",
)
async def top_rated_recipes(service: Service) -> ListEnvelope[RecipeResponse]:
    """Best rated recipes, highest average first."""
    recipes = await service.top_rated()
    return ListEnvelope[RecipeResponse].of(build_recipe_responses(recipes))


@router.get(
    "/favorites",
    response_model=ListEnvelope[RecipeResponse],
    summary="Current user's favorite recipes",
    responses={401: _AUTH_ERRORS[401]},
)
async def favorite_recipes(
    user: Annotated[
        CurrentUser, Depends(RequirePermissions(Permission.RECIPE_READ))
    ],
    service: Service,
) -> ListEnvelope[RecipeResponse]:
    recipes = await service.favorites(user.id)
    return ListEnvelope[RecipeResponse].of(build_recipe_responses(recipes))


@router.get(
    "/user/{user_id}",
    response_model=ListEnvelope[RecipeResponse],
    summary="Recipes by owner",
)
async def recipes_by_user(
    user_id: Annotated[str, Path(description="Owner's user id")],
    service: Service,
) -> ListEnvelope[RecipeResponse]:
    recipes = await service.recipes_by_user(user_id)
    return ListEnvelope[RecipeResponse].of(build_recipe_responses(recipes))


# =============================================================================
# Single recipe
# =============================================================================


@router.get(
    "/{recipe_id}",
    response_model=Envelope[RecipeResponse],
    summary="Get a recipe",
    description="Returns one recipe and counts the retrieval as a view.",
    responses=_NOT_FOUND,
)
async def get_recipe(recipe_id: RecipeId, service: Service) -> Envelope[RecipeResponse]:
    recipe = await service.view_recipe(recipe_id)
    return Envelope[RecipeResponse](data=build_recipe_response(recipe))


@router.post(
    "",
    response_model=Envelope[RecipeResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create a recipe",
    responses=_AUTH_ERRORS,
)
async def create_recipe(
    body: RecipeCreate,
    user: Annotated[
        CurrentUser, Depends(RequirePermissions(Permission.RECIPE_CREATE))
    ],
    service: Service,
) -> Envelope[RecipeResponse]:
    """Create a recipe owned by the caller."""
    recipe = await service.create_recipe(body, user.id)
    return Envelope[RecipeResponse](data=build_recipe_response(recipe))


@router.put(
    "/{recipe_id}",
    response_model=Envelope[RecipeResponse],
    summary="Update a recipe",
    description="Partial update of content fields. Owner or admin only.",
    responses={**_NOT_FOUND, **_AUTH_ERRORS},
)
async def update_recipe(
    body: RecipeUpdate,
    recipe: Annotated[Recipe, Depends(require_recipe_update)],
    service: Service,
) -> Envelope[RecipeResponse]:
    updated = await service.update_recipe(recipe, body)
    return Envelope[RecipeResponse](data=build_recipe_response(updated))


@router.delete(
    "/{recipe_id}",
    response_model=Envelope[EmptyData],
    summary="Delete a recipe",
    responses={**_NOT_FOUND, **_AUTH_ERRORS},
)
async def delete_recipe(
    recipe: Annotated[Recipe, Depends(require_recipe_delete)],
    service: Service,
) -> Envelope[EmptyData]:
    await service.delete_recipe(recipe)
    return Envelope[EmptyData](data=EmptyData())


@router.put(
    "/{recipe_id}/photo",
    response_model=Envelope[str],
    summary="Upload a recipe photo",
    description=(
        "Multipart upload in the 'file' field. Images only, up to the "
        "configured size. Owner or admin only."
    ),
    responses={
        **_NOT_FOUND,
        **_AUTH_ERRORS,
        400: {"description": "Missing, non-image or oversized file"},
        500: {"description": "File could not be stored"},
    },
)
async def upload_recipe_photo(
    recipe: Annotated[Recipe, Depends(require_recipe_update)],
    photo: Annotated[PhotoUpload, Depends(validated_photo)],
    service: Service,
) -> Envelope[str]:
    """Store the photo as ``photo_{id}{ext}`` and return the file name."""
    filename = await service.upload_photo(recipe, photo)
    return Envelope[str](data=filename)


@router.post(
    "/{recipe_id}/rating",
    response_model=Envelope[RecipeResponse],
    summary="Rate a recipe",
    description=(
        "Adds the caller's rating, or overwrites it if one exists. A re-rating "
        "without a comment keeps the previous comment."
    ),
    responses={**_NOT_FOUND, **_AUTH_ERRORS},
)
async def rate_recipe(
    recipe_id: RecipeId,
    body: RatingRequest,
    user: Annotated[CurrentUser, Depends(RequirePermissions(Permission.RECIPE_RATE))],
    service: Service,
) -> Envelope[RecipeResponse]:
    recipe = await service.rate_recipe(recipe_id, user.id, body.rating, body.comment)
    return Envelope[RecipeResponse](data=build_recipe_response(recipe))


@router.put(
    "/{recipe_id}/favorite",
    response_model=Envelope[FavoriteToggleResponse],
    summary="Toggle favorite",
    responses={**_NOT_FOUND, **_AUTH_ERRORS},
)
async def toggle_favorite(
    recipe_id: RecipeId,
    user: Annotated[
        CurrentUser, Depends(RequirePermissions(Permission.RECIPE_FAVORITE))
    ],
    service: Service,
) -> Envelope[FavoriteToggleResponse]:
    """Add or remove the recipe from the caller's favorites."""
    recipe = await service.toggle_favorite(recipe_id, user.id)
    return Envelope[FavoriteToggleResponse](
        data=build_favorite_response(recipe, user.id)
    )
