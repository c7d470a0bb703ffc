"""Wine inventory CRUD endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from aimee.exceptions import WineNotFoundError, WineValidationError
from aimee.schemas.wine import DeleteResponse, WinePayload, WineResponse
from aimee.services.auth import RequireAuth

from ._common import Store

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(wine_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Wine with ID {wine_id} not found",
    )


def _invalid(error: WineValidationError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error": "Missing required fields", "fields": error.fields},
    )


@router.get("", response_model=list[WineResponse])
async def list_wines(_: RequireAuth, store: Store) -> list[WineResponse]:
    """List all wines in inventory order."""
    return [WineResponse.model_validate(wine) for wine in store.list()]


@router.get("/{wine_id}", response_model=WineResponse)
async def get_wine(wine_id: int, _: RequireAuth, store: Store) -> WineResponse:
    """Get a single wine."""
    wine = store.get(wine_id)
    if wine is None:
        raise _not_found(wine_id)
    return WineResponse.model_validate(wine)


@router.post("", response_model=WineResponse, status_code=status.HTTP_201_CREATED)
async def create_wine(
    payload: WinePayload,
    current_user: RequireAuth,
    store: Store,
) -> WineResponse:
    """Add a wine to the inventory."""
    try:
        wine = store.create(payload.model_dump(exclude_none=True))
    except WineValidationError as e:
        raise _invalid(e) from e

    logger.info("User %s added wine %d", current_user.id, wine.id)
    return WineResponse.model_validate(wine)


@router.put("/{wine_id}", response_model=WineResponse)
async def update_wine(
    wine_id: int,
    payload: WinePayload,
    current_user: RequireAuth,
    store: Store,
) -> WineResponse:
    """Replace a wine's fields. Omitted optional fields revert to defaults."""
    try:
        wine = store.update(wine_id, payload.model_dump(exclude_none=True))
    except WineNotFoundError as e:
        raise _not_found(wine_id) from e
    except WineValidationError as e:
        raise _invalid(e) from e

    logger.info("User %s updated wine %d", current_user.id, wine_id)
    return WineResponse.model_validate(wine)


@router.delete("/{wine_id}", response_model=DeleteResponse)
async def delete_wine(
    wine_id: int,
    current_user: RequireAuth,
    store: Store,
) -> DeleteResponse:
    """Remove a wine from the inventory."""
    try:
        store.delete(wine_id)
    except WineNotFoundError as e:
        raise _not_found(wine_id) from e

    logger.info("User %s deleted wine %d", current_user.id, wine_id)
    return DeleteResponse(success=True)
