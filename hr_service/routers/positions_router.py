"""
Position endpoints.

Thin HTTP adapter over ``HRService`` position operations. Service errors
propagate to the application's exception handler.
"""

from typing import Any, Dict, List

import structlog
from fastapi import APIRouter, Depends, Query, Response, status

from ..dependencies import get_hr_service, get_request_context
from ..models import CreatedResponse, ErrorResponse, PositionCreate, PositionResponse
from ..services.hr_service import HRService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/positions", tags=["positions"])


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
    summary="Create position",
)
async def create_position(
    payload: PositionCreate,
    ctx: Dict[str, Any] = Depends(get_request_context),
    service: HRService = Depends(get_hr_service),
):
    """Create a position; name and salary together must be unique."""
    position_id = await service.create_position(ctx, payload.to_entity())
    logger.info("Position created", position_id=position_id)
    return CreatedResponse(id=position_id)


@router.get(
    "",
    response_model=List[PositionResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="List positions",
)
async def list_positions(
    limit: int = Query(10, description="Page size, at most 100"),
    offset: int = Query(1, description="1-based page number"),
    ctx: Dict[str, Any] = Depends(get_request_context),
    service: HRService = Depends(get_hr_service),
):
    """List one page of positions."""
    positions = await service.list_positions(ctx, limit, offset)
    return [PositionResponse.model_validate(p) for p in positions]


@router.get(
    "/{position_id}",
    response_model=PositionResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get position",
)
async def get_position(
    position_id: str,
    ctx: Dict[str, Any] = Depends(get_request_context),
    service: HRService = Depends(get_hr_service),
):
    """Get a single position by identifier."""
    position = await service.get_position(ctx, position_id)
    return PositionResponse.model_validate(position)


@router.put(
    "/{position_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Replace position",
)
async def update_position(
    position_id: str,
    payload: PositionCreate,
    ctx: Dict[str, Any] = Depends(get_request_context),
    service: HRService = Depends(get_hr_service),
):
    """Replace a position; the identifier comes from the path."""
    await service.replace_position(ctx, position_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{position_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete position",
)
async def delete_position(
    position_id: str,
    ctx: Dict[str, Any] = Depends(get_request_context),
    service: HRService = Depends(get_hr_service),
):
    """Delete a position. Employees holding it are left untouched."""
    await service.delete_position(ctx, position_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
