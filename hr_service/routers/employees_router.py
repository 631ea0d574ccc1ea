"""
Employee endpoints.

Thin HTTP adapter over ``HRService`` employee operations.
"""

from typing import Any, Dict, List

import structlog
from fastapi import APIRouter, Depends, Query, Response, status

from ..dependencies import get_hr_service, get_request_context
from ..models import CreatedResponse, EmployeeCreate, EmployeeResponse, ErrorResponse
from ..services.hr_service import HRService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Create employee",
)
async def create_employee(
    payload: EmployeeCreate,
    ctx: Dict[str, Any] = Depends(get_request_context),
    service: HRService = Depends(get_hr_service),
):
    """Create an employee holding an existing position."""
    employee_id = await service.create_employee(ctx, payload.to_entity())
    logger.info("Employee created", employee_id=employee_id)
    return CreatedResponse(id=employee_id)


@router.get(
    "",
    response_model=List[EmployeeResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="List employees",
)
async def list_employees(
    limit: int = Query(10, description="Page size, at most 100"),
    offset: int = Query(1, description="1-based page number"),
    ctx: Dict[str, Any] = Depends(get_request_context),
    service: HRService = Depends(get_hr_service),
):
    employees = await service.list_employees(ctx, limit, offset)
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get employee",
)
async def get_employee(
    employee_id: str,
    ctx: Dict[str, Any] = Depends(get_request_context),
    service: HRService = Depends(get_hr_service),
):
    employee = await service.get_employee(ctx, employee_id)
    return EmployeeResponse.model_validate(employee)


@router.put(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Replace employee",
)
async def update_employee(
    employee_id: str,
    payload: EmployeeCreate,
    ctx: Dict[str, Any] = Depends(get_request_context),
    service: HRService = Depends(get_hr_service),
):
    """Replace an employee; the position reference is not re-checked."""
    await service.replace_employee(ctx, employee_id, payload.to_entity())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
    summary="Delete employee",
)
async def delete_employee(
    employee_id: str,
    ctx: Dict[str, Any] = Depends(get_request_context),
    service: HRService = Depends(get_hr_service),
):
    await service.delete_employee(ctx, employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
