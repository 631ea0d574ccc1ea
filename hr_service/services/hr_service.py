"""
Business logic service layer.

Orchestrates position and employee operations: correlation gate,
validation, uniqueness and referential checks, pagination. Storage is
delegated to an ``IHRRepository``.
"""

import asyncio
import dataclasses
import uuid
from typing import Any, List, Mapping, Optional

import structlog

from ..domain.entities import NIL_ID, Employee, Position
from ..domain.exceptions import (
    BadRequestException,
    EmployeeAlreadyExistsException,
    NotFoundException,
    ParseException,
    PositionAlreadyExistsException,
    PositionDoesNotExistException,
)
from ..repositories.hr_repository import IHRRepository
from .correlation import require_correlation_id
from .pagination import check_page_limit, paginate

Context = Mapping[str, Any]


def _parse_id(value: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        return None


class HRService:
    """
    HR service for positions and employees.

    Every operation takes a call context first and fails with
    ``LogException`` when it carries no correlation identifier, before any
    other work. Create operations are serialised per entity kind so the
    uniqueness check and the insert cannot interleave with another create.
    Errors are raised to the caller and never logged here.
    """

    def __init__(self, repository: IHRRepository, logger: Any = None):
        """
        Initialize HR service.

        Args:
            repository: Keyed store for positions and employees
            logger: structlog logger receiving correlation events
        """
        self.repository = repository
        self.logger = logger if logger is not None else structlog.get_logger(__name__)
        self._position_create_lock = asyncio.Lock()
        self._employee_create_lock = asyncio.Lock()

    def _check_context(self, ctx: Context, operation: str) -> None:
        correlation_id = require_correlation_id(ctx)
        self.logger.info(
            "correlation_id checked", correlation_id=correlation_id, operation=operation
        )

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------

    async def create_position(self, ctx: Context, position: Position) -> str:
        """
        Create a position with a fresh identifier.

        Args:
            ctx: Call context carrying the correlation identifier
            position: Position to create; its ``id`` is ignored

        Returns:
            The new identifier as a string

        Raises:
            LogException: If the correlation identifier is missing
            PositionAlreadyExistsException: If name and salary are taken
        """
        self._check_context(ctx, "create_position")

        async with self._position_create_lock:
            existing = await self.repository.get_positions()
            for value in existing.values():
                if value.uniqueness_key == position.uniqueness_key:
                    raise PositionAlreadyExistsException(position.name, position.salary)

            created = dataclasses.replace(position, id=uuid.uuid4())
            await self.repository.add_position(created)

        return str(created.id)

    async def get_position(self, ctx: Context, position_id: str) -> Position:
        """
        Get a position by identifier.

        Raises:
            LogException: If the correlation identifier is missing
            BadRequestException: If ``position_id`` is not a UUID
            NotFoundException: If no such position exists
        """
        self._check_context(ctx, "get_position")

        parsed = _parse_id(position_id)
        if parsed is None:
            raise BadRequestException(f"invalid identifier {position_id!r}", field="id")

        position = await self.repository.get_position(str(parsed))
        if position is None:
            raise NotFoundException("Position", position_id)
        return position

    async def update_position(self, ctx: Context, position: Position) -> None:
        """
        Replace a stored position.

        Raises:
            LogException: If the correlation identifier is missing
            BadRequestException: If the position has the nil identifier
        """
        self._check_context(ctx, "update_position")
        await self._store_position_update(position)

    async def replace_position(self, ctx: Context, position_id: str, position: Position) -> None:
        """
        Replace the position stored under a raw identifier string.

        Same as ``update_position`` with ``position_id`` taking the place of
        ``position.id``; the identifier is parsed after the correlation gate.

        Raises:
            LogException: If the correlation identifier is missing
            BadRequestException: If ``position_id`` is not a UUID or is nil
        """
        self._check_context(ctx, "update_position")

        parsed = _parse_id(position_id)
        if parsed is None:
            raise BadRequestException(f"invalid identifier {position_id!r}", field="id")
        await self._store_position_update(dataclasses.replace(position, id=parsed))

    async def _store_position_update(self, position: Position) -> None:
        if position.id == NIL_ID:
            raise BadRequestException("identifier must be set", field="id")
        await self.repository.update_position(position)

    async def delete_position(self, ctx: Context, position_id: str) -> None:
        """Delete a position; repository errors propagate unchanged."""
        self._check_context(ctx, "delete_position")
        await self.repository.delete_position(position_id)

    async def list_positions(self, ctx: Context, limit: int, offset: int) -> List[Position]:
        """
        List one page of positions.

        Args:
            ctx: Call context carrying the correlation identifier
            limit: Page size, at most 100
            offset: 1-based page number

        Raises:
            BadRequestException: If ``limit`` is above 100
            LogException: If the correlation identifier is missing
            NotFoundException: If the page is out of range
        """
        check_page_limit(limit)
        self._check_context(ctx, "list_positions")

        snapshot = await self.repository.get_positions()
        return paginate(list(snapshot.values()), limit, offset)

    # ------------------------------------------------------------------
    # Employees
    # ------------------------------------------------------------------

    async def create_employee(self, ctx: Context, employee: Employee) -> str:
        """
        Create an employee with a fresh identifier.

        The referenced position must exist at this moment; it is not
        re-checked later.

        Raises:
            LogException: If the correlation identifier is missing
            PositionDoesNotExistException: If the position is unknown
            EmployeeAlreadyExistsException: If first and last name are taken
        """
        self._check_context(ctx, "create_employee")

        async with self._employee_create_lock:
            position = await self.repository.get_position(str(employee.position_id))
            if position is None:
                raise PositionDoesNotExistException(str(employee.position_id))

            existing = await self.repository.get_employees()
            for value in existing.values():
                if value.uniqueness_key == employee.uniqueness_key:
                    raise EmployeeAlreadyExistsException(
                        employee.first_name, employee.last_name
                    )

            created = dataclasses.replace(employee, id=uuid.uuid4())
            await self.repository.add_employee(created)

        return str(created.id)

    async def get_employee(self, ctx: Context, employee_id: str) -> Employee:
        """
        Get an employee by identifier.

        Raises:
            LogException: If the correlation identifier is missing
            ParseException: If ``employee_id`` is not a UUID
            NotFoundException: If no such employee exists
        """
        self._check_context(ctx, "get_employee")

        parsed = _parse_id(employee_id)
        if parsed is None:
            raise ParseException(employee_id)

        employee = await self.repository.get_employee(str(parsed))
        if employee is None:
            raise NotFoundException("Employee", employee_id)
        return employee

    async def update_employee(self, ctx: Context, employee: Employee) -> None:
        """Replace a stored employee; nil identifiers are rejected."""
        self._check_context(ctx, "update_employee")
        await self._store_employee_update(employee)

    async def replace_employee(self, ctx: Context, employee_id: str, employee: Employee) -> None:
        """Replace the employee stored under a raw identifier string (see ``replace_position``)."""
        self._check_context(ctx, "update_employee")

        parsed = _parse_id(employee_id)
        if parsed is None:
            raise BadRequestException(f"invalid identifier {employee_id!r}", field="id")
        await self._store_employee_update(dataclasses.replace(employee, id=parsed))

    async def _store_employee_update(self, employee: Employee) -> None:
        if employee.id == NIL_ID:
            raise BadRequestException("identifier must be set", field="id")
        await self.repository.update_employee(employee)

    async def delete_employee(self, ctx: Context, employee_id: str) -> None:
        """Delete an employee; repository errors propagate unchanged."""
        self._check_context(ctx, "delete_employee")
        await self.repository.delete_employee(employee_id)

    async def list_employees(self, ctx: Context, limit: int, offset: int) -> List[Employee]:
        """List one page of employees (see ``list_positions``)."""
        check_page_limit(limit)
        self._check_context(ctx, "list_employees")

        snapshot = await self.repository.get_employees()
        return paginate(list(snapshot.values()), limit, offset)
