"""
In-memory HR repository.

Keeps positions and employees in insertion-ordered dicts guarded by a
single lock. Snapshots returned by ``get_positions``/``get_employees`` are
copies taken under the lock (copy-on-read), never live views.
"""

import threading
import uuid
from typing import Dict, Optional

import structlog

from ..domain.entities import Employee, Position
from ..domain.exceptions import NotFoundException
from .hr_repository import IHRRepository

logger = structlog.get_logger(__name__)


def _key(identifier: str) -> str:
    """Canonical storage key: the hyphenated lowercase UUID, or the raw string."""
    try:
        return str(uuid.UUID(identifier))
    except (ValueError, TypeError, AttributeError):
        return identifier


class MemoryHRRepository(IHRRepository):
    """
    In-memory implementation of the HR repository.

    Each primitive runs entirely under ``self._lock`` without awaiting, so it
    is atomic with respect to other coroutines and threads. Identifiers are
    accepted in any textual UUID form. Update and delete of an unknown
    identifier raise ``NotFoundException``.

    Attributes:
        positions: Stored positions keyed by identifier string
        employees: Stored employees keyed by identifier string
    """

    def __init__(self) -> None:
        self.positions: Dict[str, Position] = {}
        self.employees: Dict[str, Employee] = {}
        self._lock = threading.Lock()

    async def add_position(self, position: Position) -> None:
        with self._lock:
            self.positions[str(position.id)] = position
        logger.debug("Position stored", position_id=str(position.id))

    async def get_positions(self) -> Dict[str, Position]:
        with self._lock:
            return dict(self.positions)

    async def get_position(self, position_id: str) -> Optional[Position]:
        with self._lock:
            return self.positions.get(_key(position_id))

    async def update_position(self, position: Position) -> None:
        key = str(position.id)
        with self._lock:
            if key not in self.positions:
                raise NotFoundException("Position", key)
            self.positions[key] = position
        logger.debug("Position updated", position_id=key)

    async def delete_position(self, position_id: str) -> None:
        key = _key(position_id)
        with self._lock:
            if self.positions.pop(key, None) is None:
                raise NotFoundException("Position", position_id)
        logger.debug("Position deleted", position_id=key)

    async def add_employee(self, employee: Employee) -> None:
        with self._lock:
            self.employees[str(employee.id)] = employee
        logger.debug("Employee stored", employee_id=str(employee.id))

    async def get_employees(self) -> Dict[str, Employee]:
        with self._lock:
            return dict(self.employees)

    async def get_employee(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self.employees.get(_key(employee_id))

    async def update_employee(self, employee: Employee) -> None:
        key = str(employee.id)
        with self._lock:
            if key not in self.employees:
                raise NotFoundException("Employee", key)
            self.employees[key] = employee
        logger.debug("Employee updated", employee_id=key)

    async def delete_employee(self, employee_id: str) -> None:
        key = _key(employee_id)
        with self._lock:
            if self.employees.pop(key, None) is None:
                raise NotFoundException("Employee", employee_id)
        logger.debug("Employee deleted", employee_id=key)
