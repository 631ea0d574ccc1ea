"""
HR repository interface (Abstract Base Class).

Defines the keyed-store contract for positions and employees independent
of the underlying storage mechanism. Every primitive is expected to be
atomic on its own; sequences of primitives are not.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..domain.entities import Employee, Position


class IHRRepository(ABC):
    """
    Abstract repository interface for position and employee records.

    Entities are keyed by the canonical string form of their identifier.
    Lookups by identifier string accept any textual UUID form (uppercase,
    braced, URN) and resolve to the same record.
    """

    @abstractmethod
    async def add_position(self, position: Position) -> None:
        """
        Store a new position under its identifier.

        Args:
            position: Position entity with an assigned identifier
        """
        pass

    @abstractmethod
    async def get_positions(self) -> Dict[str, Position]:
        """
        Get a point-in-time snapshot of all positions.

        Returns:
            Mapping of identifier string to position. Iteration order is
            the repository's own and is not guaranteed to be stable.
        """
        pass

    @abstractmethod
    async def get_position(self, position_id: str) -> Optional[Position]:
        """
        Find a position by identifier.

        Args:
            position_id: Identifier string

        Returns:
            Position if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_position(self, position: Position) -> None:
        """
        Replace the position stored under ``position.id``.

        Raises:
            NotFoundException: If implementations track existence
        """
        pass

    @abstractmethod
    async def delete_position(self, position_id: str) -> None:
        """
        Remove the position stored under ``position_id``.

        Raises:
            NotFoundException: If implementations track existence
        """
        pass

    @abstractmethod
    async def add_employee(self, employee: Employee) -> None:
        """Store a new employee under its identifier."""
        pass

    @abstractmethod
    async def get_employees(self) -> Dict[str, Employee]:
        """Get a point-in-time snapshot of all employees."""
        pass

    @abstractmethod
    async def get_employee(self, employee_id: str) -> Optional[Employee]:
        """Find an employee by identifier, None if absent."""
        pass

    @abstractmethod
    async def update_employee(self, employee: Employee) -> None:
        """Replace the employee stored under ``employee.id``."""
        pass

    @abstractmethod
    async def delete_employee(self, employee_id: str) -> None:
        """Remove the employee stored under ``employee_id``."""
        pass
