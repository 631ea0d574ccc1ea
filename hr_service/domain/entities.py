"""
Domain entities for HR records.

Positions and employees are plain value records. All rules about them
(uniqueness, referential integrity, identifier assignment) live in the
service layer.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

# Reserved identifier meaning "absent". Freshly constructed entities carry it
# until the service assigns a real one.
NIL_ID = UUID(int=0)


@dataclass
class Position:
    """
    A job position.

    Two positions are duplicates when both name and salary match. Salary is
    compared as an exact decimal, so 500 and 500.00 are the same amount.

    Attributes:
        name: Position title
        salary: Exact salary amount
        id: Identifier assigned on creation
    """

    name: str
    salary: Decimal
    id: UUID = NIL_ID

    @property
    def uniqueness_key(self) -> tuple[str, Decimal]:
        """Key used to detect duplicate positions."""
        return (self.name, self.salary)


@dataclass
class Employee:
    """
    An employee holding exactly one position.

    Attributes:
        first_name: Given name
        last_name: Family name
        position_id: Identifier of the held position
        id: Identifier assigned on creation
    """

    first_name: str
    last_name: str
    position_id: UUID
    id: UUID = NIL_ID

    @property
    def uniqueness_key(self) -> tuple[str, str]:
        """Key used to detect duplicate employees (position is ignored)."""
        return (self.first_name, self.last_name)
