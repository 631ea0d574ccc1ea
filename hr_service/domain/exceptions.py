"""
Custom exceptions for the HR service domain.

These exceptions form a closed taxonomy of failure kinds. They are
independent of infrastructure concerns; mapping a kind to an HTTP status
is the transport layer's job.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Public failure kinds returned by the service."""

    LOG_ERROR = "LogError"
    BAD_REQUEST = "BadRequest"
    NOT_FOUND = "NotFound"
    PARSE_ERROR = "ParseError"
    POSITION_ALREADY_EXISTS = "PositionAlreadyExists"
    POSITION_DOES_NOT_EXIST = "PositionDoesNotExist"
    EMPLOYEE_ALREADY_EXISTS = "EmployeeAlreadyExists"


class HRServiceException(Exception):
    """Base exception for all HR service errors."""

    kind: ErrorKind

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class LogException(HRServiceException):
    """Raised when the call context carries no usable correlation identifier."""

    kind = ErrorKind.LOG_ERROR

    def __init__(self, reason: str = "correlation_id is missing"):
        super().__init__(message=f"Log error: {reason}", details={"reason": reason})


class BadRequestException(HRServiceException):
    """Raised when request arguments are invalid."""

    kind = ErrorKind.BAD_REQUEST

    def __init__(self, reason: str, field: Optional[str] = None):
        message = f"Bad request: {reason}"
        if field:
            message = f"Bad request for {field}: {reason}"
        super().__init__(message=message, details={"field": field, "reason": reason})


class NotFoundException(HRServiceException):
    """Raised when an entity or a requested page does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, key: Optional[str] = None):
        message = f"{entity} not found"
        if key is not None:
            message = f"{entity} not found: {key}"
        super().__init__(message=message, details={"entity": entity, "key": key})


class ParseException(HRServiceException):
    """Raised when an employee identifier cannot be parsed."""

    kind = ErrorKind.PARSE_ERROR

    def __init__(self, value: str):
        super().__init__(
            message=f"Cannot parse identifier: {value}", details={"value": value}
        )


class PositionAlreadyExistsException(HRServiceException):
    """Raised when a position with the same name and salary already exists."""

    kind = ErrorKind.POSITION_ALREADY_EXISTS

    def __init__(self, name: str, salary: object):
        super().__init__(
            message=f"Position already exists: {name} ({salary})",
            details={"name": name, "salary": str(salary)},
        )


class PositionDoesNotExistException(HRServiceException):
    """Raised when an employee references an unknown position."""

    kind = ErrorKind.POSITION_DOES_NOT_EXIST

    def __init__(self, position_id: str):
        super().__init__(
            message=f"Position does not exist: {position_id}",
            details={"position_id": position_id},
        )


class EmployeeAlreadyExistsException(HRServiceException):
    """Raised when an employee with the same first and last name exists."""

    kind = ErrorKind.EMPLOYEE_ALREADY_EXISTS

    def __init__(self, first_name: str, last_name: str):
        super().__init__(
            message=f"Employee already exists: {first_name} {last_name}",
            details={"first_name": first_name, "last_name": last_name},
        )
