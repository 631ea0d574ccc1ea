"""
Correlation identifier gate.

Every service call carries a context mapping; the correlation identifier
stored there under ``CORRELATION_ID_KEY`` must be a string for the call to
proceed.
"""

from typing import Any, Mapping

from ..domain.exceptions import LogException

CORRELATION_ID_KEY = "correlation_id"


def require_correlation_id(ctx: Mapping[str, Any]) -> str:
    """
    Extract the correlation identifier from a call context.

    Args:
        ctx: Call context values

    Returns:
        The correlation identifier

    Raises:
        LogException: If the identifier is missing or not a string
    """
    correlation_id = ctx.get(CORRELATION_ID_KEY)
    if correlation_id is None:
        raise LogException(f"{CORRELATION_ID_KEY} is missing")
    if not isinstance(correlation_id, str):
        raise LogException(f"{CORRELATION_ID_KEY} is not a string")
    return correlation_id
