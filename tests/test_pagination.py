"""
Tests for page slicing.

Covers the empty-listing special case, the page-size cap and the
out-of-range rule based on ``len(items) / limit``.
"""

import pytest

from hr_service.domain.exceptions import BadRequestException, NotFoundException
from hr_service.services.pagination import MAX_PAGE_LIMIT, check_page_limit, paginate


class TestPageLimit:
    """Test the page-size cap."""

    def test_limit_at_cap_allowed(self):
        """Test a limit equal to the cap passes."""
        check_page_limit(MAX_PAGE_LIMIT)

    def test_limit_above_cap_rejected(self):
        """Test a limit above the cap is a bad request."""
        with pytest.raises(BadRequestException):
            check_page_limit(MAX_PAGE_LIMIT + 1)

    def test_paginate_checks_cap_first(self):
        """Test the cap wins over the empty-listing case."""
        with pytest.raises(BadRequestException):
            paginate([], 120, 1)


class TestEmptyListing:
    """Test behaviour over an empty snapshot."""

    def test_first_single_item_page_is_empty(self):
        """Test limit=1, offset=1 on nothing returns an empty page."""
        assert paginate([], 1, 1) == []

    @pytest.mark.parametrize("limit, offset", [(2, 1), (10, 1), (1, 2)])
    def test_other_pages_not_found(self, limit, offset):
        """Test any other request on nothing is not found."""
        with pytest.raises(NotFoundException):
            paginate([], limit, offset)


class TestSlicing:
    """Test page contents."""

    def test_full_page(self):
        """Test a page covering everything returns all items in order."""
        assert paginate(["a", "b"], 2, 1) == ["a", "b"]

    def test_pages_of_two(self):
        """Test consecutive pages."""
        items = ["a", "b", "c", "d", "e"]

        assert paginate(items, 2, 1) == ["a", "b"]
        assert paginate(items, 2, 2) == ["c", "d"]
        assert paginate(items, 2, 3) == ["e"]

    def test_returns_new_list(self):
        """Test the page is a list detached from the snapshot."""
        items = ("a", "b")
        page = paginate(items, 2, 1)

        assert isinstance(page, list)
        assert page == ["a", "b"]


class TestOutOfRange:
    """Test the out-of-range rule."""

    def test_offset_far_beyond(self):
        """Test offset 13 with two items is not found."""
        with pytest.raises(NotFoundException):
            paginate(["a", "b"], 1, 13)

    def test_exact_boundary_rejected(self):
        """Test page index equal to len/limit is rejected."""
        with pytest.raises(NotFoundException):
            paginate(["a", "b"], 1, 3)

    def test_partial_last_page_allowed(self):
        """Test a partial last page is still served (3 / 2 > 1)."""
        assert paginate(["a", "b", "c"], 2, 2) == ["c"]

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit(self, limit):
        """Test zero or negative limits are not found."""
        with pytest.raises(NotFoundException):
            paginate(["a"], limit, 1)

    @pytest.mark.parametrize("offset", [0, -3])
    def test_non_positive_offset(self, offset):
        """Test zero or negative offsets are not found."""
        with pytest.raises(NotFoundException):
            paginate(["a"], 1, offset)
