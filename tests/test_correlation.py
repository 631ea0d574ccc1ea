"""
Tests for the correlation identifier gate.
"""

import pytest

from hr_service.domain.exceptions import LogException
from hr_service.services.correlation import CORRELATION_ID_KEY, require_correlation_id


class TestRequireCorrelationId:
    """Test correlation identifier extraction."""

    def test_returns_identifier(self):
        """Test a string identifier is returned."""
        assert require_correlation_id({CORRELATION_ID_KEY: "abc"}) == "abc"

    def test_missing_key(self):
        """Test a context without the key fails."""
        with pytest.raises(LogException):
            require_correlation_id({"noname_id": "abc"})

    @pytest.mark.parametrize("value", [None, 42, b"abc", ["abc"]])
    def test_non_string_value(self, value):
        """Test non-string identifiers fail."""
        with pytest.raises(LogException):
            require_correlation_id({CORRELATION_ID_KEY: value})

    def test_empty_string_accepted(self):
        """Test an empty string is still a string."""
        assert require_correlation_id({CORRELATION_ID_KEY: ""}) == ""
