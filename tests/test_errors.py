"""
Tests for exception hierarchy.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from sexpr_zipper.errors import (
    ConfigurationError,
    ConversionError,
    SexprZipperError,
    TreeStructureError,
)


class TestSexprZipperError:
    """Test base SexprZipperError exception."""

    def test_base_exception_creation(self):
        """Test creating base exception."""
        error = SexprZipperError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.code is None
        assert error.details == {}

    def test_base_exception_with_code_and_details(self):
        """Test creating base exception with code and details."""
        error = SexprZipperError("Test error", code="TEST_ERROR", details={"k": 1})
        assert error.code == "TEST_ERROR"
        assert error.details == {"k": 1}


class TestSubclasses:
    """Test specialised errors."""

    def test_tree_structure_error(self):
        """Test creating tree structure error."""
        error = TreeStructureError("bad children", operation="make_node")
        assert isinstance(error, SexprZipperError)
        assert error.code == "TREE_STRUCTURE_ERROR"
        assert error.operation == "make_node"

    def test_conversion_error(self):
        """Test creating conversion error."""
        value = object()
        error = ConversionError("no representation", value=value)
        assert isinstance(error, SexprZipperError)
        assert error.code == "CONVERSION_ERROR"
        assert error.value is value

    def test_configuration_error(self):
        """Test creating configuration error."""
        error = ConfigurationError("bad separator", config_key="separator")
        assert isinstance(error, SexprZipperError)
        assert error.code == "CONFIGURATION_ERROR"
        assert error.config_key == "separator"
