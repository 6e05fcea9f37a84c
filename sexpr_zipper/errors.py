"""
Exception hierarchy for S-expression zipper operations.

Navigation and search never raise: they return None. The exceptions below are
reserved for programmer errors and for failures of injected collaborators.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""


class SexprZipperError(Exception):
    """Base exception for S-expression zipper operations."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class TreeStructureError(SexprZipperError):
    """Raised when a tree violates a structural invariant (programmer error)."""

    def __init__(self, message: str, operation: str = None, details: dict = None):
        """
        Initialize tree structure error.

        Args:
            message: Error message
            operation: Optional name of the operation that detected the violation
            details: Optional additional details
        """
        super().__init__(message, code="TREE_STRUCTURE_ERROR", details=details)
        self.operation = operation


class ConversionError(SexprZipperError):
    """Raised when a value cannot be converted between nodes and host values."""

    def __init__(self, message: str, value=None, details: dict = None):
        """
        Initialize conversion error.

        Args:
            message: Error message
            value: Optional offending host value or node
            details: Optional additional details
        """
        super().__init__(message, code="CONVERSION_ERROR", details=details)
        self.value = value


class ConfigurationError(SexprZipperError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, config_key: str = None, details: dict = None):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that is invalid
            details: Optional additional details
        """
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
        self.config_key = config_key
