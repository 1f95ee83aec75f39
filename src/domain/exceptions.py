# src/domain/exceptions.py - Domain exceptions for standardized error handling

class SavantStatsException(Exception):
    """Base exception for the team percentiles application."""
    pass


class DataAccessError(SavantStatsException):
    """Raised when data access operations fail."""
    
    def __init__(self, message: str, source: str = None):
        self.source = source
        super().__init__(message)


class ConfigLoadError(DataAccessError):
    """Raised when a team configuration source cannot be read or parsed.
    
    This is a specific type of DataAccessError for missing or malformed
    files, as opposed to well-formed files with invalid content.
    """
    pass


class DataValidationError(SavantStatsException):
    """Raised when data validation fails.
    
    Used for input validation errors, not data access errors.
    """
    
    def __init__(self, message: str, field_name: str = None, field_value=None):
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(message)


class ConfigValidationError(DataValidationError):
    """Raised when a team configuration breaks a structural invariant.
    
    Covers mismatched raw/rank/orientation key sets, fewer than two
    competitors and missing required fields. Fatal to building the
    affected section.
    """
    
    def __init__(self, message: str, field_name: str = None, field_value=None, section: str = None):
        self.section = section
        super().__init__(message, field_name, field_value)


class UseCaseError(SavantStatsException):
    """Raised when use case execution fails.
    
    High-level exception for business logic failures.
    """
    
    def __init__(self, message: str, operation: str = None, context: dict = None):
        self.operation = operation
        self.context = context or {}
        super().__init__(message)


class ExportError(SavantStatsException):
    """Raised when an export artifact cannot be produced."""
    
    def __init__(self, message: str, export_format: str = None, cause: Exception = None):
        self.export_format = export_format
        self.cause = cause
        super().__init__(message)
