"""Domain-specific exceptions for payroll-core.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from PayrollAPIError for easy catching.
"""


class PayrollAPIError(Exception):
    """Base exception for all payroll-core errors.

    Users can catch this exception to handle any payroll-core error.
    """

    pass


class ConfigError(PayrollAPIError):
    """Raised when report options are invalid.

    This exception is raised when:
    - An option has the wrong type
    - The accepted extension list is empty or malformed
    """

    pass


class PayrollInputError(PayrollAPIError):
    """Raised when the payroll input is rejected before aggregation.

    Every subclass carries a human-readable message suitable for showing
    to the person who supplied the file.
    """

    pass


class MissingFileError(PayrollInputError):
    """Raised when no payroll file or text was provided."""

    def __init__(self, message: str = "No file provided") -> None:
        super().__init__(message)


class InvalidFileTypeError(PayrollInputError):
    """Raised when the file extension is not an accepted payroll export type."""

    def __init__(self, message: str = "Only CSV files are accepted") -> None:
        super().__init__(message)


class EmptyInputError(PayrollInputError):
    """Raised when the CSV has no header or only a header line.

    At least two non-blank lines are required: the header and one data row.
    """

    def __init__(
        self, message: str = "CSV file must contain at least a header and one data row"
    ) -> None:
        super().__init__(message)
