"""
Custom exceptions for defect_init.

Every failure the tool reports to the operator is one of these. They are
raised by the library modules and turned into a message plus exit code 1
by ``app/cli.py``; nothing is retried.
"""

from typing import Any, Dict, Optional


class DefectInitError(Exception):
    """Base exception for all defect_init errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UsageError(DefectInitError):
    """Wrong number of arguments or an unusable title."""

    pass


class ProfileError(UsageError):
    """Header profile could not be found or parsed."""

    pass


class TargetAlreadyExists(DefectInitError):
    """The defect folder and/or document already exists."""

    def __init__(self, folder: str, document: str) -> None:
        super().__init__(
            "A folder and/or file for your desired work item already exists in this directory",
            {"folder": folder, "document": document},
        )


class MissingRequiredField(DefectInitError):
    """The spreadsheet carries no column that yields the title."""

    def __init__(self, field_name: str, headers: Optional[list] = None) -> None:
        super().__init__(
            f"Spreadsheet has no column for required field '{field_name}'",
            {"field": field_name, "headers": list(headers or [])},
        )


class DecodeError(DefectInitError):
    """The spreadsheet could not be read."""

    pass
