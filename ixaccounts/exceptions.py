"""
Custom exceptions for IXAccounts.

Two families matter to callers: validation errors (bad input data, the caller
fixes the package and retries) and packaging defects (the generator produced
an inconsistent document, which is a bug).
"""
from typing import Any, Dict, List, Optional


class IXAccountsError(Exception):
    """
    Base exception for all IXAccounts errors.

    Attributes:
        error_code: Unique error code (e.g., IXA-001)
        message: Human-readable error message
        details: Additional error context
    """
    error_code: str = "IXA-000"
    http_status: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.details = details or {}
        if error_code:
            self.error_code = error_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


# Input Errors (IXA-4XX)
class InvalidEntitySizeError(IXAccountsError):
    """Entity size tier could not be resolved from the request."""
    error_code = "IXA-400"
    http_status = 400

    def __init__(self, message: str = "Entity size or entity metrics are required", **kwargs):
        super().__init__(message, **kwargs)


# Validation Errors (IXA-7XX)
class FilingValidationError(IXAccountsError):
    """Filing package failed validation and cannot be generated."""
    error_code = "IXA-700"
    http_status = 422

    def __init__(self, errors: List[str], message: str = "Filing package failed validation", **kwargs):
        self.errors = list(errors)
        details = kwargs.pop("details", {})
        details["errors"] = self.errors
        super().__init__(message, details=details, **kwargs)


# Packaging Defects (IXA-8XX)
class PackagingDefectError(IXAccountsError):
    """Generated document or archive is internally inconsistent."""
    error_code = "IXA-800"
    http_status = 500

    def __init__(self, message: str = "Packaging defect in generated filing", **kwargs):
        super().__init__(message, **kwargs)


class UndeclaredReferenceError(PackagingDefectError):
    """A fact references a context or unit that is not declared."""
    error_code = "IXA-801"

    def __init__(self, references: List[str], **kwargs):
        message = f"Undeclared references in document: {', '.join(references)}"
        super().__init__(message, details={"references": references}, **kwargs)


class FilenameDerivationError(PackagingDefectError):
    """Archive entry name does not follow the filing naming rule."""
    error_code = "IXA-802"

    def __init__(self, filename: str, **kwargs):
        message = f"Malformed filing document name: {filename!r}"
        super().__init__(message, details={"filename": filename}, **kwargs)


class EmptyArchiveError(PackagingDefectError):
    """Archive was written without a document in it."""
    error_code = "IXA-803"

    def __init__(self, **kwargs):
        super().__init__("Submission archive is empty", **kwargs)
