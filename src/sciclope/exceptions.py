"""
SciClope Exceptions

Custom exception types for startup and installer errors, with remediation hints.
"""

from typing import Optional


class SciClopeError(Exception):
    """Base exception for all SciClope errors."""

    def __init__(
        self,
        message: str,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        """Initialize the error.

        Args:
            message: Human-readable error message
            remediation: Suggested fix for the user
            details: Technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.remediation = remediation
        self.details = details

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.remediation:
            parts.append(f"To fix: {self.remediation}")
        return "\n".join(parts)


class ConfigError(SciClopeError):
    """Configuration file errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.config_key = config_key
        if not remediation:
            if config_key:
                remediation = f"Check the '{config_key}' setting in LocalSettings.yaml"
            else:
                remediation = "Check that the file set by SCICLOPE_CONFIG is a readable YAML mapping"
        super().__init__(message, remediation, details)


class SessionUnavailable(SciClopeError):
    """The installer session could not be started."""

    def __init__(
        self,
        message: str = "Installer session could not be started",
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        if not remediation:
            remediation = "Set SCICLOPE_SECRET_KEY or 'secret_key' in LocalSettings.yaml"
        super().__init__(message, remediation, details)


class MalformedFingerprint(SciClopeError):
    """Fingerprint inputs were empty or of the wrong type."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.field = field
        if not remediation and field:
            remediation = f"The {field} must be a non-empty string"
        super().__init__(message, remediation, details)


class RegistryError(SciClopeError):
    """Invalid installer page registry."""

    def __init__(
        self,
        message: str,
        page: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.page = page
        if not remediation:
            if page:
                remediation = f"Register the page '{page}' only once"
            else:
                remediation = "Register at least one installer page"
        super().__init__(message, remediation, details)


# Error code mapping for CLI exit codes
ERROR_CODES = {
    ConfigError: 10,
    SessionUnavailable: 11,
    MalformedFingerprint: 12,
    RegistryError: 13,
    SciClopeError: 1,
}


def get_error_code(error: Exception) -> int:
    """Get the exit code for an error type."""
    for error_type, code in ERROR_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1
