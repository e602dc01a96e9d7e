"""
Custom exception classes for Lambda handlers and services.
"""
from typing import Optional, Any


class ValidationError(Exception):
    """Exception raised for invalid handler input."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None
    ):
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation if available
            value: Invalid value if available
        """
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value


class SecretsLoadError(Exception):
    """Exception raised when a secret cannot be read from Secrets Manager."""

    def __init__(self, message: str, secret_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.secret_id = secret_id


class EmailNotificationsDisabledError(Exception):
    """Raised when SES is requested while email notifications are turned off."""


class FileNetUploadError(Exception):
    """Exception raised when a document upload through the ESB fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None
    ):
        """
        Initialize FileNet upload error.

        Args:
            message: Error message
            status_code: HTTP status code if a response was received
            response_text: Response body if a response was received
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_text = response_text
