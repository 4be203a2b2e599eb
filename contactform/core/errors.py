"""
Error types raised by the submission pipeline.

Every error carries the HTTP status code and the message the request boundary
renders into an ErrorResponse body.
"""

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Field-level validation failures, in the order the rules are checked"""
    EMPTY_NAME = "empty_name"
    NAME_TOO_LONG = "name_too_long"
    EMPTY_EMAIL = "empty_email"
    INVALID_EMAIL = "invalid_email"
    EMAIL_TOO_LONG = "email_too_long"
    EMPTY_MESSAGE = "empty_message"
    MESSAGE_TOO_LONG = "message_too_long"

    @property
    def message(self) -> str:
        return _VALIDATION_MESSAGES[self]


_VALIDATION_MESSAGES = {
    ValidationErrorKind.EMPTY_NAME: "Name cannot be empty",
    ValidationErrorKind.NAME_TOO_LONG: "Name is too long (max 100 characters)",
    ValidationErrorKind.EMPTY_EMAIL: "Email cannot be empty",
    ValidationErrorKind.INVALID_EMAIL: "Invalid email format",
    ValidationErrorKind.EMAIL_TOO_LONG: "Email is too long (max 255 characters)",
    ValidationErrorKind.EMPTY_MESSAGE: "Message cannot be empty",
    ValidationErrorKind.MESSAGE_TOO_LONG: "Message is too long (max 1000 characters)",
}


class SubmitError(Exception):
    """Base class for failures of a single submission"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FormValidationError(SubmitError):
    """The client sent a form that breaks one of the field rules"""

    status_code = 400

    def __init__(self, kind: ValidationErrorKind):
        super().__init__(kind.message)
        self.kind = kind


class StorageError(SubmitError):
    """The persistence store failed to create the record"""

    def __init__(self, detail: str):
        super().__init__(f"Database error: {detail}")
        self.detail = detail


class InternalInvariantError(SubmitError):
    """The store reported success but handed back no usable record"""

    def __init__(self, detail: str = ""):
        super().__init__("Internal server error")
        self.detail = detail
