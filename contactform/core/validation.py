"""
Field validation for contact form submissions.

Rules are checked in a fixed order and the first failure wins. Length limits
apply to the raw value and count UTF-8 bytes, so multibyte text reaches a
limit sooner than its character count suggests. Emptiness is checked on the
value stripped of Unicode White_Space characters only (str.strip() would also
drop the U+001C..U+001F separators). The email check is deliberately
syntactic (an "@" must be present) and nothing more.
"""

from contactform.core.errors import FormValidationError, ValidationErrorKind
from contactform.models.contact import FormData

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 255
MAX_MESSAGE_LENGTH = 1000

# Unicode White_Space property
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def is_blank(value: str) -> bool:
    return not value.strip(WHITESPACE)


def byte_length(value: str) -> int:
    return len(value.encode("utf-8"))


def validate_form_data(data: FormData) -> None:
    """
    Check a form against the field rules.

    Args:
        data: The submitted form

    Raises:
        FormValidationError: for the first rule the form breaks
    """
    if is_blank(data.name):
        raise FormValidationError(ValidationErrorKind.EMPTY_NAME)
    if byte_length(data.name) > MAX_NAME_LENGTH:
        raise FormValidationError(ValidationErrorKind.NAME_TOO_LONG)
    if is_blank(data.email):
        raise FormValidationError(ValidationErrorKind.EMPTY_EMAIL)
    if "@" not in data.email:
        raise FormValidationError(ValidationErrorKind.INVALID_EMAIL)
    if byte_length(data.email) > MAX_EMAIL_LENGTH:
        raise FormValidationError(ValidationErrorKind.EMAIL_TOO_LONG)
    if is_blank(data.message):
        raise FormValidationError(ValidationErrorKind.EMPTY_MESSAGE)
    if byte_length(data.message) > MAX_MESSAGE_LENGTH:
        raise FormValidationError(ValidationErrorKind.MESSAGE_TOO_LONG)
