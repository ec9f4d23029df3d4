# backend/services/errors.py
"""Error kinds raised by the service layer.

Services raise these and never build HTTP responses themselves; the mapping
to status codes lives in ``utils.error_handlers``.
"""
import enum
from typing import Optional


class Rule(str, enum.Enum):
    """Identifies which validation rule rejected the input."""

    REQUIRED_FIELDS = "required_fields"
    NAME_FORMAT = "name_format"
    EMAIL_FORMAT = "email_format"
    PASSWORD_MISMATCH = "password_mismatch"
    PHONE_FORMAT = "phone_format"
    ADDRESS_FORMAT = "address_format"
    SERVICE_TYPE = "service_type"
    DUPLICATE_LISTING = "duplicate_listing"


RULE_MESSAGES = {
    Rule.REQUIRED_FIELDS: "Please fill all fields",
    Rule.NAME_FORMAT: "Invalid input! The field must only contain letters and spaces.",
    Rule.EMAIL_FORMAT: "Invalid email!",
    Rule.PASSWORD_MISMATCH: "Passwords do not match. Please try again.",
    Rule.PHONE_FORMAT: "Contact number must be exactly 10 digits",
    Rule.ADDRESS_FORMAT: "Invalid input! The field must only contain letters and spaces.",
    Rule.SERVICE_TYPE: "Unknown service type",
    Rule.DUPLICATE_LISTING: "A listing for this service type already exists",
}


class ServiceError(Exception):
    message = "Service error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(ServiceError):
    def __init__(self, rule: Rule, message: Optional[str] = None):
        self.rule = rule
        super().__init__(message or RULE_MESSAGES[rule])


class EmailAlreadyRegistered(ServiceError):
    message = "Email already registered"


class InvalidCredentials(ServiceError):
    message = "Invalid email or password."


class NoProviderFound(ServiceError):
    message = "No provider account found."


class StorageError(ServiceError):
    message = "Storage unavailable"

    def __init__(self, cause: Exception, message: Optional[str] = None):
        self.cause = cause
        super().__init__(message)
