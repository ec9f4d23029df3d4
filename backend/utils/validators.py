# backend/utils/validators.py
"""Field checks shared by the sign-up and provider registration flows.

Every function is a pure predicate returning a bool. Callers decide which
error or message to report.
"""
import re
from typing import Iterable, Optional

from models.provider import ServiceType

# ASCII only: \d and \w would also accept non-Latin digits and letters
PHONE_RE = re.compile(r"[0-9]{10}")
NAME_RE = re.compile(r"[a-zA-Z ]+")
SERVICE_TYPES = [s.value for s in ServiceType]


def validate_non_empty(fields: Iterable[object]) -> bool:
    for value in fields:
        if value is None:
            return False
        if isinstance(value, str) and not value.strip():
            return False
    return True


def validate_phone(value: Optional[str]) -> bool:
    return value is not None and PHONE_RE.fullmatch(value) is not None


def validate_name_like(value: Optional[str]) -> bool:
    # Used for person names and for address/city fields
    return value is not None and NAME_RE.fullmatch(value) is not None


def validate_email_shape(value: Optional[str]) -> bool:
    return value is not None and "@" in value


def validate_passwords_match(password: str, confirm_password: str) -> bool:
    return password == confirm_password


def validate_service_type(value: Optional[str]) -> bool:
    return value in SERVICE_TYPES
