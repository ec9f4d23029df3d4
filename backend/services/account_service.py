# backend/services/account_service.py
import logging
from dataclasses import dataclass
from typing import Optional, Type, Union

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from models.users import UserAccount, ProviderAccount
from services.errors import (
    Rule,
    ValidationError,
    EmailAlreadyRegistered,
    InvalidCredentials,
    StorageError,
)
from utils.hashing import get_password_hash, verify_password
from utils import validators

logger = logging.getLogger(__name__)

ROLE_USER = "user"
ROLE_PROVIDER = "provider"

Account = Union[UserAccount, ProviderAccount]


@dataclass(frozen=True)
class LoginOutcome:
    role: str
    email: str
    name: str


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def _check_sign_up_fields(name, email, password, confirm_password):
    # Order matters: the first failing rule is the one reported
    if not validators.validate_non_empty([name, email, password, confirm_password]):
        raise ValidationError(Rule.REQUIRED_FIELDS)
    if not validators.validate_name_like(name):
        raise ValidationError(Rule.NAME_FORMAT)
    if not validators.validate_email_shape(email):
        raise ValidationError(Rule.EMAIL_FORMAT)
    if not validators.validate_passwords_match(password, confirm_password):
        raise ValidationError(Rule.PASSWORD_MISMATCH)


def email_taken(db: Session, email: str) -> bool:
    """True if either account table already holds this email."""
    for model in (UserAccount, ProviderAccount):
        if db.query(model).filter(func.lower(model.email) == email).first():
            return True
    return False


def _create_account(db: Session, model: Type[Account], name, email, password, confirm_password) -> Account:
    _check_sign_up_fields(name, email, password, confirm_password)
    email = normalize_email(email)

    try:
        if email_taken(db, email):
            raise EmailAlreadyRegistered()

        account = model(name=name.strip(), email=email, password=get_password_hash(password))
        db.add(account)
        db.commit()
        db.refresh(account)
    except IntegrityError as e:
        # A concurrent sign-up committed the same email after the pre-check
        db.rollback()
        logger.warning("Unique email constraint hit for %s", email)
        raise EmailAlreadyRegistered() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to insert into %s for %s", model.__tablename__, email)
        raise StorageError(e) from e

    logger.info("Created %s account for %s", model.__tablename__, email)
    return account


def sign_up(db: Session, name: str, email: str, password: str, confirm_password: str) -> UserAccount:
    """Register an end user.

    Raises ValidationError for the first failing rule, EmailAlreadyRegistered
    when the email exists in either account table, StorageError when the
    insert fails. Nothing is written unless every check passes.
    """
    return _create_account(db, UserAccount, name, email, password, confirm_password)


def sign_up_provider(db: Session, name: str, email: str, password: str, confirm_password: str) -> ProviderAccount:
    """Register a service provider; same rules and errors as ``sign_up``."""
    return _create_account(db, ProviderAccount, name, email, password, confirm_password)


def login(db: Session, email: str, password: str) -> LoginOutcome:
    """Check credentials against the user table first, then the provider table."""
    if not validators.validate_non_empty([email, password]):
        raise ValidationError(Rule.REQUIRED_FIELDS, "Please fill in all fields.")
    email = normalize_email(email)

    for role, model in ((ROLE_USER, UserAccount), (ROLE_PROVIDER, ProviderAccount)):
        try:
            account = db.query(model).filter(model.email == email).first()
        except SQLAlchemyError as e:
            logger.exception("Credential lookup in %s failed for %s", model.__tablename__, email)
            raise StorageError(e) from e

        if account is not None and verify_password(password, account.password):
            return LoginOutcome(role=role, email=account.email, name=account.name)

    logger.warning("Rejected login for %s", email)
    raise InvalidCredentials()


def get_account(db: Session, email: str, role: str) -> Optional[Account]:
    model = ProviderAccount if role == ROLE_PROVIDER else UserAccount
    return db.query(model).filter(model.email == email).first()
