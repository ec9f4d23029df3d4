"""
Unit tests for sign-up and login in the account service.
They run the service functions directly against an in-memory database.
"""

from __future__ import annotations

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from database import Base
from models.users import ProviderAccount, UserAccount
from services import account_service
from services.errors import (
    EmailAlreadyRegistered,
    InvalidCredentials,
    Rule,
    StorageError,
    ValidationError,
)


def test_sign_up_then_login_authenticates_as_user(db: Session) -> None:
    account_service.sign_up(db, "Ann", "ann@x.com", "pw123", "pw123")

    outcome = account_service.login(db, "ann@x.com", "pw123")

    assert outcome.role == account_service.ROLE_USER
    assert outcome.email == "ann@x.com"
    assert outcome.name == "Ann"


def test_sign_up_stores_a_salted_hash(db: Session) -> None:
    first = account_service.sign_up(db, "Ann", "ann@x.com", "pw123", "pw123")
    second = account_service.sign_up(db, "Bob", "bob@x.com", "pw123", "pw123")

    assert first.password != "pw123"
    assert first.password.startswith("$pbkdf2-sha256$")
    assert first.password != second.password


@pytest.mark.parametrize(
    ("name", "email", "password", "confirm", "rule"),
    [
        ("", "ann@x.com", "pw", "pw", Rule.REQUIRED_FIELDS),
        ("Ann", "ann@x.com", "pw", "  ", Rule.REQUIRED_FIELDS),
        ("Ann2", "ann@x.com", "pw", "pw", Rule.NAME_FORMAT),
        ("Ann", "ann.x.com", "pw", "pw", Rule.EMAIL_FORMAT),
        ("Ann", "ann@x.com", "pw", "pw2", Rule.PASSWORD_MISMATCH),
        # Earlier rules win when several fail
        ("Ann2", "ann.x.com", "pw", "pw2", Rule.NAME_FORMAT),
    ],
)
def test_sign_up_reports_first_failing_rule_and_writes_nothing(
    db: Session, name: str, email: str, password: str, confirm: str, rule: Rule
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        account_service.sign_up(db, name, email, password, confirm)

    assert excinfo.value.rule is rule
    assert db.query(UserAccount).count() == 0


def test_sign_up_rejects_email_used_by_a_provider(db: Session) -> None:
    account_service.sign_up_provider(db, "Pat", "pat@x.com", "pw123", "pw123")

    with pytest.raises(EmailAlreadyRegistered):
        account_service.sign_up(db, "Pat", "PAT@x.com", "pw123", "pw123")

    assert db.query(UserAccount).count() == 0


def test_provider_sign_up_rejects_existing_user_email(db: Session) -> None:
    account_service.sign_up(db, "Ann", "ann@x.com", "pw123", "pw123")

    with pytest.raises(EmailAlreadyRegistered):
        account_service.sign_up_provider(db, "Ann", "ann@x.com", "pw123", "pw123")

    assert db.query(ProviderAccount).count() == 0


def test_login_falls_back_to_provider_table(db: Session) -> None:
    account_service.sign_up_provider(db, "Pat Plumber", "pat@x.com", "secret", "secret")

    outcome = account_service.login(db, "pat@x.com", "secret")

    assert outcome.role == account_service.ROLE_PROVIDER
    assert outcome.name == "Pat Plumber"


def test_login_with_wrong_password_is_invalid_credentials(db: Session) -> None:
    account_service.sign_up(db, "Ann", "ann@x.com", "pw123", "pw123")

    with pytest.raises(InvalidCredentials):
        account_service.login(db, "ann@x.com", "nope")


def test_login_with_unknown_email_is_invalid_credentials(db: Session) -> None:
    with pytest.raises(InvalidCredentials):
        account_service.login(db, "ghost@x.com", "pw123")


def test_login_requires_both_fields(db: Session) -> None:
    with pytest.raises(ValidationError) as excinfo:
        account_service.login(db, "ann@x.com", "")

    assert excinfo.value.rule is Rule.REQUIRED_FIELDS


def test_login_normalizes_email_case(db: Session) -> None:
    account_service.sign_up(db, "Ann", "Ann@X.com", "pw123", "pw123")

    assert account_service.login(db, " ann@x.COM ", "pw123").email == "ann@x.com"


def test_storage_failure_surfaces_as_storage_error(db: Session, engine: Engine) -> None:
    Base.metadata.drop_all(bind=engine)

    with pytest.raises(StorageError) as excinfo:
        account_service.sign_up(db, "Ann", "ann@x.com", "pw123", "pw123")

    assert excinfo.value.cause is not None

    with pytest.raises(StorageError):
        account_service.login(db, "ann@x.com", "pw123")


def test_unique_constraint_race_is_reported_as_duplicate_email(
    db: Session, monkeypatch: pytest.MonkeyPatch
) -> None:
    account_service.sign_up(db, "Ann", "ann@x.com", "pw123", "pw123")
    # Second request passed the pre-check before the first one committed
    monkeypatch.setattr(account_service, "email_taken", lambda db, email: False)

    with pytest.raises(EmailAlreadyRegistered):
        account_service.sign_up(db, "Ann", "ann@x.com", "pw123", "pw123")

    assert db.query(UserAccount).count() == 1
