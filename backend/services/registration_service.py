# backend/services/registration_service.py
import logging
from datetime import date
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from models.users import ProviderAccount
from models.provider import ProviderListing
from services.errors import Rule, ValidationError, NoProviderFound, StorageError
from utils import validators

logger = logging.getLogger(__name__)


def _check_listing_fields(address, contact, dob, service_type, experience):
    if not validators.validate_non_empty([address, contact, dob, service_type, experience]):
        raise ValidationError(Rule.REQUIRED_FIELDS)
    if not validators.validate_phone(contact):
        raise ValidationError(Rule.PHONE_FORMAT)
    if not validators.validate_name_like(address):
        raise ValidationError(Rule.ADDRESS_FORMAT)
    if not validators.validate_service_type(service_type):
        raise ValidationError(Rule.SERVICE_TYPE)


def listing_exists(db: Session, email: str, service_type: str) -> bool:
    return db.query(ProviderListing).filter(
        ProviderListing.email == email,
        ProviderListing.service_type == service_type,
    ).first() is not None


def register_provider_details(
    db: Session,
    provider_email: Optional[str],
    address: str,
    contact: str,
    dob: Optional[date],
    service_type: str,
    experience: str,
) -> ProviderListing:
    """Attach a service listing to the provider identified by ``provider_email``.

    The provider is named explicitly by the caller (the authenticated
    account), not inferred from the most recent sign-up. Raises
    ValidationError, NoProviderFound or StorageError; lookup and insert share
    one transaction.
    """
    _check_listing_fields(address, contact, dob, service_type, experience)

    try:
        provider = None
        if provider_email:
            provider = db.query(ProviderAccount).filter(ProviderAccount.email == provider_email).first()
        if provider is None:
            raise NoProviderFound()

        if listing_exists(db, provider.email, service_type):
            raise ValidationError(Rule.DUPLICATE_LISTING)

        listing = ProviderListing(
            email=provider.email,
            address=address.strip(),
            contact_number=contact,
            dob=dob,
            service_type=service_type,
            experience=experience.strip(),
        )
        db.add(listing)
        db.commit()
        db.refresh(listing)
    except IntegrityError as e:
        # Same provider and service type committed concurrently
        db.rollback()
        logger.warning("Duplicate %s listing for %s", service_type, provider_email)
        raise ValidationError(Rule.DUPLICATE_LISTING) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to register %s listing for %s", service_type, provider_email)
        raise StorageError(e) from e

    logger.info("Registered %s listing for %s", service_type, provider.email)
    return listing
