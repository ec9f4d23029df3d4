# backend/services/directory_service.py
import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterator, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.users import ProviderAccount
from models.provider import ProviderListing, ServiceType
from services.errors import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderRow:
    name: str
    email: str
    service_type: str
    address: str
    contact_number: str
    experience: str
    dob: date


def list_categories() -> List[str]:
    return [s.value for s in ServiceType]


def list_providers_by_category(db: Session, service_type: str) -> Iterator[ProviderRow]:
    """Yield every listing in ``service_type`` joined with its provider's name.

    One query, consumed in a single pass. An unknown or empty category simply
    yields nothing.
    """
    query = (
        db.query(
            ProviderAccount.name,
            ProviderAccount.email,
            ProviderListing.service_type,
            ProviderListing.address,
            ProviderListing.contact_number,
            ProviderListing.experience,
            ProviderListing.dob,
        )
        .select_from(ProviderListing)
        .join(ProviderAccount, ProviderListing.email == ProviderAccount.email)
        .filter(ProviderListing.service_type == service_type)
        .order_by(ProviderListing.id)
    )

    try:
        for row in query:
            yield ProviderRow(
                name=row.name,
                email=row.email,
                service_type=row.service_type,
                address=row.address,
                contact_number=row.contact_number,
                experience=row.experience,
                dob=row.dob,
            )
    except SQLAlchemyError as e:
        logger.exception("Directory lookup failed for %s", service_type)
        raise StorageError(e) from e
