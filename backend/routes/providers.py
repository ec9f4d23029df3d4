# backend/routes/providers.py
from typing import List

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session

from database import get_db
from schemas import provider as schemas
from services import directory_service, registration_service
from services.account_service import ROLE_PROVIDER
from services.errors import ValidationError, NoProviderFound
from utils.audit import write_log
from utils.tokenJWT import get_current_user, role_required

router = APIRouter(tags=["Providers"])


# Fixed list of service categories
@router.get("/categories", response_model=List[str])
def get_categories():
    return directory_service.list_categories()


# Register service details for the authenticated provider
@router.post("/providers/details", response_model=schemas.ProviderListingResponse, status_code=status.HTTP_201_CREATED)
def register_details(
    payload: schemas.ProviderDetailsCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_provider=Depends(role_required(ROLE_PROVIDER)),
):
    ip = request.client.host if request.client else None
    try:
        listing = registration_service.register_provider_details(
            db,
            provider_email=current_provider.email,
            address=payload.address,
            contact=payload.contact_number,
            dob=payload.dob,
            service_type=payload.service_type,
            experience=payload.experience,
        )
    except (ValidationError, NoProviderFound) as e:
        write_log(db, actor_email=current_provider.email, role=ROLE_PROVIDER, action="REGISTER_DETAILS",
                  resource="providers", status="FAIL", ip=ip, meta={"reason": e.message})
        raise

    write_log(db, actor_email=current_provider.email, role=ROLE_PROVIDER, action="REGISTER_DETAILS",
              resource="providers", status="SUCCESS", ip=ip,
              meta={"listing_id": listing.id, "service_type": listing.service_type})
    return listing


# Browse providers offering a given service type
@router.get("/providers", response_model=schemas.ProviderDirectory)
def list_providers(
    service_type: str = Query(..., description="Exact category name"),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    items = [
        schemas.ProviderRowResponse.model_validate(row)
        for row in directory_service.list_providers_by_category(db, service_type)
    ]
    return {"service_type": service_type, "items": items, "total": len(items)}
