# backend/schemas/provider.py
from pydantic import BaseModel, ConfigDict
from datetime import date
from typing import List, Optional


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Listing details submitted by an authenticated provider
class ProviderDetailsCreate(BaseModel):
    address: str = ""
    contact_number: str = ""
    dob: Optional[date] = None
    # Checked against the category list by the service, not the schema
    service_type: str = ""
    experience: str = ""


# Stored listing returned after registration
class ProviderListingResponse(ORMBase):
    id: int
    email: str
    address: str
    contact_number: str
    dob: date
    service_type: str
    experience: str


# One directory row: listing joined with the provider's name
class ProviderRowResponse(ORMBase):
    name: str
    email: str
    service_type: str
    address: str
    contact_number: str
    experience: str
    dob: date


class ProviderDirectory(BaseModel):
    service_type: str
    items: List[ProviderRowResponse]
    total: int
