# backend/models/provider.py
import enum
from sqlalchemy import Column, Integer, String, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database import Base

# Fixed service categories offered in the registration and directory forms
class ServiceType(str, enum.Enum):
    ELECTRICIAN = "Electrician Services"
    CARPENTRY = "Carpentry"
    PLUMBING = "Plumbing Services"
    HOME_CLEANING = "Home Cleaning"
    PEST_CONTROL = "Pest Control"
    APPLIANCE_REPAIR = "Appliance Repair"
    PAINTING = "Painting Services"
    CAR_REPAIR = "Car Repair"
    BEAUTY_SALON = "Beauty and Salon Services"
    HOME_TUTOR = "Home Tutor"
    TAILORING = "Tailoring and Alteration"
    HAIR_STYLING = "Hair Styling"
    YOGA_MEDITATION = "Yoga and Meditation"
    MAKEUP_ARTIST = "Makeup Artist"

# One service offering of a provider, with contact details
class ProviderListing(Base):
    __tablename__ = "ServiceProviders"
    __table_args__ = (
        UniqueConstraint("email", "service_type", name="uq_provider_service_type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, ForeignKey("ServiceProvidersSignUp.email"), nullable=False, index=True)
    address = Column(String, nullable=False)
    contact_number = Column(String(10), nullable=False)
    dob = Column("DOB", Date, nullable=False)
    # Stored as the plain category label, matched exactly by the directory
    service_type = Column(String, nullable=False, index=True)
    experience = Column("Experience", String, nullable=False)

    provider = relationship("ProviderAccount", back_populates="listings")
