# backend/models/users.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database import Base

# End-user account created by the customer sign-up form
class UserAccount(Base):
    __tablename__ = "UserSignUp"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    # Salted hash, never the raw password
    password = Column(String, nullable=False)


# Service provider account, authenticated separately from end users
class ProviderAccount(Base):
    __tablename__ = "ServiceProvidersSignUp"

    provider_id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)

    listings = relationship("ProviderListing", back_populates="provider")
