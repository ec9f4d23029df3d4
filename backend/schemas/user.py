from pydantic import BaseModel, ConfigDict
from typing import Literal

# Field rules (blank, name format, email shape) are enforced by the service
# layer, so missing form fields default to blank instead of failing the schema.

# Shared properties for sign-up forms
class SignUpRequest(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""

# Schema for authentication credentials
class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""

# Output schema for a created end-user account
class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

# Output schema for a created provider account
class ProviderAccountResponse(BaseModel):
    provider_id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

# Profile of the authenticated account, whichever table it lives in
class AccountResponse(BaseModel):
    name: str
    email: str
    role: Literal["user", "provider"]

    model_config = ConfigDict(from_attributes=True)

# Schema for JWT authentication token response
class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: Literal["user", "provider"]
