# backend/routes/auth.py
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from database import get_db
from schemas import user as schemas
from services import account_service
from services.errors import ValidationError, EmailAlreadyRegistered, InvalidCredentials
from utils.audit import write_log
from utils.tokenJWT import create_access_token, get_current_user

router = APIRouter(tags=["Auth"])


def _client_ip(request: Request):
    return request.client.host if request.client else None


def _register(db: Session, request: Request, payload: schemas.SignUpRequest, role: str):
    create = account_service.sign_up if role == account_service.ROLE_USER else account_service.sign_up_provider
    try:
        account = create(db, payload.name, payload.email, payload.password, payload.confirm_password)
    except (ValidationError, EmailAlreadyRegistered) as e:
        # Record the rejected attempt, then let the error handler render it
        write_log(db, actor_email=account_service.normalize_email(payload.email) or None, role=role, action="REGISTER",
                  resource="auth", status="FAIL", ip=_client_ip(request), meta={"reason": e.message})
        raise

    write_log(db, actor_email=account.email, role=role, action="REGISTER", resource="auth",
              status="SUCCESS", ip=_client_ip(request))
    return account


# Register a new end user
@router.post("/signup", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
def sign_up(payload: schemas.SignUpRequest, request: Request, db: Session = Depends(get_db)):
    return _register(db, request, payload, account_service.ROLE_USER)


# Register a new service provider account
@router.post("/providers/signup", response_model=schemas.ProviderAccountResponse, status_code=status.HTTP_201_CREATED)
def sign_up_provider(payload: schemas.SignUpRequest, request: Request, db: Session = Depends(get_db)):
    return _register(db, request, payload, account_service.ROLE_PROVIDER)


# Authenticate a user or provider and issue a JWT token
@router.post("/login", response_model=schemas.Token)
def login(payload: schemas.LoginRequest, request: Request, db: Session = Depends(get_db)):
    try:
        outcome = account_service.login(db, payload.email, payload.password)
    except (ValidationError, InvalidCredentials) as e:
        write_log(db, actor_email=account_service.normalize_email(payload.email) or None, action="LOGIN",
                  resource="auth", status="FAIL", ip=_client_ip(request), meta={"reason": e.message})
        raise

    access_token = create_access_token(data={"sub": outcome.email, "role": outcome.role})

    write_log(db, actor_email=outcome.email, role=outcome.role, action="LOGIN", resource="auth",
              status="SUCCESS", ip=_client_ip(request))

    return {"access_token": access_token, "token_type": "bearer", "role": outcome.role}


# Retrieve current authenticated account details
@router.get("/me", response_model=schemas.AccountResponse)
def me(current_user=Depends(get_current_user)):
    return current_user
