"""Auth API — registration and login.

Learn: Routes for account authentication:
- POST /auth/register → create a new account
- POST /auth/login → email/password → signed session token

Routes only decode the body and wrap the result in the response
envelope. Errors raised by the service are turned into status codes by
the handlers in api/errors.py.
"""

from fastapi import APIRouter, Depends

from imagesmith.api.dependencies import get_account_service
from imagesmith.api.responses import success_response
from imagesmith.schemas.account import (
    AccountRead,
    Envelope,
    LoginRequest,
    RegisterRequest,
    TokenRead,
)
from imagesmith.services.account_service import AccountService

router = APIRouter(prefix="/auth")


@router.post("/register", response_model=Envelope[AccountRead], status_code=201)
async def register(
    body: RegisterRequest,
    svc: AccountService = Depends(get_account_service),
):
    """Create a new account."""
    account = await svc.register(name=body.name, email=body.email, password=body.password)
    return success_response(201, "successfully create user", account)


@router.post("/login", response_model=Envelope[TokenRead])
async def login(
    body: LoginRequest,
    svc: AccountService = Depends(get_account_service),
):
    """Login with email and password → session token."""
    token = await svc.login(email=body.email, password=body.password)
    return success_response(200, "successfully login to account", TokenRead(token=token))
