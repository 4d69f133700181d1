"""Authentication endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from venuebook.core.database import get_db
from venuebook.core.dependencies import get_current_user
from venuebook.models.user import User
from venuebook.schemas.auth import (
    LoginRequest,
    OtpConfirmationRequest,
    RegisterRequest,
    TokenData,
    UserInDB,
)
from venuebook.schemas.common import DataResponse, MessageResponse
from venuebook.services.auth_service import (
    EmailAlreadyRegistered,
    InvalidCredentials,
    InvalidOtp,
    UserNotFound,
    auth_service,
)
from venuebook.services.mailer import MailerError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=MessageResponse, status_code=201)
async def register(
    data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Create a new user.

    Sends an email with the OTP code to be used in the OTP confirmation endpoint.

    Args:
        data: Name, email, password and role
        db: Database session

    Returns:
        Success message
    """
    try:
        await auth_service.register(db, data)
    except EmailAlreadyRegistered as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MailerError as e:
        logger.error(f"Failed to send OTP email to {data.email}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to send OTP email")

    return {"message": "Register success, please verify your OTP code"}


@router.post("/login", response_model=DataResponse[TokenData])
async def login(
    data: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Log in to a user account.

    Returns a bearer token to be sent in the Authorization header.

    Args:
        data: Email and password
        db: Database session

    Returns:
        Bearer token
    """
    missing = {
        name: "required"
        for name, value in (("email", data.email), ("password", data.password))
        if not value
    }
    if missing:
        return JSONResponse(
            status_code=400,
            content={"message": "login error", "error": missing},
        )

    try:
        token, expires_at = await auth_service.login(db, data.email, data.password)
    except InvalidCredentials as e:
        return JSONResponse(
            status_code=400,
            content={"message": "login error", "error": str(e)},
        )

    return {
        "message": "login success",
        "data": {"type": "bearer", "token": token, "expires_at": expires_at},
    }


async def _confirm_otp(data: OtpConfirmationRequest, db: AsyncSession):
    try:
        await auth_service.confirm_otp(db, data.email, data.otp_code)
    except UserNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidOtp as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"message": "OTP confirmation success"}


@router.post("/verifikasi-otp", response_model=MessageResponse)
async def verify_otp(
    data: OtpConfirmationRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Confirm the OTP code sent to an email.

    Marks the account as verified when the code matches.

    Args:
        data: Email and OTP code
        db: Database session

    Returns:
        Success message
    """
    return await _confirm_otp(data, db)


@router.post("/otp-confirmation", response_model=MessageResponse, include_in_schema=False)
async def otp_confirmation(
    data: OtpConfirmationRequest,
    db: AsyncSession = Depends(get_db),
):
    """Alias of the OTP verification endpoint."""
    return await _confirm_otp(data, db)


@router.get("/me", response_model=DataResponse[UserInDB])
async def me(user: User = Depends(get_current_user)):
    """Get the authenticated user."""
    return {"message": "Success get user", "data": user}
