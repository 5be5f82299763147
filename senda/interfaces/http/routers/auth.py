from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response

from senda.application.use_cases.auth import get_me, login_user, register_account
from senda.infrastructure.auth.context import AuthContext
from senda.infrastructure.auth.jwt_service import JWTService
from senda.infrastructure.auth.password import PasswordHasher
from senda.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_jwt_service,
    get_password_hasher,
    get_uow,
)
from senda.interfaces.http.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    SignupRequest,
    SignupResponse,
)

router = APIRouter(prefix="", tags=["auth"])
logger = logging.getLogger(__name__)

ACCESS_COOKIE = "access_token"


@router.get("/me", response_model=MeResponse)
async def read_me(context: AuthContext = Depends(get_auth_context)) -> MeResponse:
    result = await get_me.execute(context=context)
    return MeResponse(user_id=result.user_id, email=result.email, claims=result.claims)


@router.post("/auth/signup", response_model=SignupResponse, status_code=201)
async def signup_endpoint(
    payload: SignupRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> SignupResponse:
    result = await register_account.execute(
        uow=uow,
        payload=register_account.SelfRegisterInput(email=payload.email, password=payload.password),
        password_hasher=password_hasher,
    )
    logger.info("Account created for %s", result.email)
    return SignupResponse(user_id=UUID(result.user_id), email=result.email)


@router.post("/auth/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    response: Response,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
    settings=Depends(get_app_settings),
) -> LoginResponse:
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email=payload.email, password=payload.password),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    response.set_cookie(
        key=ACCESS_COOKIE,
        value=result.access_token,
        httponly=True,
        samesite=settings.cookie_samesite,
        secure=settings.cookie_secure,
        path="/",
    )
    return LoginResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        user_id=result.user_id,
        email=result.email,
    )


@router.post("/auth/logout")
async def logout_endpoint(response: Response) -> dict[str, str]:
    response.delete_cookie(key=ACCESS_COOKIE, path="/")
    return {"status": "ok"}
