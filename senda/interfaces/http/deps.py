from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import date

from fastapi import Request

from senda.application.errors import AuthError
from senda.config.settings import Settings, get_settings
from senda.infrastructure.auth.context import AuthContext
from senda.infrastructure.auth.jwt_service import JWTService
from senda.infrastructure.auth.password import PasswordHasher
from senda.infrastructure.db.session import SQLAlchemyUnitOfWork
from senda.utils.datetime_tz import local_today


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Authentication required")
    return context


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_today(request: Request) -> date:
    return local_today(get_app_settings(request).app_timezone)


def get_password_hasher(request: Request) -> PasswordHasher:
    hasher = getattr(request.app.state, "password_hasher", None)
    if hasher is None:
        raise RuntimeError("Password hasher not configured")
    return hasher


def get_jwt_service(request: Request) -> JWTService:
    service = getattr(request.app.state, "jwt_service", None)
    if service is None:
        raise RuntimeError("JWT service not configured")
    return service
