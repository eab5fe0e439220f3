"""Rutas de autenticación: login y refresh del token de acceso."""
from fastapi import APIRouter, Depends, Request

from app.api.deps import get_current_user, get_db, get_settings
from app.api.schemas.user import AuthTokenOut, LoginIn
from app.core import rate_limit
from app.core.exceptions import TooManyRequests
from app.services import auth_service

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    response_model=AuthTokenOut,
    summary="Login con usuario y contraseña",
    description="Devuelve un JWT (`authToken`) para usar como `Authorization: Bearer`.",
)
async def login(payload: LoginIn, request: Request, db=Depends(get_db), settings=Depends(get_settings)):
    # Rate limit por IP
    ip = request.client.host if request.client else ""
    if not rate_limit.allow((ip, "/login"), limit=settings.login_rate_per_min, window_seconds=60):
        raise TooManyRequests()
    return await auth_service.login(db, payload.username, payload.password, settings)


@router.post("/refresh", response_model=AuthTokenOut, summary="Renovar token de acceso")
async def refresh(user=Depends(get_current_user), settings=Depends(get_settings)):
    return auth_service.issue_token(user, settings)
