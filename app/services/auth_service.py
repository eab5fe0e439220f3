"""
Lógica de autenticación: login, refresh y resolución del usuario de un token.
"""
import logging
from datetime import timedelta
from typing import Any, Dict

import jwt as pyjwt
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import Settings
from app.core.exceptions import Unauthorized
from app.infrastructure.security.passwords import verify_password
from app.infrastructure.security.token_service import create_access_token, verify_access_token
from app.repositories import user_repo

_log = logging.getLogger("noteful.auth")

INVALID_CREDENTIALS = "Invalid credentials"


def issue_token(user: Dict[str, Any], settings: Settings) -> Dict[str, str]:
    if not settings.jwt_configured:
        _log.warning("JWT_SECRET no configurado: no se emiten tokens")
        raise Unauthorized()
    token = create_access_token(
        user=user,
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=timedelta(days=settings.jwt_expiry_days),
    )
    return {"authToken": token}


async def login(db: AsyncIOMotorDatabase, username: str, password: str, settings: Settings) -> Dict[str, str]:
    u = await user_repo.find_user_by_username(db, username)
    if not u or not verify_password(password, u.get("password") or ""):
        _log.info("login rechazado username=%s", username)
        raise Unauthorized(INVALID_CREDENTIALS)
    return issue_token(u, settings)


async def resolve_user(db: AsyncIOMotorDatabase, token: str, *, secret: str, algorithm: str) -> Dict[str, Any]:
    """Verifica el token y devuelve el documento del usuario de `sub`."""
    try:
        payload = verify_access_token(token, secret=secret, algorithm=algorithm)
    except pyjwt.InvalidTokenError as e:
        _log.debug("token rechazado: %s", e)
        raise Unauthorized()

    username = payload.get("sub")
    if not username:
        raise Unauthorized()
    u = await user_repo.find_user_by_username(db, username)
    if not u:
        raise Unauthorized()
    return u
