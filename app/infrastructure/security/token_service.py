"""
Creación y verificación de JWTs de acceso.

Funciones sin estado: el secreto y el algoritmo se inyectan en cada llamada,
no se leen de la configuración global.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt as pyjwt


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(
    *,
    user: Dict[str, Any],
    secret: str,
    algorithm: str = "HS256",
    expires_in: timedelta = timedelta(days=7),
) -> str:
    """
    Genera un JWT firmado con `secret`.
    Claims: sub(username), user{id, username, fullname}, iat, exp.
    """
    if not secret:
        raise ValueError("JWT secret no configurado")
    now = _now_utc()
    claims_user = {"id": str(user.get("id") or user.get("_id")), "username": user["username"]}
    if user.get("fullname"):
        claims_user["fullname"] = user["fullname"]
    payload = {
        "sub": user["username"],
        "user": claims_user,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_in).timestamp()),
    }
    return pyjwt.encode(payload, secret, algorithm=algorithm)


def verify_access_token(token: str, *, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """
    Decodifica y valida firma/expiración. Devuelve payload.
    Lanza `jwt.InvalidTokenError` (o subclases) si el token no es válido.
    """
    return pyjwt.decode(
        token,
        key=secret,
        algorithms=[algorithm],
        options={"require": ["exp", "sub"]},
    )
