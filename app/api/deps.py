"""
Dependencias reutilizables para routers (FastAPI Depends).

- Base de datos: devuelve la DB Motor inicializada en el startup.
- Autenticación: extrae y valida el Bearer token, devuelve el usuario actual.
- Mantener esta capa delgada: sin lógica de negocio pesada.
"""
from typing import Optional, Dict, Any

from fastapi import Depends, Header
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import Settings, settings as _settings
from app.core.exceptions import Unauthorized
from app.infrastructure.db import mongo
from app.services import auth_service


def get_db() -> AsyncIOMotorDatabase:
    return mongo.get_db()


def get_settings() -> Settings:
    return _settings


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    db: AsyncIOMotorDatabase = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthorized()
    token = authorization.split(" ", 1)[1].strip()
    if not token or not settings.jwt_secret:
        raise Unauthorized()
    return await auth_service.resolve_user(
        db, token, secret=settings.jwt_secret, algorithm=settings.jwt_algorithm
    )
