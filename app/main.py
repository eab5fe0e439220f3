"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers)."""
from fastapi import FastAPI
from pymongo.errors import PyMongoError
from app.core.config import settings
from app.infrastructure.db.mongo import init_mongo, close_mongo, get_db
from app.infrastructure.db.bootstrap import ensure_collections
from app.api.router import api_router
from app.core.logging import setup_logging
from app.core.middleware import add_middlewares
from app.core.exceptions import register_exception_handlers
import logging

_log = logging.getLogger("noteful.startup")

setup_logging(settings.log_level)
app = FastAPI(title=settings.app_name)

add_middlewares(app)
register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    if not settings.jwt_configured:
        _log.warning("JWT_SECRET no configurado; todas las rutas protegidas responderán 401")
    # Garantiza colecciones/índices/validadores mínimos si hay conexión
    if await init_mongo():
        try:
            await ensure_collections(get_db())
        except PyMongoError as e:
            # No impedir el arranque si fallan validadores/índices
            _log.warning("ensure_collections() falló: %s", e)
    else:
        _log.warning("Mongo no listo; omitiendo ensure_collections()")


@app.on_event("shutdown")
async def on_shutdown():
    close_mongo()


# Monta routers bajo el prefijo configurado
app.include_router(api_router, prefix=settings.api_prefix_normalized)
