"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers)."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pymongo.errors import PyMongoError

from noteful.api.router import api_router
from noteful.core.config import settings
from noteful.core.exceptions import register_exception_handlers
from noteful.core.logging import setup_logging
from noteful.core.middleware import add_middlewares
from noteful.infrastructure.db.bootstrap import ensure_collections
from noteful.infrastructure.db.mongo import close_mongo, db_ready, init_mongo

_log = logging.getLogger("noteful.startup")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_mongo()
    # Garantiza índices mínimos si hay conexión
    if db_ready():
        try:
            ensure_collections()
        except PyMongoError as e:
            _log.warning("ensure_collections() falló: %s", e)
    else:
        _log.warning("Mongo no listo; omitiendo ensure_collections()")
    if not settings.jwt_configured:
        _log.warning("JWT_SECRET no configurado; login y rutas protegidas fallarán")
    yield
    close_mongo()


def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    add_middlewares(app)
    register_exception_handlers(app)
    # Monta routers bajo el prefijo configurado
    app.include_router(api_router, prefix=settings.api_prefix_normalized)
    return app


app = create_app()
