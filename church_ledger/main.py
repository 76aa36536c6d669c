"""
Church Ledger — FastAPI Application.

This is the entry point for the application. All routers are
registered here, and the schema is bootstrapped before the
first request is accepted.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from church_ledger.config import get_settings
from church_ledger.models.base import engine
from church_ledger.services.bootstrap_service import ensure_schema
from church_ledger.api.dependencies import get_credential_service
from church_ledger.api.health import router as health_router
from church_ledger.api.auth import router as auth_router
from church_ledger.api.meta import router as meta_router
from church_ledger.api.ledger import entries_router, exits_router
from church_ledger.api.users import router as users_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A failure here aborts startup; the server never listens.
    ensure_schema(engine, get_credential_service(), settings)
    logger.info("%s %s ready", settings.APP_NAME, settings.APP_VERSION)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Offerings, tithes and expenses of a church cash register",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed fields are the caller's fault: 400."""
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    """Log the real error, give the caller nothing to read into."""
    logger.exception(
        "Database error on %s %s", request.method, request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Register routers
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(meta_router)
app.include_router(entries_router)
app.include_router(exits_router)
app.include_router(users_router)
