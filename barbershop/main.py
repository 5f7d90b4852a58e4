# barbershop/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from barbershop.config import get_settings
from barbershop.db import get_db, init_db
from barbershop.logging_config import configure_logging
from barbershop.routers import (
    appointments_routes,
    auth_routes,
    barbers_routes,
    notifications_routes,
    services_routes,
    working_hours_routes,
)

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    provide_db = app.dependency_overrides.get(get_db, get_db)
    init_db(provide_db(), seed=get_settings().SEED_DEFAULTS)
    yield


app = FastAPI(
    title="Barbershop Booking API",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in get_settings().CORS_ORIGINS.split(",")],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_routes.router, prefix="/api")
app.include_router(appointments_routes.router, prefix="/api")
app.include_router(services_routes.router, prefix="/api")
app.include_router(barbers_routes.router, prefix="/api")
app.include_router(working_hours_routes.router, prefix="/api")
app.include_router(notifications_routes.router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or malformed input is a 400, not FastAPI's default 422."""
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error: {exc}",
        exc_info=exc,
        extra={"request_path": request.url.path},
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/api/health")
def health_check():
    return {"status": "ok", "message": "Server is running"}
