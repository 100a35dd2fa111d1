"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import auth, cart, catalog, preference, saved_dishes, saved_items
from src.config import get_settings
from src.database import SessionLocal, init_db
from src.seed import seed_reference_data

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and example data before serving traffic."""
    if settings.bootstrap_on_startup:
        init_db()
        db = SessionLocal()
        try:
            seed_reference_data(db)
        finally:
            db.close()
    logger.info(f"API ready (environment={settings.environment})")
    yield


app = FastAPI(
    title="Jersey Store API",
    description="Football jersey store with cart, wishlists and favorite team",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report missing or malformed fields as 400 Bad Request."""
    logger.info(f"Rejected {request.method} {request.url.path}: invalid input")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Register routers
app.include_router(auth.router)
app.include_router(catalog.router)
app.include_router(cart.router)
app.include_router(saved_items.router)
app.include_router(preference.router)
app.include_router(saved_dishes.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
