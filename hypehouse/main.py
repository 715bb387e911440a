import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from hypehouse.config import get_settings
from hypehouse.routers import (
    auth,
    home,
    artists,
    music,
    events,
    promos,
    submit,
    admin_dashboard,
    admin_promos,
    admin_artists,
    admin_music,
    admin_events,
    admin_demos,
    admin_media,
)
from hypehouse.services.http_client import HTTPClientManager

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    """
    # Startup
    logger.info(f"Starting {settings.app_name}...")
    yield
    # Shutdown
    await HTTPClientManager.close()
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title=settings.app_name,
    description="API for the Hype House label site and its admin CMS",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "The change conflicts with existing data"},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Database error: {getattr(exc, 'orig', None) or exc}"},
    )


# Public site
app.include_router(
    home.router,
    prefix=f"{settings.api_v1_prefix}/home",
    tags=["Home"]
)
app.include_router(
    artists.router,
    prefix=f"{settings.api_v1_prefix}/artists",
    tags=["Artists"]
)
app.include_router(
    music.router,
    prefix=f"{settings.api_v1_prefix}/music",
    tags=["Music"]
)
app.include_router(
    events.router,
    prefix=f"{settings.api_v1_prefix}/events",
    tags=["Events"]
)
app.include_router(
    promos.router,
    prefix=f"{settings.api_v1_prefix}/promos",
    tags=["Promos"]
)
app.include_router(
    submit.router,
    prefix=f"{settings.api_v1_prefix}/submit",
    tags=["Demo Submissions"]
)

# Admin CMS
app.include_router(
    auth.router,
    prefix=f"{settings.api_v1_prefix}/admin",
    tags=["Admin Auth"]
)
app.include_router(
    admin_dashboard.router,
    prefix=f"{settings.api_v1_prefix}/admin/dashboard",
    tags=["Admin Dashboard"]
)
app.include_router(
    admin_promos.router,
    prefix=f"{settings.api_v1_prefix}/admin/promos",
    tags=["Admin Promos"]
)
app.include_router(
    admin_artists.router,
    prefix=f"{settings.api_v1_prefix}/admin/artists",
    tags=["Admin Artists"]
)
app.include_router(
    admin_music.router,
    prefix=f"{settings.api_v1_prefix}/admin/music",
    tags=["Admin Music"]
)
app.include_router(
    admin_events.router,
    prefix=f"{settings.api_v1_prefix}/admin/events",
    tags=["Admin Events"]
)
app.include_router(
    admin_demos.router,
    prefix=f"{settings.api_v1_prefix}/admin/demos",
    tags=["Admin Demos"]
)
app.include_router(
    admin_media.router,
    prefix=f"{settings.api_v1_prefix}/admin/media",
    tags=["Admin Media"]
)


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API info."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
