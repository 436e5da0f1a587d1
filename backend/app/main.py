"""Admin Panel API - manage administrators and end users."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    from app.database import create_tables, engine

    create_tables()
    logger.info(f"Starting {settings.app_name}")

    yield

    engine.dispose()
    logger.info(f"Stopped {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    description="Manage users, administrators and authentication for the admin panel",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


# Import and include routers
from app.api import admins, auth, users  # noqa: E402

app.include_router(auth.router)
app.include_router(admins.router, prefix="/api")
app.include_router(users.router, prefix="/api")
