from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from app.database import engine, Base
from app.routers import (
    auth, admin, countries, universities, programs, articles,
    applications, site_settings, home, uploads
)
from app.routers.crud import build_crud_router
from app.services.resources import MANAGED_RESOURCES
from app.config import settings
import logging

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Create database tables
    try:
        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully")
    except SQLAlchemyError as e:
        # Don't fail startup if the database is unreachable or tables already exist
        logger.error(f"Error creating database tables: {e}")
    yield
    logger.info("Shutting down...")

app = FastAPI(
    title="Study Abroad Directory API",
    description="Bilingual (Arabic/English) study-abroad directory and consultation requests",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
# Parse ALLOWED_ORIGINS from comma-separated string, strip whitespace
allowed_origins = [origin.strip() for origin in settings.ALLOWED_ORIGINS.split(",") if origin.strip()]

logger.info(f"CORS allowed origins: {allowed_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins if allowed_origins else ["*"],  # Fallback to allow all if empty
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Public site
app.include_router(home.router, prefix="/api/home", tags=["home"])
app.include_router(countries.router, prefix="/api/countries", tags=["countries"])
app.include_router(universities.router, prefix="/api/universities", tags=["universities"])
app.include_router(programs.router, prefix="/api/programs", tags=["programs"])
app.include_router(articles.router, prefix="/api/articles", tags=["articles"])
app.include_router(applications.router, prefix="/api/applications", tags=["applications"])
app.include_router(site_settings.router, prefix="/api/site-settings", tags=["site-settings"])

# Admin
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
app.include_router(uploads.router, prefix="/api/admin/uploads", tags=["admin"])
for resource in MANAGED_RESOURCES:
    app.include_router(
        build_crud_router(resource),
        prefix=f"/api/admin/{resource.path}",
        tags=["admin"],
    )

@app.get("/")
async def root():
    return {"message": "Study Abroad Directory API", "status": "running"}

@app.get("/health")
async def health():
    return {"status": "healthy"}
