from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List, Optional
import logging
from app.database import get_db
from app.models import Admin, ApplicationStatus
from app.routers.auth import get_current_admin
from app.schemas.applications import ApplicationResponse, ApplicationStatusUpdate
from app.schemas.content import ArticleResponse
from app.schemas.site_settings import SiteSettingsResponse, SiteSettingsUpdate
from app.services.application_service import ApplicationService
from app.services.crud_service import CrudService, gather_queries
from app.services.resources import COUNTRIES, UNIVERSITIES, PROGRAMS, ARTICLES, APPLICATIONS
from app.services.site_settings_service import get_site_settings, save_site_settings

router = APIRouter()

logger = logging.getLogger(__name__)

RECENT_APPLICATIONS_LIMIT = 10

def _count(model):
    def query(session: Session) -> int:
        return session.query(func.count(model.id)).scalar() or 0
    return query

def _recent_applications(session: Session):
    rows = CrudService(session, APPLICATIONS).list(
        order_by=APPLICATIONS.admin_order, limit=RECENT_APPLICATIONS_LIMIT
    )
    return [ApplicationResponse.model_validate(row) for row in rows]

@router.get("/stats")
async def get_admin_stats(
    current_admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Dashboard counts and the newest consultation requests"""
    countries, universities, programs, articles, applications, recent = await gather_queries(
        db.get_bind(),
        _count(COUNTRIES.model),
        _count(UNIVERSITIES.model),
        _count(PROGRAMS.model),
        _count(ARTICLES.model),
        _count(APPLICATIONS.model),
        _recent_applications,
    )

    return {
        "counts": {
            "countries": countries,
            "universities": universities,
            "programs": programs,
            "articles": articles,
            "applications": applications,
        },
        "recent_applications": recent,
    }

# Applications

@router.get("/applications", response_model=List[ApplicationResponse])
async def list_applications(
    status: Optional[ApplicationStatus] = None,
    current_admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """All consultation requests, newest first"""
    applications = ApplicationService(db).list(status=status)
    return [ApplicationResponse.model_validate(app) for app in applications]

@router.patch("/applications/{application_id}/status", response_model=ApplicationResponse)
async def update_application_status(
    application_id: str,
    update: ApplicationStatusUpdate,
    current_admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    application = ApplicationService(db).set_status(application_id, update.status)
    return ApplicationResponse.model_validate(application)

@router.delete("/applications/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(
    application_id: str,
    current_admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    ApplicationService(db).delete(application_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Articles

@router.patch("/articles/{article_id}/publish", response_model=ArticleResponse)
async def toggle_article_published(
    article_id: str,
    current_admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Flip an article between draft and published"""
    crud = CrudService(db, ARTICLES)
    article = crud.get_or_404(article_id)
    article = crud.update(article_id, {"published": not article.published})
    logger.info(f"Article {article_id} published={article.published}")
    return ArticleResponse.model_validate(article)

# Site settings

@router.get("/site-settings", response_model=SiteSettingsResponse)
async def read_site_settings(
    current_admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    settings_row = get_site_settings(db)
    if not settings_row:
        return SiteSettingsResponse()
    return SiteSettingsResponse.model_validate(settings_row)

@router.put("/site-settings", response_model=SiteSettingsResponse)
async def update_site_settings(
    payload: SiteSettingsUpdate,
    current_admin: Admin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    settings_row = save_site_settings(db, payload.model_dump(exclude_unset=True))
    return SiteSettingsResponse.model_validate(settings_row)
