from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.models import Article
from app.schemas.content import (
    HomeResponse, CountryResponse, UniversityResponse, ProgramResponse, ArticleResponse
)
from app.services.crud_service import CrudService, gather_queries
from app.services.resources import COUNTRIES, UNIVERSITIES, PROGRAMS, ARTICLES

router = APIRouter()

FEATURED_LIMIT = 3

def _featured(resource, schema, *criteria):
    def query(session: Session):
        rows = CrudService(session, resource).list(
            resource.model.featured.is_(True), *criteria, limit=FEATURED_LIMIT
        )
        return [schema.model_validate(row) for row in rows]
    return query

@router.get("", response_model=HomeResponse)
async def home(db: Session = Depends(get_db)):
    """Featured content for the landing page, fetched concurrently"""
    countries, universities, programs, articles = await gather_queries(
        db.get_bind(),
        _featured(COUNTRIES, CountryResponse),
        _featured(UNIVERSITIES, UniversityResponse),
        _featured(PROGRAMS, ProgramResponse),
        _featured(ARTICLES, ArticleResponse, Article.published.is_(True)),
    )
    return HomeResponse(
        countries=countries,
        universities=universities,
        programs=programs,
        articles=articles,
    )
