from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.models import Article
from app.schemas.content import ArticleResponse, ArticleDetailResponse
from app.services.crud_service import CrudService
from app.services.resources import ARTICLES

router = APIRouter()

RELATED_ARTICLES_LIMIT = 3

@router.get("", response_model=List[ArticleResponse])
async def list_articles(db: Session = Depends(get_db)):
    """Published articles, featured first then newest first"""
    articles = CrudService(db, ARTICLES).list(Article.published.is_(True))
    return [ArticleResponse.model_validate(article) for article in articles]

@router.get("/{article_id}", response_model=ArticleDetailResponse)
async def get_article(article_id: str, db: Session = Depends(get_db)):
    """Unpublished articles are reported as not found"""
    crud = CrudService(db, ARTICLES)
    article = crud.get_or_404(article_id, Article.published.is_(True))

    related = crud.list(
        Article.published.is_(True),
        Article.id != article_id,
        order_by=(Article.created_at.desc(),),
        limit=RELATED_ARTICLES_LIMIT,
    )

    return ArticleDetailResponse(
        **ArticleResponse.model_validate(article).model_dump(),
        related_articles=[ArticleResponse.model_validate(item) for item in related],
    )
