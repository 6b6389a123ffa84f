"""
Site settings live in a single row. Saving reads the existing row first and
updates it, or inserts the first row when none exists yet.
"""
from typing import Any, Dict, Optional
import logging

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import SiteSettings

logger = logging.getLogger(__name__)


def get_site_settings(db: Session) -> Optional[SiteSettings]:
    try:
        return db.query(SiteSettings).order_by(SiteSettings.created_at.asc()).first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching site settings: {e}")
        raise HTTPException(status_code=500, detail="Could not fetch site settings")


def save_site_settings(db: Session, data: Dict[str, Any]) -> SiteSettings:
    """Read-modify-write; concurrent saves are last-writer-wins"""
    existing = get_site_settings(db)
    try:
        if existing:
            for key, value in data.items():
                setattr(existing, key, value)
            settings_row = existing
        else:
            settings_row = SiteSettings(**data)
            db.add(settings_row)
        db.commit()
        db.refresh(settings_row)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving site settings: {e}")
        raise HTTPException(status_code=500, detail="Could not save site settings")

    logger.info(f"Site settings {'updated' if existing else 'created'} ({settings_row.id})")
    return settings_row
