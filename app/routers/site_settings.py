from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.schemas.site_settings import SiteSettingsResponse, WhatsAppLinkResponse
from app.services.contact_links import build_whatsapp_link, program_greeting, GENERAL_GREETING
from app.services.crud_service import CrudService
from app.services.resources import PROGRAMS
from app.services.site_settings_service import get_site_settings

router = APIRouter()

@router.get("", response_model=SiteSettingsResponse)
async def read_site_settings(db: Session = Depends(get_db)):
    """Public site settings; empty values until an admin saves them"""
    settings_row = get_site_settings(db)
    if not settings_row:
        return SiteSettingsResponse()
    return SiteSettingsResponse.model_validate(settings_row)

@router.get("/whatsapp-link", response_model=WhatsAppLinkResponse)
async def whatsapp_link(program_id: Optional[str] = None, db: Session = Depends(get_db)):
    """Click-to-chat link, optionally mentioning a program"""
    settings_row = get_site_settings(db)
    text = GENERAL_GREETING
    if program_id:
        program = CrudService(db, PROGRAMS).get_or_404(program_id)
        text = program_greeting(program.name_ar)

    url = build_whatsapp_link(settings_row.whatsapp if settings_row else None, text)
    if not url:
        raise HTTPException(status_code=404, detail="WhatsApp contact is not configured")
    return WhatsAppLinkResponse(url=url)
