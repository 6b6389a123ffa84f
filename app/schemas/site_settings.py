from typing import Optional
from datetime import datetime
from pydantic import BaseModel, field_validator
from app.schemas.content import blank_to_none


class SiteSettingsUpdate(BaseModel):
    site_name: Optional[str] = None
    site_logo: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    whatsapp: Optional[str] = None
    address: Optional[str] = None
    about_description: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None

    @field_validator('*', mode='before')
    @classmethod
    def validate_optional_strings(cls, v):
        return blank_to_none(v)


class SiteSettingsResponse(SiteSettingsUpdate):
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class WhatsAppLinkResponse(BaseModel):
    url: str
