"""
Schemas for consultation requests (applications) and their admin workflow
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, computed_field, field_validator
from app.models import ApplicationStatus
from app.schemas.content import ParentSummary, blank_to_none, required_text


class ContactRequest(BaseModel):
    """Contact page form"""
    full_name: str
    email: EmailStr
    phone: str
    message: str

    @field_validator('full_name', 'phone', mode='before')
    @classmethod
    def validate_required(cls, v):
        return required_text(v)

    @field_validator('email', mode='before')
    @classmethod
    def validate_email(cls, v):
        return required_text(v)

    @field_validator('message', mode='before')
    @classmethod
    def validate_message(cls, v):
        return required_text(v)


class ProgramApplicationRequest(ContactRequest):
    """Program detail page form; the message is optional here"""
    message: Optional[str] = None
    nationality: Optional[str] = None
    education_level: Optional[str] = None

    @field_validator('message', mode='before')
    @classmethod
    def validate_message(cls, v):
        return blank_to_none(v)

    @field_validator('nationality', 'education_level', mode='before')
    @classmethod
    def validate_profile_strings(cls, v):
        return blank_to_none(v)


class ApplicationSubmitResponse(BaseModel):
    success: bool
    message: str
    application_id: Optional[str] = None


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus


class ApplicationResponse(BaseModel):
    id: str
    full_name: str
    email: str
    phone: str
    nationality: Optional[str] = None
    education_level: Optional[str] = None
    message: Optional[str] = None
    program_id: Optional[str] = None
    program: Optional[ParentSummary] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @computed_field
    @property
    def available_actions(self) -> List[str]:
        return ApplicationStatus.available_actions(self.status)
