"""
Contact form endpoint
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.applications import ContactRequest, ApplicationSubmitResponse
from app.services.application_service import ApplicationService

router = APIRouter()

@router.post("", response_model=ApplicationSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact_form(form_data: ContactRequest, db: Session = Depends(get_db)):
    """Create a pending consultation request"""
    application = ApplicationService(db).submit_contact(form_data)

    return ApplicationSubmitResponse(
        success=True,
        message="Your message has been sent. We will contact you soon.",
        application_id=application.id
    )
