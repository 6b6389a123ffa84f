from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.content import ProgramResponse
from app.schemas.applications import ProgramApplicationRequest, ApplicationSubmitResponse
from app.services.application_service import ApplicationService
from app.services.crud_service import CrudService
from app.services.resources import PROGRAMS

router = APIRouter()

@router.get("", response_model=List[ProgramResponse])
async def list_programs(db: Session = Depends(get_db)):
    """All programs with their university, featured first"""
    programs = CrudService(db, PROGRAMS).list()
    return [ProgramResponse.model_validate(program) for program in programs]

@router.get("/{program_id}", response_model=ProgramResponse)
async def get_program(program_id: str, db: Session = Depends(get_db)):
    program = CrudService(db, PROGRAMS).get_or_404(program_id)
    return ProgramResponse.model_validate(program)

@router.post(
    "/{program_id}/apply",
    response_model=ApplicationSubmitResponse,
    status_code=status.HTTP_201_CREATED,
)
async def apply_for_program(
    program_id: str,
    form_data: ProgramApplicationRequest,
    db: Session = Depends(get_db)
):
    """Consultation request from a program page"""
    program = CrudService(db, PROGRAMS).get_or_404(program_id)
    application = ApplicationService(db).submit_for_program(program, form_data)

    return ApplicationSubmitResponse(
        success=True,
        message="Your request has been sent. We will contact you soon to discuss the details.",
        application_id=application.id
    )
