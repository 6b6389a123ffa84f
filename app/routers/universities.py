from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.models import Program
from app.schemas.content import UniversityResponse, UniversityDetailResponse, ProgramResponse
from app.services.crud_service import CrudService
from app.services.resources import UNIVERSITIES, PROGRAMS

router = APIRouter()

@router.get("", response_model=List[UniversityResponse])
async def list_universities(db: Session = Depends(get_db)):
    """All universities, featured first then by ranking"""
    universities = CrudService(db, UNIVERSITIES).list()
    return [UniversityResponse.model_validate(uni) for uni in universities]

@router.get("/{university_id}", response_model=UniversityDetailResponse)
async def get_university(university_id: str, db: Session = Depends(get_db)):
    """Get a specific university with its programs"""
    university = CrudService(db, UNIVERSITIES).get_or_404(university_id)
    programs = CrudService(db, PROGRAMS).list(Program.university_id == university_id)

    return UniversityDetailResponse(
        **UniversityResponse.model_validate(university).model_dump(),
        programs=[ProgramResponse.model_validate(program) for program in programs],
    )
