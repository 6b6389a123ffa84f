from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.models import University, Program
from app.schemas.content import CountryResponse, CountryDetailResponse, UniversityResponse, ProgramResponse
from app.services.crud_service import CrudService
from app.services.resources import COUNTRIES, UNIVERSITIES, PROGRAMS

router = APIRouter()

# Programs shown on a country page
COUNTRY_PROGRAMS_LIMIT = 6

@router.get("", response_model=List[CountryResponse])
async def list_countries(db: Session = Depends(get_db)):
    """All countries, featured first then by English name"""
    countries = CrudService(db, COUNTRIES).list()
    return [CountryResponse.model_validate(country) for country in countries]

@router.get("/{country_id}", response_model=CountryDetailResponse)
async def get_country(country_id: str, db: Session = Depends(get_db)):
    """
    A country with its universities and a handful of programs offered by
    those universities.
    """
    country = CrudService(db, COUNTRIES).get_or_404(country_id)

    universities = CrudService(db, UNIVERSITIES).list(University.country_id == country_id)

    programs = []
    university_ids = [uni.id for uni in universities]
    if university_ids:
        programs = CrudService(db, PROGRAMS).list(
            Program.university_id.in_(university_ids),
            order_by=(Program.featured.desc(), Program.name_ar.asc()),
            limit=COUNTRY_PROGRAMS_LIMIT,
        )

    return CountryDetailResponse(
        **CountryResponse.model_validate(country).model_dump(),
        universities=[UniversityResponse.model_validate(uni) for uni in universities],
        programs=[ProgramResponse.model_validate(program) for program in programs],
    )
