"""
Pydantic schemas for the public content tables: countries, universities,
programs and articles.

Create schemas mirror the admin forms: bilingual names/titles are required,
numeric inputs arrive as text and are read up to the first character
that is not part of a number (zero when none leads), blank optional
strings are stored as NULL.
"""
from typing import List, Optional
from datetime import datetime
import math
import re
from pydantic import BaseModel, field_validator
from app.models import DegreeLevel, TeachingLanguage


def blank_to_none(v):
    if v is None or (isinstance(v, str) and v.strip() in ("", "null")):
        return None
    return v.strip() if isinstance(v, str) else v


def required_text(v):
    if v is None or not isinstance(v, str) or not v.strip():
        raise ValueError("This field is required")
    return v.strip()


INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def int_or_zero(v):
    """Leading integer of the form input ('12abc' -> 12, '1e3' -> 1); 0 when there is none"""
    if v is None:
        return None
    if isinstance(v, bool):
        return int(v)
    if isinstance(v, float):
        return int(v) if math.isfinite(v) else 0
    if isinstance(v, int):
        return v
    match = INT_PREFIX.match(str(v))
    return int(match.group(1)) if match else 0


def float_or_zero(v):
    """Leading decimal number of the form input ('12.5%' -> 12.5); 0.0 when there is none"""
    if v is None:
        return None
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return float(v)
    match = FLOAT_PREFIX.match(str(v))
    return float(match.group(1)) if match else 0.0


def flag(v):
    return False if v is None else v


class ParentSummary(BaseModel):
    id: str
    name_en: str
    name_ar: str

    class Config:
        from_attributes = True


# Countries

class CountryCreate(BaseModel):
    name_en: str
    name_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    image_url: Optional[str] = None
    flag_emoji: Optional[str] = None
    capital: Optional[str] = None
    population: Optional[int] = None
    acceptance_rate: Optional[float] = None
    living_cost: Optional[float] = None
    universities_count: Optional[int] = None
    students_count: Optional[str] = None
    featured: bool = False

    @field_validator('name_en', 'name_ar', mode='before')
    @classmethod
    def validate_required(cls, v):
        return required_text(v)

    @field_validator('description_en', 'description_ar', 'image_url', 'flag_emoji', 'capital', 'students_count', mode='before')
    @classmethod
    def validate_optional_strings(cls, v):
        return blank_to_none(v)

    @field_validator('population', 'universities_count', mode='before')
    @classmethod
    def validate_integers(cls, v):
        return int_or_zero(v)

    @field_validator('acceptance_rate', 'living_cost', mode='before')
    @classmethod
    def validate_floats(cls, v):
        return float_or_zero(v)

    @field_validator('featured', mode='before')
    @classmethod
    def validate_featured(cls, v):
        return flag(v)


class CountryUpdate(CountryCreate):
    name_en: Optional[str] = None
    name_ar: Optional[str] = None
    featured: Optional[bool] = None


class CountryResponse(BaseModel):
    id: str
    name_en: str
    name_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    image_url: Optional[str] = None
    flag_emoji: Optional[str] = None
    capital: Optional[str] = None
    population: Optional[int] = None
    acceptance_rate: Optional[float] = None
    living_cost: Optional[float] = None
    universities_count: Optional[int] = None
    students_count: Optional[str] = None
    featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Universities

class UniversityCreate(BaseModel):
    name_en: str
    name_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    image_url: Optional[str] = None
    country_id: Optional[str] = None
    ranking: Optional[int] = None
    students_count: Optional[str] = None
    website: Optional[str] = None
    featured: bool = False

    @field_validator('name_en', 'name_ar', mode='before')
    @classmethod
    def validate_required(cls, v):
        return required_text(v)

    @field_validator('description_en', 'description_ar', 'image_url', 'country_id', 'students_count', 'website', mode='before')
    @classmethod
    def validate_optional_strings(cls, v):
        return blank_to_none(v)

    @field_validator('ranking', mode='before')
    @classmethod
    def validate_ranking(cls, v):
        return int_or_zero(v)

    @field_validator('featured', mode='before')
    @classmethod
    def validate_featured(cls, v):
        return flag(v)


class UniversityUpdate(UniversityCreate):
    name_en: Optional[str] = None
    name_ar: Optional[str] = None
    featured: Optional[bool] = None


class UniversityResponse(BaseModel):
    id: str
    name_en: str
    name_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    image_url: Optional[str] = None
    country_id: Optional[str] = None
    country: Optional[ParentSummary] = None
    ranking: Optional[int] = None
    students_count: Optional[str] = None
    website: Optional[str] = None
    featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Programs

class ProgramCreate(BaseModel):
    name_en: str
    name_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    requirements_en: Optional[str] = None
    requirements_ar: Optional[str] = None
    image_url: Optional[str] = None
    university_id: Optional[str] = None
    degree_level: Optional[DegreeLevel] = None
    duration: Optional[str] = None
    language: Optional[TeachingLanguage] = None
    tuition_fee: Optional[str] = None
    featured: bool = False

    @field_validator('name_en', 'name_ar', mode='before')
    @classmethod
    def validate_required(cls, v):
        return required_text(v)

    @field_validator(
        'description_en', 'description_ar', 'requirements_en', 'requirements_ar',
        'image_url', 'university_id', 'degree_level', 'duration', 'language', 'tuition_fee',
        mode='before'
    )
    @classmethod
    def validate_optional_strings(cls, v):
        return blank_to_none(v)

    @field_validator('featured', mode='before')
    @classmethod
    def validate_featured(cls, v):
        return flag(v)


class ProgramUpdate(ProgramCreate):
    name_en: Optional[str] = None
    name_ar: Optional[str] = None
    featured: Optional[bool] = None


class ProgramResponse(BaseModel):
    id: str
    name_en: str
    name_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    requirements_en: Optional[str] = None
    requirements_ar: Optional[str] = None
    image_url: Optional[str] = None
    university_id: Optional[str] = None
    university: Optional[ParentSummary] = None
    degree_level: Optional[str] = None
    duration: Optional[str] = None
    language: Optional[str] = None
    tuition_fee: Optional[str] = None
    featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Articles

class ArticleCreate(BaseModel):
    title_en: str
    title_ar: str
    excerpt_en: Optional[str] = None
    excerpt_ar: Optional[str] = None
    content_en: Optional[str] = None
    content_ar: Optional[str] = None
    image_url: Optional[str] = None
    author_name: Optional[str] = None
    featured: bool = False
    published: bool = False

    @field_validator('title_en', 'title_ar', mode='before')
    @classmethod
    def validate_required(cls, v):
        return required_text(v)

    @field_validator('excerpt_en', 'excerpt_ar', 'content_en', 'content_ar', 'image_url', 'author_name', mode='before')
    @classmethod
    def validate_optional_strings(cls, v):
        return blank_to_none(v)

    @field_validator('featured', 'published', mode='before')
    @classmethod
    def validate_flags(cls, v):
        return flag(v)


class ArticleUpdate(ArticleCreate):
    title_en: Optional[str] = None
    title_ar: Optional[str] = None
    featured: Optional[bool] = None
    published: Optional[bool] = None


class ArticleResponse(BaseModel):
    id: str
    title_en: str
    title_ar: str
    excerpt_en: Optional[str] = None
    excerpt_ar: Optional[str] = None
    content_en: Optional[str] = None
    content_ar: Optional[str] = None
    image_url: Optional[str] = None
    author_name: Optional[str] = None
    featured: bool = False
    published: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Detail pages

class CountryDetailResponse(CountryResponse):
    universities: List[UniversityResponse] = []
    programs: List[ProgramResponse] = []


class UniversityDetailResponse(UniversityResponse):
    programs: List[ProgramResponse] = []


class ArticleDetailResponse(ArticleResponse):
    related_articles: List[ArticleResponse] = []


class HomeResponse(BaseModel):
    countries: List[CountryResponse]
    universities: List[UniversityResponse]
    programs: List[ProgramResponse]
    articles: List[ArticleResponse]
