from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Float
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
from typing import List, Optional
import enum
import uuid

def generate_uuid() -> str:
    return str(uuid.uuid4())

class ApplicationStatus(str, enum.Enum):
    PENDING = "pending"
    CONTACTED = "contacted"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def available_actions(cls, current: Optional[str]) -> List[str]:
        """
        Statuses an admin can switch to from `current`.
        Every transition is allowed; only the status already held is excluded.
        """
        return [value for value in cls.values() if value != current]

class DegreeLevel(str, enum.Enum):
    BACHELOR = "Bachelor"
    MASTER = "Master"
    PHD = "PhD"
    DIPLOMA = "Diploma"

class TeachingLanguage(str, enum.Enum):
    ENGLISH = "English"
    ARABIC = "Arabic"
    FRENCH = "French"
    GERMAN = "German"
    SPANISH = "Spanish"
    CHINESE = "Chinese"
    RUSSIAN = "Russian"

# Parent references (country_id, university_id, program_id) are plain indexed
# columns without a database FOREIGN KEY constraint: rows may point at a parent
# that has since been deleted.

# Countries table
class Country(Base):
    __tablename__ = "countries"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name_en = Column(String, nullable=False)
    name_ar = Column(String, nullable=False)
    description_en = Column(Text, nullable=True)
    description_ar = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    flag_emoji = Column(String, nullable=True)
    capital = Column(String, nullable=True)
    population = Column(Integer, nullable=True)
    acceptance_rate = Column(Float, nullable=True)
    living_cost = Column(Float, nullable=True)
    universities_count = Column(Integer, nullable=True)
    students_count = Column(String, nullable=True)
    featured = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

# Universities table
class University(Base):
    __tablename__ = "universities"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name_en = Column(String, nullable=False)
    name_ar = Column(String, nullable=False)
    description_en = Column(Text, nullable=True)
    description_ar = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    country_id = Column(String(36), nullable=True, index=True)
    ranking = Column(Integer, nullable=True)  # lower is better
    students_count = Column(String, nullable=True)
    website = Column(String, nullable=True)
    featured = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    country = relationship(
        "Country",
        primaryjoin="foreign(University.country_id) == Country.id",
        viewonly=True,
    )

# Programs table
class Program(Base):
    __tablename__ = "programs"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name_en = Column(String, nullable=False)
    name_ar = Column(String, nullable=False)
    description_en = Column(Text, nullable=True)
    description_ar = Column(Text, nullable=True)
    requirements_en = Column(Text, nullable=True)
    requirements_ar = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    university_id = Column(String(36), nullable=True, index=True)
    degree_level = Column(String, nullable=True)  # DegreeLevel value
    duration = Column(String, nullable=True)
    language = Column(String, nullable=True)  # TeachingLanguage value
    tuition_fee = Column(String, nullable=True)
    featured = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    university = relationship(
        "University",
        primaryjoin="foreign(Program.university_id) == University.id",
        viewonly=True,
    )

# Articles table
class Article(Base):
    __tablename__ = "articles"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title_en = Column(String, nullable=False)
    title_ar = Column(String, nullable=False)
    excerpt_en = Column(Text, nullable=True)
    excerpt_ar = Column(Text, nullable=True)
    content_en = Column(Text, nullable=True)  # HTML
    content_ar = Column(Text, nullable=True)  # HTML
    image_url = Column(String, nullable=True)
    author_name = Column(String, nullable=True)
    featured = Column(Boolean, default=False)
    published = Column(Boolean, default=False)  # only published articles are public
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

# Applications table - consultation requests from the public site
class Application(Base):
    __tablename__ = "applications"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    full_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    nationality = Column(String, nullable=True)
    education_level = Column(String, nullable=True)
    message = Column(Text, nullable=True)
    program_id = Column(String(36), nullable=True, index=True)
    status = Column(String, default=ApplicationStatus.PENDING.value)  # free text, see ApplicationStatus
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    program = relationship(
        "Program",
        primaryjoin="foreign(Application.program_id) == Program.id",
        viewonly=True,
    )

# Site settings table - holds at most one row
class SiteSettings(Base):
    __tablename__ = "site_settings"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    site_name = Column(String, nullable=True)
    site_logo = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    whatsapp = Column(String, nullable=True)
    address = Column(Text, nullable=True)
    about_description = Column(Text, nullable=True)
    primary_color = Column(String, nullable=True)
    secondary_color = Column(String, nullable=True)
    accent_color = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

# Admins table
class Admin(Base):
    __tablename__ = "admins"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
