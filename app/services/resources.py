"""
Table-driven description of every managed resource.
Orderings follow the public listing pages and the admin managers.
"""
from app.models import Country, University, Program, Article, Application, SiteSettings
from app.schemas.content import (
    CountryCreate, CountryUpdate, CountryResponse,
    UniversityCreate, UniversityUpdate, UniversityResponse,
    ProgramCreate, ProgramUpdate, ProgramResponse,
    ArticleCreate, ArticleUpdate, ArticleResponse,
)
from app.schemas.applications import ApplicationResponse
from app.schemas.site_settings import SiteSettingsResponse
from app.services.crud_service import ResourceSpec

COUNTRIES = ResourceSpec(
    model=Country,
    label="Country",
    path="countries",
    public_order=(Country.featured.desc(), Country.name_en.asc()),
    admin_order=(Country.name_en.asc(),),
    create_schema=CountryCreate,
    update_schema=CountryUpdate,
    response_schema=CountryResponse,
)

UNIVERSITIES = ResourceSpec(
    model=University,
    label="University",
    path="universities",
    public_order=(University.featured.desc(), University.ranking.asc().nulls_last()),
    admin_order=(University.name_en.asc(),),
    joins=(University.country,),
    create_schema=UniversityCreate,
    update_schema=UniversityUpdate,
    response_schema=UniversityResponse,
)

PROGRAMS = ResourceSpec(
    model=Program,
    label="Program",
    path="programs",
    public_order=(Program.featured.desc(), Program.name_ar.asc()),
    admin_order=(Program.name_en.asc(),),
    joins=(Program.university,),
    create_schema=ProgramCreate,
    update_schema=ProgramUpdate,
    response_schema=ProgramResponse,
)

ARTICLES = ResourceSpec(
    model=Article,
    label="Article",
    path="articles",
    public_order=(Article.featured.desc(), Article.created_at.desc()),
    admin_order=(Article.created_at.desc(),),
    create_schema=ArticleCreate,
    update_schema=ArticleUpdate,
    response_schema=ArticleResponse,
)

APPLICATIONS = ResourceSpec(
    model=Application,
    label="Application",
    path="applications",
    public_order=(Application.created_at.desc(),),
    admin_order=(Application.created_at.desc(),),
    joins=(Application.program,),
    response_schema=ApplicationResponse,
)

SITE_SETTINGS = ResourceSpec(
    model=SiteSettings,
    label="Site settings",
    path="site-settings",
    plural="site settings",
    response_schema=SiteSettingsResponse,
)

# Resources with a full admin create/edit/delete manager
MANAGED_RESOURCES = (COUNTRIES, UNIVERSITIES, PROGRAMS, ARTICLES)
