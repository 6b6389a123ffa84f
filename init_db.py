"""
Database initialization script
Run this to create all tables
"""
from app.database import engine, Base
from app.models import Country, University, Program, Article, Application, SiteSettings, Admin  # noqa: F401

def init_database():
    """Create all tables that do not exist yet"""
    Base.metadata.create_all(bind=engine)
    print("Database initialized successfully!")

if __name__ == "__main__":
    init_database()
