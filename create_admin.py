"""
Script to create an admin account, or reset its password if it exists
Run: python create_admin.py admin@example.com "S3cret!" --name "Site Admin"
"""
import argparse
from app.database import SessionLocal, engine, Base
from app.models import Admin
from app.routers.auth import get_password_hash

def create_admin_user(email: str, password: str, name: str = None):
    Base.metadata.create_all(bind=engine)
    email = email.strip().lower()
    db = SessionLocal()
    try:
        existing_admin = db.query(Admin).filter(Admin.email == email).first()

        if existing_admin:
            existing_admin.hashed_password = get_password_hash(password)
            if name:
                existing_admin.name = name
            db.commit()
            print(f"Admin {email} already exists, password updated.")
            return existing_admin

        admin = Admin(
            email=email,
            name=name,
            hashed_password=get_password_hash(password),
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)

        print("✓ Admin created successfully!")
        print(f"  Email: {admin.email}")
        print(f"  Name: {admin.name}")
        return admin
    except Exception as e:
        print(f"Error creating admin user: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create or reset an admin account")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--name", default=None)
    args = parser.parse_args()
    create_admin_user(args.email, args.password, args.name)
