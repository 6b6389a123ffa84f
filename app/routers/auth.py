from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from pydantic import BaseModel
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from typing import Optional
import bcrypt
import logging
from app.database import get_db
from app.models import Admin
from app.config import settings

router = APIRouter()

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")

class AdminSession(BaseModel):
    id: str
    email: str
    name: Optional[str] = None

class Token(BaseModel):
    access_token: str
    token_type: str
    expires_at: datetime
    admin: AdminSession

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password using bcrypt"""
    try:
        return bcrypt.checkpw(
            plain_password.encode('utf-8'),
            hashed_password.encode('utf-8')
        )
    except (ValueError, TypeError, AttributeError):
        return False

def get_password_hash(password: str) -> str:
    """Hash password using bcrypt"""
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    # Ensure 'sub' (subject) is a string as required by JWT standard
    if "sub" in to_encode and not isinstance(to_encode["sub"], str):
        to_encode["sub"] = str(to_encode["sub"])
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return encoded_jwt, expire

def get_current_admin(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> Admin:
    """
    Resolve the admin behind a bearer token.
    The signature and expiry are checked, then the admin row must still exist.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT Error: {e}")
        raise credentials_exception

    admin_id = payload.get("sub")
    if not admin_id:
        logger.warning("JWT Error: No 'sub' claim in token")
        raise credentials_exception

    admin = db.query(Admin).filter(Admin.id == admin_id).first()
    if admin is None:
        logger.warning(f"Admin not found for ID: {admin_id}")
        raise credentials_exception
    return admin

@router.post("/login", response_model=Token)
async def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """Admin login with email (sent as `username`) and password"""
    admin = db.query(Admin).filter(Admin.email == form_data.username.strip().lower()).first()
    if not admin or not verify_password(form_data.password, admin.hashed_password):
        logger.info(f"Failed login attempt for {form_data.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token, expires_at = create_access_token(data={"sub": admin.id})
    logger.info(f"Admin {admin.email} logged in")

    return Token(
        access_token=access_token,
        token_type="bearer",
        expires_at=expires_at,
        admin=AdminSession(id=admin.id, email=admin.email, name=admin.name)
    )

@router.get("/me", response_model=AdminSession)
async def get_current_admin_info(current_admin: Admin = Depends(get_current_admin)):
    """Get the logged-in admin"""
    return AdminSession(id=current_admin.id, email=current_admin.email, name=current_admin.name)
