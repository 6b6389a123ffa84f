from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from botocore.exceptions import BotoCoreError, ClientError
from typing import Optional
import io
import logging
from app.models import Admin
from app.routers.auth import get_current_admin
from app.services.storage_service import (
    ImageValidationError, StorageConfigurationError, StorageService, get_storage_service
)

router = APIRouter()

logger = logging.getLogger(__name__)

@router.post("/images")
async def upload_image(
    file: UploadFile = File(...),
    bucket: Optional[str] = Form(None),
    current_admin: Admin = Depends(get_current_admin),
    storage: StorageService = Depends(get_storage_service)
):
    """Upload an image and return its public URL"""
    contents = await file.read()
    try:
        url = storage.upload_image(
            io.BytesIO(contents),
            file.filename or "image",
            file.content_type,
            len(contents),
            bucket=bucket,
        )
    except ImageValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageConfigurationError as e:
        logger.error(f"Image storage is not configured: {e}")
        raise HTTPException(status_code=500, detail="Could not upload image")
    except (BotoCoreError, ClientError):
        raise HTTPException(status_code=500, detail="Could not upload image")

    return {"url": url}
