import re
from pathlib import Path
from uuid import uuid4

from fastapi import HTTPException, UploadFile, status
from loguru import logger

from profile_hub.core.config import settings

# matched against both the file extension and the declared content type
ALLOWED_IMAGE_TYPES = re.compile(r'jpeg|jpg|png|gif')


def validate_image(file: UploadFile, content: bytes) -> None:
    filename = file.filename or ''
    extension = Path(filename).suffix.lower()
    content_type = file.content_type or ''
    if not (ALLOWED_IMAGE_TYPES.search(extension) and ALLOWED_IMAGE_TYPES.search(content_type)):
        logger.warning('media.upload.rejected', reason='type', content_type=content_type, filename=filename[:50])
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Only image files are allowed',
        )
    if len(content) > settings.UPLOAD_MAX_BYTES:
        logger.warning('media.upload.rejected', reason='size', size_bytes=len(content))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File size must be less than {settings.UPLOAD_MAX_BYTES // (1024 * 1024)}MB",
        )


def store_image(kind: str, file: UploadFile, content: bytes) -> str:
    """Write an uploaded image and return the public path it is served from."""
    validate_image(file, content)
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    name = f"{kind}-{uuid4().hex}{Path(file.filename or '').suffix.lower()}"
    (upload_dir / name).write_bytes(content)
    logger.info('media.upload.stored', kind=kind, name=name, size_bytes=len(content))
    return f"{settings.UPLOAD_URL_PREFIX.rstrip('/')}/{name}"
