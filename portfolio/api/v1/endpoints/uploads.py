"""Image uploads for the admin panel, stored per category (apps, blog, profile, general)."""
from fastapi import APIRouter, Depends, File, UploadFile

from portfolio.api.deps import get_current_admin
from portfolio.core.config import settings
from portfolio.core.exceptions import ValidationError
from portfolio.schemas.upload import UploadedFile, UploadedFiles
from portfolio.services.storage_service import CATEGORIES, get_storage

router = APIRouter(prefix="/uploads", tags=["uploads"])

# Raster formats only. The stored extension always comes from here, never from the client filename.
EXT_MAP = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
}


def _validate_category(category: str) -> str:
    if category not in CATEGORIES:
        raise ValidationError(f"Invalid upload category: {category}. Allowed: {sorted(CATEGORIES)}")
    return category


def _get_ext(file: UploadFile) -> str:
    ext = EXT_MAP.get((file.content_type or "").lower())
    if ext is None:
        raise ValidationError(f"Only image files are allowed ({', '.join(sorted(EXT_MAP))})")
    return ext


async def _read_and_validate_size(file: UploadFile) -> bytes:
    data = await file.read()
    if not data:
        raise ValidationError("No file uploaded")
    if len(data) > settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024:
        raise ValidationError(f"File too large. Max {settings.MAX_UPLOAD_SIZE_MB}MB")
    return data


async def _prepare(file: UploadFile) -> tuple[UploadFile, bytes, str]:
    ext = _get_ext(file)
    return file, await _read_and_validate_size(file), ext


def _save(category: str, file: UploadFile, data: bytes, ext: str) -> UploadedFile:
    url = get_storage().save(category, data, ext)
    return UploadedFile(
        url=url,
        original_name=file.filename or "",
        size=len(data),
        mimetype=file.content_type or "",
    )


@router.post("/{category}", response_model=UploadedFile)
async def upload_file(
    category: str,
    file: UploadFile = File(...),
    _admin: str = Depends(get_current_admin),
):
    """Upload one image. Returns the URL to store on the app, post or profile."""
    _validate_category(category)
    return _save(category, *await _prepare(file))


@router.post("/{category}/multiple", response_model=UploadedFiles)
async def upload_files(
    category: str,
    files: list[UploadFile] = File(...),
    _admin: str = Depends(get_current_admin),
):
    _validate_category(category)
    if len(files) > settings.MAX_FILES_PER_UPLOAD:
        raise ValidationError(f"Maximum {settings.MAX_FILES_PER_UPLOAD} files per upload")
    # all or nothing: nothing is written until every file has passed
    prepared = [await _prepare(f) for f in files]
    return UploadedFiles(files=[_save(category, *p) for p in prepared])
