"""Storage for uploaded images.

Files land on local disk under {UPLOAD_DIR}/{category}/{random hex}{ext} and are served
by the /uploads static mount. StorageBackend is the seam for a bucket-backed implementation.
"""
import logging
import secrets
from pathlib import Path
from typing import Protocol

from portfolio.core.config import settings

logger = logging.getLogger("portfolio.uploads")

CATEGORIES = {"apps", "blog", "profile", "general"}


class StorageBackend(Protocol):
    def save(self, category: str, data: bytes, ext: str) -> str:
        """Save file and return its public URL."""
        ...


class LocalStorage:
    def __init__(self, base_dir: str | None = None, base_url: str | None = None):
        self.base_dir = Path(base_dir or settings.UPLOAD_DIR).resolve()
        self.base_url = (settings.MEDIA_BASE_URL if base_url is None else base_url).rstrip("/")

    def _category_path(self, category: str) -> Path:
        path = self.base_dir / category
        path.mkdir(parents=True, exist_ok=True)
        return path

    def save(self, category: str, data: bytes, ext: str) -> str:
        filename = f"{secrets.token_hex(16)}{ext}"
        filepath = self._category_path(category) / filename
        filepath.write_bytes(data)
        logger.info("Saved upload %s/%s (%d bytes)", category, filename, len(data))
        return f"{self.base_url}/uploads/{category}/{filename}"


_storage: StorageBackend | None = None


def get_storage() -> StorageBackend:
    global _storage
    if _storage is None:
        _storage = LocalStorage()
    return _storage
