# 📄 File: app/shared/infrastructure/storage/image_storage.py
# 🧭 Purpose (Layman Explanation):
# Keeps the pictures people upload (plant photos, avatars, ad banners): checks they really are
# pictures, gives each a unique dated name, saves it, and throws the old one away when replaced.
# 🧪 Purpose (Technical Summary):
# Local-disk image store with extension/content-type/size validation, Pillow decoding checks,
# date+UUID file naming, relative URL generation and path-safe deletion.
# 🔗 Dependencies:
# - PIL (Pillow): verifies uploaded bytes decode as an image
# - FastAPI UploadFile, asyncio (file I/O off the event loop)
# - app.shared.utils.validators, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# Called by: user avatars (user_service), plant photos (plant_service), ad files (ad_service)

import asyncio
import io
import logging
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from typing import Optional
from uuid import uuid4

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import FileStorageError
from app.shared.utils.validators import validate_image_file

logger = logging.getLogger(__name__)


class ImageStorage:
    """
    Saves and deletes uploaded images under a single directory.

    Stored files are addressed by relative URLs such as ``images/2024-05-01_<uuid>.png``.
    """

    def __init__(self, base_dir: Path, url_prefix: str = "images",
                 allowed_extensions=None, max_size_bytes: Optional[int] = None):
        self.base_dir = Path(base_dir)
        self.url_prefix = url_prefix.strip("/")
        self.allowed_extensions = tuple(allowed_extensions or (".jpg", ".jpeg", ".png", ".gif", ".bmp"))
        self.max_size_bytes = max_size_bytes

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImageStorage":
        return cls(
            base_dir=settings.images_path,
            url_prefix=settings.IMAGES_URL_PREFIX,
            allowed_extensions=settings.allowed_image_extensions,
            max_size_bytes=settings.MAX_IMAGE_SIZE_MB * 1024 * 1024,
        )

    def ensure_directory(self) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def build_filename(self, original_name: str) -> str:
        extension = Path(original_name).suffix.lower()
        return f"{datetime.now():%Y-%m-%d}_{uuid4()}{extension}"

    @staticmethod
    def has_file(upload: Optional[UploadFile]) -> bool:
        """True when a multipart field actually carried a file."""
        return upload is not None and bool(upload.filename)

    async def save(self, upload: UploadFile) -> str:
        """
        Validate and store an uploaded image.

        Args:
            upload: Multipart file from the request

        Returns:
            Relative URL of the stored file

        Raises:
            FileStorageError: If the upload is not an acceptable image
        """
        data = await upload.read()
        result = validate_image_file(
            upload.filename,
            len(data),
            upload.content_type,
            allowed_extensions=self.allowed_extensions,
            max_size=self.max_size_bytes,
        )
        if not result.is_valid:
            logger.warning(f"Rejected upload {upload.filename}: {result.errors}")
            raise FileStorageError(result.first_error, filename=upload.filename,
                                   details={"errors": result.errors})

        self._verify_image(data, upload.filename)

        filename = self.build_filename(upload.filename)
        target = self.base_dir / filename
        self.ensure_directory()
        await asyncio.to_thread(target.write_bytes, data)
        logger.info(f"Stored image {filename} ({len(data)} bytes)")
        return f"{self.url_prefix}/{filename}"

    def _verify_image(self, data: bytes, filename: Optional[str]) -> None:
        try:
            with Image.open(io.BytesIO(data)) as image:
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise FileStorageError("The uploaded file is not a readable image", filename=filename) from e

    def resolve(self, url: Optional[str]) -> Optional[Path]:
        """Map a stored URL back to a path inside ``base_dir``; None for foreign paths."""
        if not url:
            return None
        name = Path(url).name
        if not name or name in (".", ".."):
            return None
        path = (self.base_dir / name).resolve()
        if path.parent != self.base_dir.resolve():
            return None
        return path

    async def delete(self, url: Optional[str]) -> bool:
        """
        Delete a stored image. Missing files are ignored.

        Returns:
            True if a file was removed
        """
        path = self.resolve(url)
        if path is None or not path.is_file():
            return False
        await asyncio.to_thread(path.unlink)
        logger.info(f"Deleted image {path.name}")
        return True

    async def replace(self, old_url: Optional[str], upload: UploadFile) -> str:
        """Store ``upload`` and then drop the previous file."""
        new_url = await self.save(upload)
        await self.delete(old_url)
        return new_url


@lru_cache()
def get_image_storage() -> ImageStorage:
    """FastAPI dependency returning the configured image store."""
    return ImageStorage.from_settings(get_settings())
