"""
Photo Storage
Keeps original uniform photos on disk and hands out their URLs
"""
import logging
from pathlib import Path
from typing import Optional

from uniform_grader.config import settings
from uniform_grader.core import BadRequestException, FileProcessingException, Messages
from uniform_grader.utils import (
    ensure_directory,
    generate_timestamp_id,
    get_file_extension,
    safe_filename,
)

logger = logging.getLogger(__name__)


class PhotoStorage:
    """Stores uploaded photos under a directory served as static files"""

    def __init__(self, root: Optional[Path] = None, url_prefix: Optional[str] = None):
        self.root = ensure_directory(root or settings.UPLOADS_DIR)
        self.url_prefix = (url_prefix or settings.PHOTO_URL_PREFIX).rstrip("/")

    def save(self, filename: str, content: bytes, owner: str = "") -> str:
        """
        Store a photo and return its public URL.

        Args:
            filename: Original upload name (used for the extension)
            content: File content
            owner: Optional prefix, e.g. the student id

        Returns:
            URL of the stored photo
        """
        if not filename:
            raise BadRequestException(Messages.FILENAME_REQUIRED)

        extension = get_file_extension(filename).lower() or "jpg"
        stored_name = safe_filename(f"{generate_timestamp_id(owner)}.{extension}")
        dest_path = self.root / stored_name

        try:
            with open(dest_path, "wb") as buffer:
                buffer.write(content)
        except OSError as e:
            logger.error(f"Failed to store photo {filename}: {e}")
            raise FileProcessingException(filename, str(e))

        logger.info(f"Stored photo: {stored_name}")
        return f"{self.url_prefix}/{stored_name}"

    def path_for(self, url: str) -> Path:
        """Local path of a photo URL returned by save()"""
        return self.root / url.rsplit("/", 1)[-1]
