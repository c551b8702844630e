"""Storage for uploaded resource images."""

import logging
import uuid
from pathlib import Path

from fastapi import UploadFile

from src.exceptions import ValidationError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}

CHUNK_SIZE = 64 * 1024


class ImageStorage:
    """Save uploaded images to a directory served under a public prefix."""

    def __init__(
        self,
        upload_dir: str | Path,
        public_prefix: str = "/uploads",
        max_bytes: int = 10 * 1024 * 1024,
    ):
        self.upload_dir = Path(upload_dir)
        self.public_prefix = public_prefix.rstrip("/")
        self.max_bytes = max_bytes

    def ensure_dir(self) -> None:
        """Create the upload directory if it does not exist yet."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def save(self, upload: UploadFile) -> str:
        """Write the upload to disk and return its public path."""
        if upload.content_type not in ALLOWED_IMAGE_TYPES:
            raise ValidationError(
                f"Invalid file type. Allowed types: {', '.join(ALLOWED_IMAGE_TYPES)}"
            )

        suffix = ALLOWED_IMAGE_TYPES[upload.content_type]
        filename = f"{uuid.uuid4().hex}{suffix}"
        target = self.upload_dir / filename

        self.ensure_dir()
        written = 0
        with target.open("wb") as out:
            while chunk := upload.file.read(CHUNK_SIZE):
                written += len(chunk)
                if written > self.max_bytes:
                    break
                out.write(chunk)

        if written > self.max_bytes:
            target.unlink(missing_ok=True)
            raise ValidationError(f"File too large. Maximum size is {self.max_bytes} bytes.")

        logger.info(f"Stored upload as {filename} ({written} bytes)")
        return f"{self.public_prefix}/{filename}"
