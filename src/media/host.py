"""Media host - stores site images and music with an external provider and hands back a URL.

Only the returned URL ends up on the wedding site. An upload never touches stored site data.
"""

import base64
import logging
import re
from dataclasses import dataclass
from typing import Protocol

import httpx
from pydantic import ValidationError

from src.config.settings import settings
from src.media.schema import CloudinaryUploadResponse

logger = logging.getLogger(__name__)

AUDIO_EXTENSIONS = re.compile(r"\.(mp3|wav|m4a|ogg)$", re.IGNORECASE)


class InvalidMediaError(Exception):
    """Raised for files the media host refuses before contacting the provider."""


class MediaUploadError(Exception):
    """Raised when the provider rejects or fails an upload."""


@dataclass(frozen=True)
class UploadResultDTO:
    url: str
    public_id: str
    width: int | None = None
    height: int | None = None
    format: str | None = None


class MediaHost(Protocol):
    """Protocol for media uploads."""

    async def upload(self, file_bytes: bytes, mime_type: str, filename: str) -> UploadResultDTO:
        """Upload a file and return where it can be fetched from."""
        ...


class MediaConfig(Protocol):
    cloudinary_cloud_name: str
    cloudinary_upload_preset: str
    cloudinary_folder: str
    max_upload_size: int


def is_audio(mime_type: str, filename: str) -> bool:
    return mime_type.startswith("audio/") or bool(AUDIO_EXTENSIONS.search(filename or ""))


def validate_media(file_bytes: bytes, mime_type: str, filename: str, max_size: int) -> None:
    if not file_bytes:
        raise InvalidMediaError("No file provided")
    if not mime_type.startswith("image/") and not is_audio(mime_type, filename):
        raise InvalidMediaError("File must be an image or audio file")
    if len(file_bytes) > max_size:
        raise InvalidMediaError(f"File size must be less than {max_size // (1024 * 1024)}MB")


class CloudinaryMediaHost:
    """Unsigned uploads to Cloudinary through an upload preset."""

    def __init__(
        self,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
        config: MediaConfig = settings,
    ):
        self._http_client_class = http_client_class
        self._config = config

    def upload_url(self, resource_type: str) -> str:
        return (
            f"https://api.cloudinary.com/v1_1/{self._config.cloudinary_cloud_name}"
            f"/{resource_type}/upload"
        )

    async def upload(self, file_bytes: bytes, mime_type: str, filename: str) -> UploadResultDTO:
        validate_media(file_bytes, mime_type, filename, self._config.max_upload_size)

        if not self._config.cloudinary_cloud_name:
            raise MediaUploadError("Media host is not configured")

        audio = is_audio(mime_type, filename)
        # Cloudinary files audio under the video resource type
        resource_type = "video" if audio else "image"
        data_uri = f"data:{mime_type};base64,{base64.b64encode(file_bytes).decode('ascii')}"
        form = {
            "file": data_uri,
            "upload_preset": self._config.cloudinary_upload_preset,
            "folder": self._config.cloudinary_folder,
        }
        if audio:
            form["resource_type"] = "video"

        try:
            async with self._http_client_class() as client:
                response = await client.post(self.upload_url(resource_type), data=form)
                response.raise_for_status()
                result = CloudinaryUploadResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            logger.error(f"Cloudinary upload of {filename} failed: {e}")
            raise MediaUploadError(f"Failed to upload {'audio' if audio else 'image'}") from e
        except ValidationError as e:
            logger.error(f"Unexpected Cloudinary response for {filename}: {e}")
            raise MediaUploadError("Unexpected response from media host") from e

        logger.info("Uploaded %s to Cloudinary as %s", filename, result.public_id)
        return UploadResultDTO(
            url=result.secure_url,
            public_id=result.public_id,
            width=result.width,
            height=result.height,
            format=result.format,
        )
