import httpx
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from src.auth.dependencies import get_current_session
from src.auth.dtos import SessionDTO
from src.config.settings import settings
from src.media.host import CloudinaryMediaHost, InvalidMediaError, MediaHost, MediaUploadError
from src.media.schema import UploadResponse
from src.media.urls import UPLOAD_URL

router = APIRouter()


def get_media_host() -> MediaHost:
    """Factory for the media host. Override in tests."""
    return CloudinaryMediaHost(http_client_class=httpx.AsyncClient, config=settings)


@router.post(UPLOAD_URL, response_model=UploadResponse)
async def upload_media(
    file: UploadFile = File(...),
    session: SessionDTO = Depends(get_current_session),
    media_host: MediaHost = Depends(get_media_host),
) -> UploadResponse:
    """
    Upload an image or audio file for the caller's wedding site.
    Returns the hosted URL to store on the site.
    """
    content = await file.read()
    try:
        result = await media_host.upload(
            file_bytes=content,
            mime_type=file.content_type or "",
            filename=file.filename or "",
        )
    except InvalidMediaError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except MediaUploadError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return UploadResponse(
        url=result.url,
        public_id=result.public_id,
        width=result.width,
        height=result.height,
        format=result.format,
    )
