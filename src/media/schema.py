from pydantic import BaseModel, ConfigDict


class CloudinaryUploadResponse(BaseModel):
    """The part of Cloudinary's upload response we rely on."""

    model_config = ConfigDict(extra="ignore")

    secure_url: str
    public_id: str
    width: int | None = None
    height: int | None = None
    format: str | None = None


class UploadResponse(BaseModel):
    success: bool = True
    url: str
    public_id: str
    width: int | None = None
    height: int | None = None
    format: str | None = None
