from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr, StrictBool, field_validator

from src.sites.dtos import SiteNotFoundError, SiteValidationError
from src.sites.features.submit_rsvp.write_model import RSVPWriteModel, SqlRSVPWriteModel
from src.sites.schemas import RSVPResponse
from src.sites.urls import SUBMIT_RSVP_URL

router = APIRouter()


class RSVPSubmit(BaseModel):
    full_name: str
    attending: StrictBool
    email: EmailStr | None = None
    dietary_restrictions: str | None = None
    message: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class RSVPCreatedResponse(BaseModel):
    rsvp: RSVPResponse


def get_rsvp_write_model() -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRSVPWriteModel()


@router.post(
    SUBMIT_RSVP_URL,
    response_model=RSVPCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_rsvp(
    slug: str,
    rsvp_data: RSVPSubmit,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPCreatedResponse:
    """
    Submit a guest RSVP to a published wedding site.
    Name and attendance are required, everything else is optional.
    """
    try:
        rsvp = await write_model.submit_rsvp(
            slug=slug,
            full_name=rsvp_data.full_name,
            attending=rsvp_data.attending,
            email=rsvp_data.email,
            dietary_restrictions=rsvp_data.dietary_restrictions,
            message=rsvp_data.message,
        )
    except SiteNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wedding site not found")
    except SiteValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return RSVPCreatedResponse(rsvp=RSVPResponse.model_validate(rsvp))
