from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.auth.dependencies import get_current_session
from src.auth.dtos import SessionDTO
from src.sites.features.export_rsvps.csv_export import export_filename, rsvps_to_csv
from src.sites.features.get_own_site.router import get_own_site_read_model
from src.sites.features.get_own_site.read_model import OwnSiteReadModel
from src.sites.features.list_rsvps.read_model import RSVPReadModel
from src.sites.features.list_rsvps.router import get_rsvp_read_model
from src.sites.urls import EXPORT_RSVPS_URL

router = APIRouter()


@router.get(EXPORT_RSVPS_URL, response_class=Response)
async def export_rsvps(
    session: SessionDTO = Depends(get_current_session),
    site_read_model: OwnSiteReadModel = Depends(get_own_site_read_model),
    rsvp_read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> Response:
    """
    Download the caller's RSVPs as a CSV file.
    """
    site = await site_read_model.get_site(session.user_id)
    if site is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wedding site not found")

    result = await rsvp_read_model.list_rsvps(session.user_id)
    return Response(
        content=rsvps_to_csv(result.rsvps),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(site.slug)}"'},
    )
