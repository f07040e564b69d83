from fastapi import APIRouter

from .features.export_rsvps.router import router as export_rsvps_router
from .features.get_own_site.router import router as get_own_site_router
from .features.get_public_site.router import router as get_public_site_router
from .features.list_rsvps.router import router as list_rsvps_router
from .features.save_site.router import router as save_site_router
from .features.submit_rsvp.router import router as submit_rsvp_router

router = APIRouter()

# /wedding/site and /rsvp/{list,export} must be matched before the slug routes
router.include_router(get_own_site_router)
router.include_router(save_site_router)
router.include_router(get_public_site_router)
router.include_router(list_rsvps_router)
router.include_router(export_rsvps_router)
router.include_router(submit_rsvp_router)
