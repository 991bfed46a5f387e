# gallery_admin/dependencies/rsvp.py

from fastapi import Depends, Query

from ..services.rsvp_service import RSVPService
from ..services.rsvp_store import RSVPStore, build_rsvp_store


def get_rsvp_store(
    demo: bool = Query(False, description="Use the local demo store"),
) -> RSVPStore:
    """Storage backend for the request"""
    return build_rsvp_store(demo_mode=demo)


def get_rsvp_service(
    wedding_id: str,
    store: RSVPStore = Depends(get_rsvp_store),
) -> RSVPService:
    """RSVP service bound to the wedding in the path"""
    return RSVPService(wedding_id=wedding_id, store=store)
