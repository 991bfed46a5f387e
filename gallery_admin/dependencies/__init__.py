# gallery_admin/dependencies/__init__.py

from .rsvp import get_rsvp_store, get_rsvp_service

__all__ = [
    "get_rsvp_store",
    "get_rsvp_service",
]
