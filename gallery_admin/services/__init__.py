from .rsvp_service import RSVPService
from .rsvp_store import (
    LocalRSVPStore,
    RSVPStore,
    SupabaseRSVPStore,
    build_rsvp_store,
)
from .statistics_service import calculate_enhanced_statistics

__all__ = [
    "RSVPService",
    "RSVPStore",
    "LocalRSVPStore",
    "SupabaseRSVPStore",
    "build_rsvp_store",
    "calculate_enhanced_statistics",
]
