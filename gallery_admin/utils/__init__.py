from .constants import AppConstants, RSVPLimits, RSVPDefaults, StatisticsConstants
from .service_helpers import generate_id, round_half_up, utcnow

__all__ = [
    "AppConstants", "RSVPLimits", "RSVPDefaults", "StatisticsConstants",
    "generate_id", "round_half_up", "utcnow",
]
