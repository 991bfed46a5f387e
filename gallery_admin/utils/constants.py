from ..models.enums import AttendanceStatus, ReactionType


class ResponseMessages:
    """Standard API response messages"""

    SUCCESS = "Success"
    CREATED = "Created successfully"
    UPDATED = "Updated successfully"
    DELETED = "Deleted successfully"


# Application Constants
class AppConstants:
    # Pagination
    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 100

    # CSV export walks the responses in pages of this size
    EXPORT_PAGE_SIZE = 100


# Validation limits protecting the database
class RSVPLimits:
    MAX_QUESTIONS_PER_WEDDING = 20
    MAX_OPTIONS_PER_QUESTION = 15
    MIN_OPTIONS_PER_QUESTION = 2
    MAX_LABEL_LENGTH = 200
    MAX_DESCRIPTION_LENGTH = 500
    MAX_TEXT_ANSWER_LENGTH = 1000
    MAX_MESSAGE_LENGTH = 2000
    MAX_NAME_LENGTH = 100
    MAX_EMAIL_LENGTH = 254
    MAX_PHONE_LENGTH = 20
    MAX_DIETARY_LENGTH = 500


class RSVPDefaults:
    ENABLED = True
    ALLOW_PLUS_ONE = True
    ASK_DIETARY_RESTRICTIONS = True
    MAX_GUESTS_PER_RESPONSE = 5


class StatisticsConstants:
    # Average file sizes (estimates)
    AVG_PHOTO_SIZE_MB = 3
    AVG_VIDEO_SIZE_MB = 50

    MOST_REACTED_LIMIT = 5
    UNKNOWN_UPLOADER = "Anonymous"
    NO_PEAK_DAY = "N/A"


# Namespace key of the demo RSVP document
DEMO_RSVP_STORAGE_KEY = "reflets_demo_rsvp"


REACTION_EMOJIS = {
    ReactionType.HEART.value: "❤️",
    ReactionType.LAUGH.value: "😂",
    ReactionType.WOW.value: "😮",
    ReactionType.CELEBRATE.value: "🎉",
    ReactionType.LOVE.value: "😍",
    ReactionType.CLAP.value: "👏",
}


ATTENDANCE_LABELS = {
    AttendanceStatus.YES: "Présent",
    AttendanceStatus.NO: "Absent",
    AttendanceStatus.MAYBE: "Incertain",
}


FRENCH_SHORT_MONTHS = [
    "janv.",
    "févr.",
    "mars",
    "avr.",
    "mai",
    "juin",
    "juil.",
    "août",
    "sept.",
    "oct.",
    "nov.",
    "déc.",
]
