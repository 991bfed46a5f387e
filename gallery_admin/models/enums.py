from enum import Enum


class QuestionType(str, Enum):
    TEXT = "text"
    SINGLE_CHOICE = "single_choice"
    MULTIPLE_CHOICE = "multiple_choice"


class DisplayMode(str, Enum):
    RADIO = "radio"
    DROPDOWN = "dropdown"


class AttendanceStatus(str, Enum):
    YES = "yes"
    NO = "no"
    MAYBE = "maybe"


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class ReactionType(str, Enum):
    HEART = "heart"
    LAUGH = "laugh"
    WOW = "wow"
    CELEBRATE = "celebrate"
    LOVE = "love"
    CLAP = "clap"
