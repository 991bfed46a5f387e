from .common import (
    CamelModel,
    SuccessResponse,
    PaginatedResponse,
    PaginationInfo,
    ResponseFactory,
)
from .rsvp import (
    RSVPQuestionOption,
    RSVPTextValidation,
    RSVPTextQuestion,
    RSVPSingleChoiceQuestion,
    RSVPMultipleChoiceQuestion,
    RSVPQuestion,
    RSVPQuestionBody,
    RSVPConfig,
    ToggleEnabledRequest,
    NewQuestionRequest,
    ReorderQuestionsRequest,
    RSVPQuestionAnswer,
    RSVPGuest,
    RSVPResponseCreate,
    RSVPResponse,
    RSVPResponsePage,
    RSVPStatistics,
)
from .statistics import (
    MediaItem,
    GuestbookEntry,
    UploaderStats,
    DayUpload,
    HourUpload,
    ReactionStats,
    PhotoVideoRatio,
    EnhancedStatistics,
    EnhancedStatisticsRequest,
)
