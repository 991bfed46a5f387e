from pydantic import BaseModel, Field, RootModel, field_serializer, field_validator
from typing import Annotated, List, Literal, Optional, Union
from datetime import datetime
from .common import CamelModel
from ..models.enums import AttendanceStatus, DisplayMode, QuestionType
from ..utils.constants import RSVPDefaults, RSVPLimits


# ============================================
# QUESTIONS
# ============================================


class RSVPQuestionOption(CamelModel):
    id: str
    label: str = Field(..., max_length=RSVPLimits.MAX_LABEL_LENGTH)
    value: str


class RSVPTextValidation(CamelModel):
    min_length: Optional[int] = Field(None, ge=0)
    # Always bounded so free text cannot grow the row unchecked
    max_length: int = Field(..., ge=1, le=RSVPLimits.MAX_TEXT_ANSWER_LENGTH)
    pattern: Optional[str] = None


class RSVPQuestionBase(CamelModel):
    id: str
    wedding_id: str
    label: str = Field("", max_length=RSVPLimits.MAX_LABEL_LENGTH)
    description: Optional[str] = Field(
        None, max_length=RSVPLimits.MAX_DESCRIPTION_LENGTH
    )
    required: bool = False
    order: int = Field(0, ge=0)
    created_at: datetime
    updated_at: datetime


class RSVPTextQuestion(RSVPQuestionBase):
    type: Literal["text"] = "text"
    validation: RSVPTextValidation
    placeholder: Optional[str] = None
    multiline: Optional[bool] = None


class RSVPSingleChoiceQuestion(RSVPQuestionBase):
    type: Literal["single_choice"] = "single_choice"
    options: List[RSVPQuestionOption] = Field(
        ...,
        min_length=RSVPLimits.MIN_OPTIONS_PER_QUESTION,
        max_length=RSVPLimits.MAX_OPTIONS_PER_QUESTION,
    )
    display_as: DisplayMode = DisplayMode.RADIO


class RSVPMultipleChoiceQuestion(RSVPQuestionBase):
    type: Literal["multiple_choice"] = "multiple_choice"
    options: List[RSVPQuestionOption] = Field(
        ...,
        min_length=RSVPLimits.MIN_OPTIONS_PER_QUESTION,
        max_length=RSVPLimits.MAX_OPTIONS_PER_QUESTION,
    )
    min_selections: Optional[int] = Field(None, ge=0)
    max_selections: Optional[int] = Field(None, ge=1)


RSVPQuestion = Annotated[
    Union[RSVPTextQuestion, RSVPSingleChoiceQuestion, RSVPMultipleChoiceQuestion],
    Field(discriminator="type"),
]

ChoiceQuestion = (RSVPSingleChoiceQuestion, RSVPMultipleChoiceQuestion)


# ============================================
# CONFIGURATION
# ============================================


class RSVPConfig(CamelModel):
    """Per-wedding RSVP configuration, persisted wholesale"""

    enabled: bool = RSVPDefaults.ENABLED
    questions: List[RSVPQuestion] = Field(default_factory=list)
    deadline: Optional[datetime] = None
    welcome_message: Optional[str] = None
    thank_you_message: Optional[str] = None
    allow_plus_one: bool = RSVPDefaults.ALLOW_PLUS_ONE
    ask_dietary_restrictions: bool = RSVPDefaults.ASK_DIETARY_RESTRICTIONS
    max_guests_per_response: int = Field(RSVPDefaults.MAX_GUESTS_PER_RESPONSE, ge=1, le=20)

    @classmethod
    def default(cls) -> "RSVPConfig":
        # A new questions list every call; defaults are never shared between weddings
        return cls(questions=[])


class ToggleEnabledRequest(BaseModel):
    enabled: bool


class NewQuestionRequest(BaseModel):
    type: QuestionType


class ReorderQuestionsRequest(CamelModel):
    question_ids: List[str]


# ============================================
# RESPONSES
# ============================================


class SingleAnswer(BaseModel):
    kind: Literal["single"] = "single"
    value: str


class MultiAnswer(BaseModel):
    kind: Literal["multi"] = "multi"
    values: List[str]


AnswerValue = Annotated[Union[SingleAnswer, MultiAnswer], Field(discriminator="kind")]


class RSVPQuestionAnswer(CamelModel):
    """Answer to one question; stored as `string` or `string[]`"""

    question_id: str
    value: AnswerValue

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_raw_value(cls, v):
        if isinstance(v, str):
            return {"kind": "single", "value": v}
        if isinstance(v, (list, tuple)):
            return {"kind": "multi", "values": list(v)}
        return v

    @field_serializer("value")
    def _serialize_value(self, value: Union[SingleAnswer, MultiAnswer]):
        if isinstance(value, MultiAnswer):
            return list(value.values)
        return value.value

    def selected_values(self) -> List[str]:
        if isinstance(self.value, MultiAnswer):
            return list(self.value.values)
        return [self.value.value]


class RSVPGuest(CamelModel):
    name: str = Field(..., min_length=1, max_length=RSVPLimits.MAX_NAME_LENGTH)
    dietary_restrictions: Optional[str] = Field(
        None, max_length=RSVPLimits.MAX_DIETARY_LENGTH
    )
    is_child: Optional[bool] = None


class RSVPResponseCreate(CamelModel):
    """Guest submission, before id and timestamps are assigned"""

    respondent_name: str = Field(
        ..., min_length=1, max_length=RSVPLimits.MAX_NAME_LENGTH
    )
    respondent_email: Optional[str] = Field(
        None, max_length=RSVPLimits.MAX_EMAIL_LENGTH
    )
    respondent_phone: Optional[str] = Field(
        None, max_length=RSVPLimits.MAX_PHONE_LENGTH
    )
    attendance: AttendanceStatus
    guests: List[RSVPGuest] = Field(default_factory=list)
    answers: List[RSVPQuestionAnswer] = Field(default_factory=list)
    message: Optional[str] = Field(None, max_length=RSVPLimits.MAX_MESSAGE_LENGTH)


class RSVPResponse(RSVPResponseCreate):
    id: str
    wedding_id: str
    created_at: datetime
    updated_at: datetime


class RSVPResponsePage(CamelModel):
    responses: List[RSVPResponse]
    total: int


class RSVPStatistics(CamelModel):
    total: int = 0
    attending: int = 0
    not_attending: int = 0
    maybe: int = 0
    # Attending respondents plus their guests
    total_guests: int = 0
    response_rate: Optional[float] = None


class RSVPQuestionBody(RootModel[RSVPQuestion]):
    """Request body carrying one question of any type"""

    pass
