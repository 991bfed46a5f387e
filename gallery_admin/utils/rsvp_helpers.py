from typing import List
from ..models.enums import DisplayMode, QuestionType
from ..schemas.rsvp import (
    RSVPMultipleChoiceQuestion,
    RSVPQuestionOption,
    RSVPSingleChoiceQuestion,
    RSVPTextQuestion,
    RSVPTextValidation,
)
from .constants import RSVPLimits
from .service_helpers import generate_id, utcnow


def create_question_option(index: int) -> RSVPQuestionOption:
    return RSVPQuestionOption(
        id=generate_id(),
        label=f"Option {index}",
        value=f"option_{index}",
    )


def _default_options() -> List[RSVPQuestionOption]:
    return [create_question_option(1), create_question_option(2)]


def create_text_question(wedding_id: str, order: int) -> RSVPTextQuestion:
    """Create a new text question with defaults"""
    now = utcnow()
    return RSVPTextQuestion(
        id=generate_id(),
        wedding_id=wedding_id,
        label="",
        required=False,
        order=order,
        validation=RSVPTextValidation(max_length=RSVPLimits.MAX_TEXT_ANSWER_LENGTH),
        created_at=now,
        updated_at=now,
    )


def create_single_choice_question(
    wedding_id: str, order: int
) -> RSVPSingleChoiceQuestion:
    """Create a new single choice question with two placeholder options"""
    now = utcnow()
    return RSVPSingleChoiceQuestion(
        id=generate_id(),
        wedding_id=wedding_id,
        label="",
        required=False,
        order=order,
        options=_default_options(),
        display_as=DisplayMode.RADIO,
        created_at=now,
        updated_at=now,
    )


def create_multiple_choice_question(
    wedding_id: str, order: int
) -> RSVPMultipleChoiceQuestion:
    """Create a new multiple choice question with two placeholder options"""
    now = utcnow()
    return RSVPMultipleChoiceQuestion(
        id=generate_id(),
        wedding_id=wedding_id,
        label="",
        required=False,
        order=order,
        options=_default_options(),
        created_at=now,
        updated_at=now,
    )


_QUESTION_FACTORIES = {
    QuestionType.TEXT: create_text_question,
    QuestionType.SINGLE_CHOICE: create_single_choice_question,
    QuestionType.MULTIPLE_CHOICE: create_multiple_choice_question,
}


def create_question(question_type: QuestionType, wedding_id: str, order: int):
    """New question of the given type, placed at `order`"""
    return _QUESTION_FACTORIES[QuestionType(question_type)](wedding_id, order)
