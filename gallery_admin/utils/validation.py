import re
from typing import Dict, List, Sequence
from ..schemas.rsvp import (
    MultiAnswer,
    RSVPGuest,
    RSVPMultipleChoiceQuestion,
    RSVPQuestion,
    RSVPQuestionAnswer,
    RSVPSingleChoiceQuestion,
    RSVPTextQuestion,
)
from .constants import RSVPLimits


class ValidationHelpers:
    @staticmethod
    def validate_question_count(count: int) -> bool:
        """Whether a wedding may hold this many questions"""
        return count <= RSVPLimits.MAX_QUESTIONS_PER_WEDDING

    @staticmethod
    def validate_guest_count(guests: Sequence[RSVPGuest], max_guests: int) -> bool:
        return len(guests) <= max_guests

    @staticmethod
    def validate_answers(
        questions: Sequence[RSVPQuestion], answers: Sequence[RSVPQuestionAnswer]
    ) -> List[str]:
        """
        Check guest answers against the configured questions.

        Returns:
            list: error messages, empty when every answer is acceptable.
            Answers to questions that no longer exist are ignored.
        """
        errors = []
        answers_by_question: Dict[str, RSVPQuestionAnswer] = {
            answer.question_id: answer for answer in answers
        }

        for question in sorted(questions, key=lambda q: q.order):
            answer = answers_by_question.get(question.id)
            values = (
                [v for v in answer.selected_values() if v.strip()] if answer else []
            )

            if not values:
                if question.required:
                    errors.append(f"'{question.label}' is required")
                continue

            if isinstance(question, RSVPTextQuestion):
                errors.extend(_check_text_answer(question, answer))
            elif isinstance(question, RSVPSingleChoiceQuestion):
                errors.extend(_check_single_choice_answer(question, answer))
            elif isinstance(question, RSVPMultipleChoiceQuestion):
                errors.extend(_check_multiple_choice_answer(question, answer))

        return errors


def _check_text_answer(
    question: RSVPTextQuestion, answer: RSVPQuestionAnswer
) -> List[str]:
    if isinstance(answer.value, MultiAnswer):
        return [f"'{question.label}' expects a single text answer"]

    text = answer.value.value
    rules = question.validation
    errors = []

    if len(text) > rules.max_length:
        errors.append(
            f"'{question.label}' must be at most {rules.max_length} characters"
        )
    if rules.min_length is not None and len(text) < rules.min_length:
        errors.append(
            f"'{question.label}' must be at least {rules.min_length} characters"
        )
    if rules.pattern:
        try:
            if re.fullmatch(rules.pattern, text) is None:
                errors.append(f"'{question.label}' has an invalid format")
        except re.error:
            # Patterns that do not compile are not enforced
            pass

    return errors


def _unknown_values(question, values: List[str]) -> List[str]:
    allowed = {option.value for option in question.options}
    return [value for value in values if value not in allowed]


def _check_single_choice_answer(
    question: RSVPSingleChoiceQuestion, answer: RSVPQuestionAnswer
) -> List[str]:
    values = answer.selected_values()
    if len(values) != 1:
        return [f"'{question.label}' accepts exactly one choice"]
    if _unknown_values(question, values):
        return [f"'{question.label}' has an unknown choice"]
    return []


def _check_multiple_choice_answer(
    question: RSVPMultipleChoiceQuestion, answer: RSVPQuestionAnswer
) -> List[str]:
    values = answer.selected_values()
    errors = []

    if _unknown_values(question, values):
        errors.append(f"'{question.label}' has an unknown choice")
    if question.min_selections is not None and len(values) < question.min_selections:
        errors.append(
            f"'{question.label}' needs at least {question.min_selections} choices"
        )
    if question.max_selections is not None and len(values) > question.max_selections:
        errors.append(
            f"'{question.label}' allows at most {question.max_selections} choices"
        )

    return errors
