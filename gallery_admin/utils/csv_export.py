import csv
import io
from datetime import date
from typing import Optional, Sequence
from ..schemas.rsvp import (
    ChoiceQuestion,
    RSVPQuestion,
    RSVPQuestionAnswer,
    RSVPResponse,
)
from .constants import ATTENDANCE_LABELS

CSV_HEADERS = [
    "Nom",
    "Email",
    "Telephone",
    "Presence",
    "Accompagnants",
    "Message",
    "Date",
]


def format_answer(question: Optional[RSVPQuestion], answer: RSVPQuestionAnswer) -> str:
    """Readable answer; choice values are shown with their option labels"""
    values = answer.selected_values()

    if isinstance(question, ChoiceQuestion):
        labels = {option.value: option.label for option in question.options}
        values = [labels.get(value, value) for value in values]

    return ", ".join(values)


def build_responses_csv(
    responses: Sequence[RSVPResponse], questions: Sequence[RSVPQuestion]
) -> str:
    buffer = io.StringIO()
    header_writer = csv.writer(buffer, lineterminator="\n")
    row_writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")

    header_writer.writerow(CSV_HEADERS + [q.label for q in questions])

    for response in responses:
        answers = {a.question_id: a for a in response.answers}
        answer_cells = [
            format_answer(q, answers[q.id]) if q.id in answers else ""
            for q in questions
        ]

        row_writer.writerow(
            [
                response.respondent_name,
                response.respondent_email or "",
                response.respondent_phone or "",
                ATTENDANCE_LABELS.get(response.attendance, response.attendance),
                "; ".join(g.name for g in response.guests),
                response.message or "",
                response.created_at.strftime("%d/%m/%Y"),
            ]
            + answer_cells
        )

    # No trailing newline after the last row
    return buffer.getvalue().rstrip("\n")


def export_filename(day: Optional[date] = None) -> str:
    day = day or date.today()
    return f"rsvp-responses-{day.isoformat()}.csv"
