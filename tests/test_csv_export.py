from datetime import date, datetime, timezone

from gallery_admin.schemas.rsvp import RSVPQuestionAnswer, RSVPResponse
from gallery_admin.utils.csv_export import (
    build_responses_csv,
    export_filename,
    format_answer,
)


def response(**fields):
    data = {
        "id": "r1",
        "wedding_id": "wedding-1",
        "respondent_name": "Alice Martin",
        "attendance": "yes",
        "created_at": datetime(2024, 6, 15, 14, 30, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 6, 15, 14, 30, tzinfo=timezone.utc),
    }
    data.update(fields)
    return RSVPResponse(**data)


def test_header_and_row(make_question):
    menu = make_question("single_choice", label="Menu")
    allergies = make_question("text", label="Allergies", order=1)

    row = response(
        respondent_email="alice@example.com",
        respondent_phone="0601020304",
        guests=[{"name": "Bob"}, {"name": "Chloé"}],
        answers=[{"questionId": menu.id, "value": "option_2"}],
        message="Hâte d'y être",
    )

    lines = build_responses_csv([row], [menu, allergies]).split("\n")

    assert lines[0] == (
        "Nom,Email,Telephone,Presence,Accompagnants,Message,Date,Menu,Allergies"
    )
    assert lines[1] == (
        '"Alice Martin","alice@example.com","0601020304","Présent",'
        '"Bob; Chloé","Hâte d\'y être","15/06/2024","Option 2",""'
    )
    assert len(lines) == 2


def test_quotes_are_doubled():
    csv = build_responses_csv([response(message='Il a dit "oui"')], [])

    assert '"Il a dit ""oui"""' in csv


def test_attendance_labels():
    rows = [
        response(id="1", attendance="yes"),
        response(id="2", attendance="no"),
        response(id="3", attendance="maybe"),
    ]

    lines = build_responses_csv(rows, []).split("\n")[1:]

    assert '"Présent"' in lines[0]
    assert '"Absent"' in lines[1]
    assert '"Incertain"' in lines[2]


def test_empty_export_is_header_only():
    assert build_responses_csv([], []) == (
        "Nom,Email,Telephone,Presence,Accompagnants,Message,Date"
    )


def test_format_multiple_choice_answer(make_question):
    question = make_question("multiple_choice", label="Activités")
    answer = RSVPQuestionAnswer(question_id=question.id, value=["option_1", "option_2"])

    assert format_answer(question, answer) == "Option 1, Option 2"


def test_format_answer_keeps_unknown_values(make_question):
    question = make_question("single_choice")
    answer = RSVPQuestionAnswer(question_id=question.id, value="retired_option")

    assert format_answer(question, answer) == "retired_option"
    assert format_answer(None, RSVPQuestionAnswer(question_id="q", value="x")) == "x"


def test_export_filename():
    assert export_filename(date(2024, 6, 15)) == "rsvp-responses-2024-06-15.csv"
