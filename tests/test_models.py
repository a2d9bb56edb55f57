import pytest
from bson import ObjectId
from pydantic import ValidationError

from attendance_api.schemas.models import Attendance, AttendanceMark, AttendanceStatus, Student, StudentCreate


def test_student_create_requires_non_blank_fields():
    with pytest.raises(ValidationError):
        StudentCreate.model_validate({"name": " ", "roll": "R1"})
    with pytest.raises(ValidationError):
        StudentCreate.model_validate({"name": "Ann"})


def test_attendance_mark_accepts_valid_payload():
    student_id = str(ObjectId())

    mark = AttendanceMark.model_validate({"studentId": student_id, "date": "2024-02-29", "status": "Absent"})

    assert mark.studentId == student_id
    assert mark.status is AttendanceStatus.ABSENT


@pytest.mark.parametrize("date", ["2024-1-1", "2024/01/01", "20240101", "2023-02-29", "\u0662\u0660\u0662\u0664-\u0660\u0661-\u0660\u0661"])
def test_attendance_mark_rejects_bad_dates(date):
    with pytest.raises(ValidationError):
        AttendanceMark.model_validate({"studentId": str(ObjectId()), "date": date, "status": "Present"})


def test_attendance_mark_status_is_case_sensitive():
    with pytest.raises(ValidationError) as exc:
        AttendanceMark.model_validate({"studentId": str(ObjectId()), "date": "2024-01-01", "status": "present"})

    assert exc.value.errors()[0]["msg"] == "status must be one of Present, Absent"


def test_attendance_from_document_keeps_reference_or_population():
    student_doc = {"_id": ObjectId(), "name": "Ann", "roll": "R1"}
    base = {"_id": ObjectId(), "date": "2024-01-01", "status": "Present"}

    referenced = Attendance.from_document({**base, "student": student_doc["_id"]})
    populated = Attendance.from_document({**base, "student": student_doc})

    assert referenced.student == str(student_doc["_id"])
    assert populated.student == Student.from_document(student_doc)
    assert populated.model_dump(mode="json")["student"] == {
        "id": str(student_doc["_id"]), "name": "Ann", "roll": "R1"
    }
