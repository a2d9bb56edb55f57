from __future__ import annotations

from typing import Optional

import pytest
from bson import ObjectId

from attendance_api.app import create_app
from attendance_api.exceptions.base import ConflictError
from attendance_api.repositories.mongo_repository import DUPLICATE_ROLL_MESSAGE
from attendance_api.schemas.models import Attendance, Student


class InMemoryRepository:
    """Same contract as MongoRepository, kept in dicts."""

    def __init__(self):
        self.students: dict[str, Student] = {}
        self.attendance: dict[tuple[str, str], Attendance] = {}
        self.fail_with: Optional[Exception] = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def find_student_by_roll(self, roll: str) -> Optional[Student]:
        self._check()
        return next((s for s in self.students.values() if s.roll == roll), None)

    def get_student(self, student_id: str) -> Optional[Student]:
        self._check()
        return self.students.get(student_id)

    def create_student(self, name: str, roll: str) -> Student:
        self._check()
        if self.find_student_by_roll(roll):
            raise ConflictError(DUPLICATE_ROLL_MESSAGE)
        student = Student(id=str(ObjectId()), name=name, roll=roll)
        self.students[student.id] = student
        return student

    def list_students(self):
        self._check()
        return sorted(self.students.values(), key=lambda s: s.roll)

    def upsert_attendance(self, student_id: str, date: str, status: str):
        self._check()
        key = (student_id, date)
        existing = self.attendance.get(key)
        if existing:
            updated = existing.model_copy(update={"status": status})
            self.attendance[key] = updated
            return updated, False
        created = Attendance(id=str(ObjectId()), student=student_id, date=date, status=status)
        self.attendance[key] = created
        return created, True

    def list_attendance(self, date: str = None):
        self._check()
        records = [r for r in self.attendance.values() if not date or r.date == date]
        records.sort(key=lambda r: r.date)
        return [r.model_copy(update={"student": self.students.get(r.student)}) for r in records]

    def list_attendance_for_student(self, student_id: str):
        self._check()
        records = [r for r in self.attendance.values() if r.student == student_id]
        return sorted(records, key=lambda r: r.date)


@pytest.fixture
def repo():
    return InMemoryRepository()


@pytest.fixture
def app(repo, tmp_path):
    (tmp_path / "index.html").write_text("<h1>Student Attendance</h1>")
    application = create_app({"TESTING": True, "STATIC_FOLDER": str(tmp_path)}, repository=repo)
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def student(repo):
    return repo.create_student("Ann", "R1")
