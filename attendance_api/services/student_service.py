"""
Student Service
Handles student registration and listing.
"""
import logging
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from attendance_api.exceptions.base import ConflictError, ValidationError
from attendance_api.repositories.mongo_repository import DUPLICATE_ROLL_MESSAGE
from attendance_api.schemas.models import Student, StudentCreate

logger = logging.getLogger(__name__)

MISSING_STUDENT_FIELDS = "Name and roll are required"


class StudentService:
    """Service for student records."""

    def __init__(self, repository):
        self.repository = repository

    def add_student(self, payload: Dict[str, Any]) -> Student:
        """Register a new student with a unique roll."""
        try:
            data = StudentCreate.model_validate(payload or {})
        except PydanticValidationError:
            raise ValidationError(MISSING_STUDENT_FIELDS)

        if self.repository.find_student_by_roll(data.roll):
            raise ConflictError(DUPLICATE_ROLL_MESSAGE, details={'roll': data.roll})

        return self.repository.create_student(data.name, data.roll)

    def list_students(self) -> List[Student]:
        return self.repository.list_students()
