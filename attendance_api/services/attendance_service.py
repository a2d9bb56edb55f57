"""
Attendance Service
Marks daily attendance and answers attendance queries.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from attendance_api.exceptions.base import ValidationError
from attendance_api.schemas.models import Attendance, AttendanceMark

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('studentId', 'date', 'status')
MISSING_ATTENDANCE_FIELDS = "studentId, date, and status are required"
STUDENT_NOT_FOUND = "Student not found"


def _first_error_message(error: PydanticValidationError) -> str:
    return error.errors()[0]['msg']


class AttendanceService:
    """Service for attendance records."""

    def __init__(self, repository):
        self.repository = repository

    def mark_attendance(self, payload: Dict[str, Any]) -> Tuple[Attendance, bool]:
        """Create or update the attendance of one student on one date.

        Args:
            payload: Request body with ``studentId``, ``date`` and ``status``

        Returns:
            The stored record and True when it was newly created.

        Raises:
            ValidationError: A field is missing or malformed, or the student
                does not exist.
        """
        if not isinstance(payload, dict) or not all(payload.get(field) for field in REQUIRED_FIELDS):
            raise ValidationError(MISSING_ATTENDANCE_FIELDS)

        try:
            data = AttendanceMark.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(_first_error_message(e))

        if self.repository.get_student(data.studentId) is None:
            raise ValidationError(STUDENT_NOT_FOUND, details={'studentId': data.studentId})

        attendance, created = self.repository.upsert_attendance(
            data.studentId, data.date, data.status.value
        )
        logger.info(
            f"Attendance {'marked' if created else 'updated'} for student {data.studentId} "
            f"on {data.date}: {data.status.value}"
        )
        return attendance, created

    def list_attendance(self, date: Optional[str] = None) -> List[Attendance]:
        """Every record, or only those for ``date``, with students populated."""
        return self.repository.list_attendance(date or None)

    def list_attendance_for_student(self, student_id: str) -> List[Attendance]:
        return self.repository.list_attendance_for_student(student_id)
