"""
Pydantic Models for Input Validation and Output Serialization.
"""
import re
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


class StudentCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)

    name: str = Field(..., min_length=1)
    roll: str = Field(..., min_length=1)


class AttendanceMark(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)

    studentId: str
    date: str
    status: AttendanceStatus

    @field_validator('studentId')
    @classmethod
    def validate_student_id(cls, v):
        if not ObjectId.is_valid(v):
            raise PydanticCustomError('invalid_id', 'studentId must be a valid id')
        return v

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        if not DATE_PATTERN.match(v):
            raise PydanticCustomError('invalid_date', 'date must be in YYYY-MM-DD format')
        try:
            datetime.strptime(v, DATE_FORMAT)
        except ValueError:
            raise PydanticCustomError('invalid_date', 'date must be a valid calendar date')
        return v

    @field_validator('status', mode='before')
    @classmethod
    def validate_status(cls, v):
        allowed = [status.value for status in AttendanceStatus]
        if v not in allowed:
            raise PydanticCustomError('invalid_status', 'status must be one of {allowed}',
                                      {'allowed': ', '.join(allowed)})
        return v


class Student(BaseModel):
    id: str
    name: str
    roll: str

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Student":
        return cls(id=str(doc['_id']), name=doc['name'], roll=doc['roll'])


class Attendance(BaseModel):
    id: str
    # Student id, or the full record when populated; None if it no longer exists
    student: Optional[Union[Student, str]]
    date: str
    status: AttendanceStatus

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Attendance":
        student = doc.get('student')
        if isinstance(student, dict):
            student = Student.from_document(student)
        elif student is not None:
            student = str(student)
        return cls(id=str(doc['_id']), student=student, date=doc['date'], status=doc['status'])
