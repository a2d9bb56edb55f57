"""
Student API Resource.
"""
from flask import request
from flask_restful import Resource
from attendance_api.services.student_service import StudentService
from attendance_api.utils.response_utils import success_response, error_response, app_error_response, GENERIC_ERROR_MESSAGE
from attendance_api.exceptions.base import AppError
import logging

logger = logging.getLogger(__name__)

class StudentListResource(Resource):
    """Resource for handling student operations."""

    def __init__(self, repository):
        self.service = StudentService(repository)

    def post(self):
        """Add a new student."""
        try:
            student = self.service.add_student(request.get_json(silent=True))
            return success_response(student.model_dump(mode='json'), 201)
        except AppError as e:
            level = logging.ERROR if e.status_code >= 500 else logging.WARNING
            logger.log(level, f"Error adding student: {e.message} {e.details}")
            return app_error_response(e)
        except Exception as e:
            logger.error(f"Error adding student: {e}", exc_info=True)
            return error_response(GENERIC_ERROR_MESSAGE, 500)

    def get(self):
        """List all students ordered by roll."""
        try:
            students = self.service.list_students()
            return success_response([student.model_dump(mode='json') for student in students])
        except AppError as e:
            logger.error(f"Error getting students: {e.message} {e.details}")
            return app_error_response(e)
        except Exception as e:
            logger.error(f"Error getting students: {e}", exc_info=True)
            return error_response(GENERIC_ERROR_MESSAGE, 500)
