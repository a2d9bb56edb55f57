"""
Attendance API Resources.
"""
from flask import request
from flask_restful import Resource
from attendance_api.services.attendance_service import AttendanceService
from attendance_api.utils.response_utils import (
    success_response, message_response, error_response, app_error_response, GENERIC_ERROR_MESSAGE
)
from attendance_api.exceptions.base import AppError
import logging

logger = logging.getLogger(__name__)

class AttendanceResource(Resource):
    """Resource for marking and listing attendance."""

    def __init__(self, repository):
        self.service = AttendanceService(repository)

    def post(self):
        """
        Mark attendance for a student on a date, updating an existing mark.
        """
        try:
            attendance, created = self.service.mark_attendance(request.get_json(silent=True))
            if created:
                return message_response("Attendance marked", 201, attendance=attendance.model_dump(mode='json'))
            return message_response("Attendance updated", 200, attendance=attendance.model_dump(mode='json'))

        except AppError as e:
            level = logging.ERROR if e.status_code >= 500 else logging.WARNING
            logger.log(level, f"Error marking attendance: {e.message} {e.details}")
            return app_error_response(e)
        except Exception as e:
            logger.error(f"Error marking attendance: {e}", exc_info=True)
            return error_response(GENERIC_ERROR_MESSAGE, 500)

    def get(self):
        """
        List attendance with students populated, optionally for one ?date=.
        """
        date = request.args.get('date', '').strip()
        try:
            records = self.service.list_attendance(date)
            return success_response([record.model_dump(mode='json') for record in records])
        except AppError as e:
            logger.error(f"Error getting attendance: {e.message} {e.details}")
            return app_error_response(e)
        except Exception as e:
            logger.error(f"Error getting attendance: {e}", exc_info=True)
            return error_response(GENERIC_ERROR_MESSAGE, 500)

class StudentAttendanceResource(Resource):
    """Resource for one student's attendance history."""

    def __init__(self, repository):
        self.service = AttendanceService(repository)

    def get(self, student_id: str):
        try:
            records = self.service.list_attendance_for_student(student_id)
            return success_response([record.model_dump(mode='json') for record in records])
        except AppError as e:
            logger.error(f"Error getting student attendance: {e.message} {e.details}")
            return app_error_response(e)
        except Exception as e:
            logger.error(f"Error getting student attendance: {e}", exc_info=True)
            return error_response(GENERIC_ERROR_MESSAGE, 500)
