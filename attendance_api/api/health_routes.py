"""
Health Routes Blueprint.
"""
from flask import Blueprint, Response

HEALTH_MESSAGE = 'Student Attendance API working'

health_bp = Blueprint('health', __name__)

@health_bp.route('/api')
def health():
    """Confirm the API is up."""
    return Response(HEALTH_MESSAGE, mimetype='text/plain')
