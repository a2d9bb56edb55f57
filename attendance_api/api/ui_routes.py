"""
UI Routes Blueprint.
Serves the frontend from the static folder.
"""
from flask import Blueprint, current_app

ui_bp = Blueprint('ui', __name__)

@ui_bp.route('/')
def index():
    """Serve the attendance page."""
    return current_app.send_static_file('index.html')
