"""
Main Application Factory.
"""
import logging
import os

from flask import Flask
from flask_cors import CORS
from flask_restful import Api

from attendance_api.api.health_routes import health_bp
from attendance_api.api.ui_routes import ui_bp
from attendance_api.api.resources.attendance_resource import AttendanceResource, StudentAttendanceResource
from attendance_api.api.resources.student_resource import StudentListResource
from attendance_api.config.settings import Config
from attendance_api.middleware.error_handler import handle_errors, log_requests
from attendance_api.repositories.mongo_repository import MongoRepository

logger = logging.getLogger(__name__)


def create_app(config=None, repository=None):
    """
    Create and configure Flask application.

    Args:
        config: Optional mapping of settings overriding ``Config``
        repository: Store to use instead of a ``MongoRepository`` built from
            the configuration
    """
    settings = {key: getattr(Config, key) for key in dir(Config) if key.isupper()}
    settings.update(config or {})

    # Validate configuration
    try:
        Config.validate(settings)
    except ValueError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise

    # Serve frontend files from the public folder at the root path
    static_folder = os.path.abspath(settings['STATIC_FOLDER'])
    app = Flask(__name__, static_folder=static_folder, static_url_path='')
    app.config.update(settings)

    if repository is None:
        repository = MongoRepository(
            uri=settings['MONGO_URI'],
            database=settings['MONGO_DATABASE'],
            server_selection_timeout_ms=settings['MONGO_SERVER_SELECTION_TIMEOUT_MS'],
            max_pool_size=settings['MONGO_MAX_POOL_SIZE']
        )
    app.extensions['attendance_repository'] = repository

    # Set up error handling, logging and CORS middleware
    handle_errors(app)
    log_requests(app)
    CORS(app, expose_headers=["X-Correlation-ID"])

    app.register_blueprint(health_bp)
    app.register_blueprint(ui_bp)

    api = Api(app)
    resource_kwargs = {'repository': repository}

    # Register Resources
    api.add_resource(StudentListResource, '/api/students', resource_class_kwargs=resource_kwargs)
    api.add_resource(AttendanceResource, '/api/attendance', resource_class_kwargs=resource_kwargs)
    api.add_resource(
        StudentAttendanceResource,
        '/api/attendance/student/<string:student_id>',
        resource_class_kwargs=resource_kwargs
    )

    return app
