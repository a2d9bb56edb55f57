"""
Main Application Runner
Starts the Student Attendance API server
"""
import logging

from attendance_api.app import create_app
from attendance_api.config.settings import Config
from attendance_api.utils.logger import setup_logging

logger = logging.getLogger(__name__)

def main():
    """Main application entry point."""
    setup_logging(Config.LOG_LEVEL, Config.LOG_FILE)

    logger.info("=== Student Attendance API ===")
    app = create_app()

    logger.info(f"Server running on http://localhost:{Config.PORT}")
    app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, use_reloader=False)

if __name__ == "__main__":
    main()
