"""
University Attendance System
Main Flask application entry point
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import Flask, jsonify
from flask_wtf.csrf import CSRFProtect
from config import Config
from database import db, init_db
from utils.errors import ExportError

csrf = CSRFProtect()

def create_app(config_class=Config):
    """Application factory pattern"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    # Initialize extensions with app
    db.init_app(app)
    csrf.init_app(app)

    # Register blueprints
    from routes.main import main_bp
    from routes.export import export_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(export_bp, url_prefix='/api/export')

    register_error_handlers(app)

    # Initialize database
    init_db(app)

    return app

def configure_logging(app):
    """Configure application logging"""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)

    formatter = logging.Formatter(app.config.get('LOG_FORMAT',
        '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'))

    # Services log through module loggers, so handlers go on the root logger
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    log_file = app.config.get('LOG_FILE')
    if log_file and not app.testing:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10240000,  # 10MB
            backupCount=10
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root.addHandler(file_handler)

    app.logger.setLevel(level)
    app.logger.info('University Attendance System startup')

def register_error_handlers(app):
    """Turn export errors into JSON responses"""

    @app.errorhandler(ExportError)
    def handle_export_error(error):
        app.logger.info(f"Export rejected ({error.status_code}): {error.message}")
        return jsonify(error.to_dict()), error.status_code

if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=4000, debug=True, use_reloader=False)
