"""
Database configuration and initialization for the University Attendance System
"""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine
import sqlite3

# Initialize SQLAlchemy instance
db = SQLAlchemy()

@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign key constraints for SQLite"""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

def init_db(app):
    """Create all tables with application context"""
    with app.app_context():
        # Import all models to ensure they are registered
        from models import SchoolClass, Section, Student, AttendanceRecord  # noqa: F401

        db.create_all()
        app.logger.debug("Database tables ensured")

def reset_database(app):
    """Reset database - WARNING: This will delete all data"""
    with app.app_context():
        from models import SchoolClass, Section, Student, AttendanceRecord  # noqa: F401

        db.drop_all()
        db.create_all()
        app.logger.warning("Database reset completed")

class DatabaseError(Exception):
    """Custom exception for database operations"""
    pass

def handle_db_error(func):
    """Decorator that rolls back the session and wraps database failures"""
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            db.session.rollback()
            raise DatabaseError(f"Database operation failed: {str(e)}") from e
    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper
