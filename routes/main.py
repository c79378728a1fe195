"""
Landing route for the University Attendance System
"""

from flask import Blueprint

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    """Health-style landing page"""
    return 'University Attendance System is running!'
