"""
Database models package for the University Attendance System
"""

from .academic import SchoolClass, Section, class_student, section_student
from .student import Student
from .attendance import AttendanceRecord

__all__ = [
    'SchoolClass', 'Section', 'class_student', 'section_student',
    'Student', 'AttendanceRecord'
]
