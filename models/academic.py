"""
Academic structure models for the University Attendance System
SchoolClass and Section models with their roster association tables
"""

from database import db
from datetime import datetime

# Students enrolled in a class (the class roster)
class_student = db.Table(
    'class_student',
    db.Column('class_id', db.Integer, db.ForeignKey('class.id'), primary_key=True),
    db.Column('student_id', db.Integer, db.ForeignKey('student.id'), primary_key=True)
)

# Students belonging to a section of a class
section_student = db.Table(
    'section_student',
    db.Column('section_id', db.Integer, db.ForeignKey('section.id'), primary_key=True),
    db.Column('student_id', db.Integer, db.ForeignKey('student.id'), primary_key=True)
)

class SchoolClass(db.Model):
    """A taught class (course offering) with a student roster"""
    __tablename__ = 'class'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    code = db.Column(db.String(20), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    students = db.relationship('Student', secondary=class_student, lazy='subquery',
                               backref=db.backref('classes', lazy='dynamic'))
    sections = db.relationship('Section', backref='school_class', lazy='dynamic',
                               order_by='Section.section_number')

    def get_sections(self, section_id=None):
        """Sections of this class ordered by number, optionally restricted to one"""
        query = self.sections
        if section_id is not None:
            query = query.filter_by(id=section_id)
        return query.all()

    def to_dict(self):
        """Convert class to dictionary"""
        return {
            'id': self.id,
            'name': self.name,
            'code': self.code,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'total_students': len(self.students),
            'total_sections': self.sections.count()
        }

    def __repr__(self):
        return f'<SchoolClass {self.code}: {self.name}>'

class Section(db.Model):
    """Sub-group of a class (lab or tutorial group) with its own roster"""
    __tablename__ = 'section'

    id = db.Column(db.Integer, primary_key=True)
    class_id = db.Column(db.Integer, db.ForeignKey('class.id'), nullable=False, index=True)
    section_number = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    students = db.relationship('Student', secondary=section_student, lazy='subquery',
                               backref=db.backref('sections', lazy='dynamic'))
    attendance_records = db.relationship('AttendanceRecord', backref='section', lazy='dynamic')

    __table_args__ = (db.UniqueConstraint('class_id', 'section_number', name='unique_class_section_number'),)

    @property
    def student_ids(self):
        return {student.id for student in self.students}

    def to_dict(self):
        """Convert section to dictionary"""
        return {
            'id': self.id,
            'class_id': self.class_id,
            'section_number': self.section_number,
            'student_ids': sorted(self.student_ids),
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<Section {self.section_number} of class {self.class_id}>'
