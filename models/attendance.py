"""
Attendance model for the University Attendance System
"""

from database import db
from datetime import datetime
from services.export_types import AttendanceEvent, AttendanceStatus

class AttendanceRecord(db.Model):
    """A single recorded attendance fact for a student in a section on a day"""
    __tablename__ = 'attendance_record'

    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey('student.id'), nullable=False, index=True)
    section_id = db.Column(db.Integer, db.ForeignKey('section.id'), nullable=False, index=True)
    class_id = db.Column(db.Integer, db.ForeignKey('class.id'), nullable=False, index=True)
    day_number = db.Column(db.Integer, nullable=False)
    status = db.Column(db.String(10), nullable=False)  # 'present', 'absent' or 'late'
    recorded_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.CheckConstraint(
            "status IN (" + ", ".join(f"'{value}'" for value in AttendanceStatus.recorded_values()) + ")",
            name='valid_attendance_status'
        ),
    )

    def is_present(self):
        """Check if student was present"""
        return self.status == AttendanceStatus.PRESENT.value

    def is_late(self):
        """Check if student was late"""
        return self.status == AttendanceStatus.LATE.value

    def to_event(self):
        """Convert to the plain event consumed by the export pipeline"""
        return AttendanceEvent(
            student_id=self.student_id,
            section_id=self.section_id,
            class_id=self.class_id,
            day_number=self.day_number,
            status=AttendanceStatus(self.status),
            recorded_at=self.recorded_at,
            id=self.id
        )

    @staticmethod
    def events_for_sections(class_id, section_ids, statuses=None):
        """Attendance events of a class restricted to the given sections"""
        query = AttendanceRecord.query.filter(
            AttendanceRecord.class_id == class_id,
            AttendanceRecord.section_id.in_(section_ids)
        )
        if statuses:
            query = query.filter(AttendanceRecord.status.in_(statuses))
        return [record.to_event() for record in query.order_by(AttendanceRecord.id).all()]

    def to_dict(self):
        """Convert attendance record to dictionary"""
        return {
            'id': self.id,
            'student_id': self.student_id,
            'student_name': self.student.name if self.student else None,
            'section_id': self.section_id,
            'section_number': self.section.section_number if self.section else None,
            'class_id': self.class_id,
            'day_number': self.day_number,
            'status': self.status,
            'recorded_at': self.recorded_at.isoformat() if self.recorded_at else None
        }

    def __repr__(self):
        student_ref = self.student.student_id if self.student else "Unknown"
        return f'<AttendanceRecord {student_ref} - day {self.day_number} - {self.status}>'
