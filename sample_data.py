#!/usr/bin/env python3
"""
Sample data generator for the University Attendance System
Creates a demo class with sections, students and a few days of attendance
"""

import random
import sys

from app import create_app
from database import db, handle_db_error
from models.academic import SchoolClass, Section
from models.student import Student
from models.attendance import AttendanceRecord

STUDENT_COUNT = 30
SECTION_COUNT = 3
DAY_COUNT = 5

@handle_db_error
def create_sample_data(seed=42):
    """Create sample data for the system and return the demo class"""
    rng = random.Random(seed)

    school_class = SchoolClass(name='Introduction to Programming', code='CS101')
    db.session.add(school_class)
    db.session.flush()
    print(f"✓ Created class {school_class.code}")

    students = []
    for i in range(1, STUDENT_COUNT + 1):
        student = Student(
            student_id=f'{10000 + i}',
            name=f'Student {i:02d}',
            email=f'student{i}@example.com'
        )
        students.append(student)
    school_class.students.extend(students)
    db.session.add_all(students)
    print(f"✓ Created {len(students)} students")

    sections = []
    for number in range(1, SECTION_COUNT + 1):
        section = Section(class_id=school_class.id, section_number=number)
        sections.append(section)
    db.session.add_all(sections)
    db.session.flush()

    # Round-robin membership; the last two students stay without a section
    for index, student in enumerate(students[:-2]):
        sections[index % SECTION_COUNT].students.append(student)
    print(f"✓ Created {len(sections)} sections")

    record_count = 0
    for section in sections:
        for student in section.students:
            for day in range(1, DAY_COUNT + 1):
                status = rng.choices(['present', 'late', 'absent'], weights=[7, 2, 1])[0]
                db.session.add(AttendanceRecord(
                    student_id=student.id,
                    section_id=section.id,
                    class_id=school_class.id,
                    day_number=day,
                    status=status
                ))
                record_count += 1

    db.session.commit()
    print(f"✓ Created {record_count} attendance records")
    return school_class

def main():
    app = create_app()
    with app.app_context():
        if SchoolClass.query.filter_by(code='CS101').first():
            print("Sample data already present, nothing to do.")
            return 0
        print("Creating sample data...")
        school_class = create_sample_data()
        print(f"\nExport it with: /api/export?classId={school_class.id}&format=excel")
    return 0

if __name__ == '__main__':
    sys.exit(main())
