"""
Attendance matrix construction for the attendance export
Combines roster, sections, day index and summaries into one row per student
"""

import math
from concurrent.futures import ThreadPoolExecutor

from services.export_types import AttendanceStatus, MatrixRow, NOT_APPLICABLE


class MatrixBuilder:
    """Builds the student x day attendance matrix"""

    @staticmethod
    def sections_for_student(student, sections):
        """Sections of the export that list the student as a member"""
        return [section for section in sections if student.id in section.student_ids]

    @staticmethod
    def calculate_percentage(total_attended, section_count, day_count):
        """Attended share of possible sessions in percent; 0 without sections"""
        total_possible = section_count * day_count
        if total_possible == 0:
            return 0.0
        return (total_attended / total_possible) * 100

    @staticmethod
    def day_status(day, student_sections, summary):
        if not student_sections:
            return AttendanceStatus.NOT_ENROLLED
        if summary is None:
            return AttendanceStatus.ABSENT
        section_ids = {section.id for section in student_sections}
        # Any of the student's sections counts, parallel lab sections included
        for session in summary.sessions:
            if session.day_number == day and session.section_id in section_ids:
                return session.status
        return AttendanceStatus.ABSENT

    @staticmethod
    def attended_in_sections(student_sections, summary):
        """Present and late sessions held in the student's own sections"""
        if summary is None:
            return 0
        section_ids = {section.id for section in student_sections}
        return sum(1 for session in summary.sessions if session.section_id in section_ids)

    @staticmethod
    def build_row(student, sections, day_index, summaries):
        """Build the MatrixRow for a single student"""
        student_sections = MatrixBuilder.sections_for_student(student, sections)
        summary = summaries.get(student.id)
        total = MatrixBuilder.attended_in_sections(student_sections, summary)
        section_numbers = tuple(sorted(section.section_number for section in student_sections))

        return MatrixRow(
            student_id=student.student_id,
            name=student.name,
            email=student.email,
            section_display=', '.join(str(n) for n in section_numbers) if section_numbers else NOT_APPLICABLE,
            section_numbers=section_numbers,
            cells={day: MatrixBuilder.day_status(day, student_sections, summary) for day in day_index},
            total=total,
            percentage=MatrixBuilder.calculate_percentage(total, len(student_sections), len(day_index))
        )

    @staticmethod
    def row_sort_key(row):
        """Primary section number, then name ignoring case; rows without a section go last"""
        primary_section = row.section_numbers[0] if row.section_numbers else math.inf
        return (primary_section, row.name.casefold(), row.name, row.student_id)

    @staticmethod
    def build_rows(roster, sections, day_index, summaries, max_workers=1):
        """
        Build and order one MatrixRow per roster student.

        Rows only read the shared inputs, so they can be computed on a thread
        pool when max_workers > 1; the final sort keeps the output identical
        to the sequential path.
        """
        def build(student):
            return MatrixBuilder.build_row(student, sections, day_index, summaries)

        if max_workers and max_workers > 1 and len(roster) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                rows = list(executor.map(build, roster))
        else:
            rows = [build(student) for student in roster]

        return sorted(rows, key=MatrixBuilder.row_sort_key)
