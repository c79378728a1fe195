"""
Attendance export service for the University Attendance System
Loads the export scope, builds the attendance matrix and renders it
"""

import logging
from dataclasses import dataclass

from database import db
from models.academic import SchoolClass
from models.attendance import AttendanceRecord
from services.attendance_aggregator import AttendanceAggregator
from services.day_index import DayIndexBuilder
from services.excel_export_service import ExcelExportService, XLSX_MIMETYPE
from services.export_types import ExportScope, RosterStudent, SectionInfo
from services.matrix_builder import MatrixBuilder
from utils.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ('excel',)


@dataclass
class ExportResult:
    content: bytes
    filename: str
    mimetype: str = XLSX_MIMETYPE
    row_count: int = 0
    section_count: int = 0
    day_count: int = 0


class AttendanceExportService:
    """Service for the attendance spreadsheet export"""

    @staticmethod
    def parse_scope(class_id, section_id=None, export_format=None):
        """Validate raw request values and return an ExportScope"""
        if class_id in (None, ''):
            raise BadRequestError('Class ID is required')
        if export_format not in SUPPORTED_FORMATS:
            raise BadRequestError('Only Excel format is supported')
        try:
            class_id = int(class_id)
        except (TypeError, ValueError):
            raise NotFoundError('Class not found')
        if section_id in (None, ''):
            section_id = None
        else:
            try:
                section_id = int(section_id)
            except (TypeError, ValueError):
                raise NotFoundError('No sections found for this class')
        return ExportScope(class_id=class_id, section_id=section_id)

    @staticmethod
    def load_roster(class_id):
        """Roster of the class as plain students; raises NotFoundError"""
        school_class = db.session.get(SchoolClass, class_id)
        if school_class is None:
            raise NotFoundError('Class not found')
        return [
            RosterStudent(id=s.id, student_id=s.student_id, name=s.name, email=s.email)
            for s in school_class.students
        ], school_class

    @staticmethod
    def load_sections(school_class, section_id=None):
        """Sections of the class ordered by number; raises NotFoundError when none match"""
        sections = [
            SectionInfo(id=s.id, section_number=s.section_number, student_ids=frozenset(s.student_ids))
            for s in school_class.get_sections(section_id)
        ]
        if not sections:
            raise NotFoundError('No sections found for this class')
        return sections

    @staticmethod
    def build_matrix(scope, roster, sections, events, max_workers=1):
        """Pure part of the export: events and roster to (day index, ordered rows)"""
        day_index = DayIndexBuilder.build(events, scope)
        summaries = AttendanceAggregator.aggregate(events)
        rows = MatrixBuilder.build_rows(roster, sections, day_index, summaries, max_workers=max_workers)
        return day_index, rows

    @staticmethod
    def export_attendance(class_id, section_id=None, export_format=None, max_workers=1):
        """
        Build the attendance workbook for a class, optionally one section.

        All lookups and validation happen before rendering, so callers get
        either a complete document or an ExportError.
        """
        scope = AttendanceExportService.parse_scope(class_id, section_id, export_format)
        roster, school_class = AttendanceExportService.load_roster(scope.class_id)
        sections = AttendanceExportService.load_sections(school_class, scope.section_id)
        events = AttendanceRecord.events_for_sections(scope.class_id, [s.id for s in sections])

        day_index, rows = AttendanceExportService.build_matrix(scope, roster, sections, events, max_workers)
        content = ExcelExportService.export_attendance_matrix(rows, day_index)

        logger.info(
            f"Attendance exported to Excel (with icons) for {scope.describe()}, "
            f"students={len(rows)}, sections={len(sections)}, days={len(day_index)}"
        )
        return ExportResult(
            content=content,
            filename=scope.filename,
            row_count=len(rows),
            section_count=len(sections),
            day_count=len(day_index)
        )
