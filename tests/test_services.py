"""
Unit tests for the attendance export service
"""

import unittest
from services.attendance_export_service import AttendanceExportService
from services.export_types import ExportScope
from utils.errors import BadRequestError, NotFoundError

class TestAttendanceExportService(unittest.TestCase):

    def test_parse_scope(self):
        scope = AttendanceExportService.parse_scope('12', '3', 'excel')
        self.assertEqual(scope, ExportScope(class_id=12, section_id=3))

    def test_parse_scope_without_section(self):
        scope = AttendanceExportService.parse_scope('12', '', 'excel')
        self.assertIsNone(scope.section_id)

    def test_missing_class_id(self):
        with self.assertRaises(BadRequestError) as ctx:
            AttendanceExportService.parse_scope(None, None, 'excel')
        self.assertEqual(ctx.exception.status_code, 400)

    def test_format_is_checked_before_lookup(self):
        """Format errors surface as bad requests even for unknown classes"""
        for fmt in (None, 'csv', 'EXCEL'):
            with self.assertRaises(BadRequestError):
                AttendanceExportService.parse_scope('not-a-class', None, fmt)

    def test_malformed_ids_are_not_found(self):
        with self.assertRaises(NotFoundError):
            AttendanceExportService.parse_scope('abc', None, 'excel')
        with self.assertRaises(NotFoundError) as ctx:
            AttendanceExportService.parse_scope('1', 'xyz', 'excel')
        self.assertEqual(ctx.exception.status_code, 404)

    def test_filenames(self):
        self.assertEqual(ExportScope(class_id=5).filename, 'attendance-icons-5-allSections.xlsx')
        self.assertEqual(ExportScope(class_id=5, section_id=9).filename,
                         'attendance-icons-5-section-9.xlsx')

    def test_filename_uses_parsed_class_id(self):
        scope = AttendanceExportService.parse_scope('007', None, 'excel')
        self.assertEqual(scope.filename, 'attendance-icons-7-allSections.xlsx')

if __name__ == '__main__':
    unittest.main()
