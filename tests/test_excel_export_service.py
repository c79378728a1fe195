"""
Unit tests for the attendance workbook renderer
"""

import unittest
from io import BytesIO
import openpyxl
from services.excel_export_service import ExcelExportService, SheetLayout, STATUS_STYLES
from services.export_types import AttendanceStatus, MatrixRow

def make_row(name, cells, section_numbers=(1,), total=0, percentage=0.0):
    return MatrixRow(
        student_id=f'ID-{name}',
        name=name,
        email=f'{name.lower()}@example.com',
        section_display=', '.join(str(n) for n in section_numbers) if section_numbers else 'N/A',
        section_numbers=tuple(section_numbers),
        cells=cells,
        total=total,
        percentage=percentage
    )

class TestSheetLayout(unittest.TestCase):

    def test_layout_for_three_days(self):
        layout = SheetLayout(day_count=3)

        self.assertEqual(layout.first_day_col, 5)
        self.assertEqual(layout.last_day_col, 7)
        self.assertEqual(layout.total_col, 8)
        self.assertEqual(layout.percentage_col, 9)
        self.assertEqual(layout.freeze_cell, 'E3')
        self.assertEqual(layout.bands(), [('Student Data', 1, 4), ('Class Attendance', 5, 9)])

    def test_every_status_has_a_style(self):
        """Each status maps to its own glyph and colour pair"""
        self.assertEqual(set(STATUS_STYLES), set(AttendanceStatus))
        glyphs = {style.glyph for style in STATUS_STYLES.values()}
        colours = {(style.fill_color, style.font_color) for style in STATUS_STYLES.values()}
        self.assertEqual(len(glyphs), len(AttendanceStatus))
        self.assertEqual(len(colours), len(AttendanceStatus))

class TestExcelExportService(unittest.TestCase):

    def setUp(self):
        self.days = [1, 2]
        self.rows = [
            make_row('Alice', {1: AttendanceStatus.PRESENT, 2: AttendanceStatus.LATE}, total=2, percentage=100.0),
            make_row('Bob', {1: AttendanceStatus.PRESENT, 2: AttendanceStatus.ABSENT}, total=1, percentage=50.0),
            make_row('Carol', {1: AttendanceStatus.NOT_ENROLLED, 2: AttendanceStatus.NOT_ENROLLED},
                     section_numbers=()),
        ]
        content = ExcelExportService.export_attendance_matrix(self.rows, self.days)
        self.ws = openpyxl.load_workbook(BytesIO(content)).active

    def test_headers(self):
        """Bands and sub-headers are written and merged"""
        ws = self.ws
        self.assertEqual(ws.title, 'Attendance')
        self.assertEqual(ws['A1'].value, 'Student Data')
        self.assertEqual(ws['E1'].value, 'Class Attendance')
        merged = {str(r) for r in ws.merged_cells.ranges}
        self.assertEqual(merged, {'A1:D1', 'E1:H1'})
        self.assertTrue(ws['A1'].font.bold)

        headers = [c.value for c in ws[2]]
        self.assertEqual(headers, ['Student ID', 'Name', 'Email', 'Section',
                                   'Day 1', 'Day 2', 'Total P+L', 'Attendance %'])

    def test_freeze_panes(self):
        self.assertEqual(self.ws.freeze_panes, 'E3')

    def test_data_rows(self):
        """One row per student in the given order"""
        ws = self.ws
        self.assertEqual(ws.max_row, 2 + len(self.rows))
        self.assertEqual([ws.cell(row=r, column=2).value for r in range(3, 6)], ['Alice', 'Bob', 'Carol'])
        self.assertEqual(ws['D5'].value, 'N/A')
        self.assertEqual(ws['G3'].value, 2)

    def test_status_glyphs_and_colours(self):
        ws = self.ws
        present = STATUS_STYLES[AttendanceStatus.PRESENT]
        late = STATUS_STYLES[AttendanceStatus.LATE]
        absent = STATUS_STYLES[AttendanceStatus.ABSENT]
        missing = STATUS_STYLES[AttendanceStatus.NOT_ENROLLED]

        self.assertEqual(ws['E3'].value, present.glyph)
        self.assertEqual(ws['E3'].fill.fgColor.rgb, present.fill_color)
        self.assertEqual(ws['E3'].font.color.rgb, present.font_color)
        self.assertEqual(ws['F3'].value, late.glyph)
        self.assertEqual(ws['F4'].value, absent.glyph)
        self.assertEqual(ws['F4'].fill.fgColor.rgb, absent.fill_color)
        self.assertEqual(ws['E5'].value, missing.glyph)
        self.assertEqual(ws['E5'].font.color.rgb, missing.font_color)
        self.assertIsNone(ws['E5'].fill.fill_type)

    def test_percentage_stored_as_fraction(self):
        ws = self.ws
        self.assertAlmostEqual(ws['H3'].value, 1.0)
        self.assertAlmostEqual(ws['H4'].value, 0.5)
        self.assertEqual(ws['H4'].number_format, '0.00%')
        self.assertEqual(ws['H5'].value, 0)

    def test_borders_on_every_data_cell(self):
        ws = self.ws
        for row in ws.iter_rows(min_row=3, max_row=5, min_col=1, max_col=8):
            for cell in row:
                self.assertEqual(cell.border.left.style, 'thin')
                self.assertEqual(cell.border.bottom.style, 'thin')

    def test_column_widths(self):
        ws = self.ws
        self.assertEqual(ws.column_dimensions['A'].width, 15)
        self.assertEqual(ws.column_dimensions['E'].width, 7)
        self.assertEqual(ws.column_dimensions['H'].width, 12)

if __name__ == '__main__':
    unittest.main()
