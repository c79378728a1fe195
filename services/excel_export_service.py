"""
Excel export service for the University Attendance System
Renders the attendance matrix into a styled workbook
"""

from dataclasses import dataclass
from io import BytesIO

import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from services.export_types import AttendanceStatus

XLSX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

# Colors (ARGB)
COLOR_HEADER_BG = 'FFD3D3D3'
COLOR_DEFAULT_FONT = 'FF000000'


@dataclass(frozen=True)
class StatusStyle:
    glyph: str
    font_color: str
    fill_color: str = None


STATUS_STYLES = {
    AttendanceStatus.PRESENT: StatusStyle('✅', 'FF006100', 'FFC6EFCE'),
    AttendanceStatus.ABSENT: StatusStyle('❌', 'FF9C0006', 'FFFFC7CE'),
    AttendanceStatus.LATE: StatusStyle('🕒', 'FF9C6500', 'FFFFEB9C'),
    AttendanceStatus.NOT_ENROLLED: StatusStyle('-', 'FF808080'),
}

STUDENT_HEADERS = ['Student ID', 'Name', 'Email', 'Section']
SUMMARY_HEADERS = ['Total P+L', 'Attendance %']
STUDENT_COLUMN_WIDTHS = [15, 25, 30, 10]
DAY_COLUMN_WIDTH = 7
SUMMARY_COLUMN_WIDTHS = [10, 12]
PERCENT_FORMAT = '0.00%'


@dataclass(frozen=True)
class SheetLayout:
    """Column positions of the attendance sheet, derived from the day count"""

    day_count: int
    student_first_col: int = 1
    student_last_col: int = 4
    band_row: int = 1
    header_row: int = 2

    @property
    def first_day_col(self):
        return self.student_last_col + 1

    @property
    def last_day_col(self):
        return self.first_day_col + self.day_count - 1

    @property
    def total_col(self):
        return self.last_day_col + 1

    @property
    def percentage_col(self):
        return self.total_col + 1

    @property
    def first_data_row(self):
        return self.header_row + 1

    @property
    def freeze_cell(self):
        """Top-left cell of the scrolling area"""
        return f'{get_column_letter(self.first_day_col)}{self.first_data_row}'

    def bands(self):
        """(title, first column, last column) of each merged header band"""
        return [
            ('Student Data', self.student_first_col, self.student_last_col),
            ('Class Attendance', self.first_day_col, self.percentage_col),
        ]

    def is_day_col(self, col):
        return self.first_day_col <= col <= self.last_day_col


class ExcelExportService:
    """Service for exporting attendance to Excel"""

    header_font = Font(bold=True, color=COLOR_DEFAULT_FONT)
    band_font = Font(bold=True, size=14)
    header_fill = PatternFill(start_color=COLOR_HEADER_BG, end_color=COLOR_HEADER_BG, fill_type="solid")
    center_alignment = Alignment(horizontal="center", vertical="center")
    left_alignment = Alignment(horizontal="left", vertical="center")
    thin_border = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )
    header_border = Border(bottom=Side(style='medium', color=COLOR_DEFAULT_FONT))

    @staticmethod
    def create_workbook(title='Attendance'):
        """Create a new workbook whose active sheet has the given title"""
        wb = openpyxl.Workbook()
        wb.active.title = title
        return wb

    @staticmethod
    def style_band_row(ws, layout):
        """Write the merged 'Student Data' / 'Class Attendance' bands"""
        for title, first_col, last_col in layout.bands():
            ws.merge_cells(start_row=layout.band_row, start_column=first_col,
                           end_row=layout.band_row, end_column=last_col)
            cell = ws.cell(row=layout.band_row, column=first_col, value=title)
            cell.font = ExcelExportService.band_font
            cell.fill = ExcelExportService.header_fill
            cell.alignment = ExcelExportService.center_alignment

    @staticmethod
    def style_header_row(ws, row_num, columns):
        """Apply styling to header row"""
        for col_num, header in enumerate(columns, 1):
            cell = ws.cell(row=row_num, column=col_num, value=header)
            cell.font = ExcelExportService.header_font
            cell.fill = ExcelExportService.header_fill
            cell.alignment = ExcelExportService.center_alignment
            cell.border = ExcelExportService.header_border

    @staticmethod
    def set_column_widths(ws, layout):
        widths = STUDENT_COLUMN_WIDTHS + [DAY_COLUMN_WIDTH] * layout.day_count + SUMMARY_COLUMN_WIDTHS
        for col_num, width in enumerate(widths, 1):
            ws.column_dimensions[get_column_letter(col_num)].width = width

    @staticmethod
    def set_status(cell, status):
        """Write the glyph for a day status with its colour pair"""
        style = STATUS_STYLES[status]
        cell.value = style.glyph
        cell.font = Font(size=12, color=style.font_color)
        if style.fill_color:
            cell.fill = PatternFill(start_color=style.fill_color, end_color=style.fill_color, fill_type="solid")
        cell.alignment = ExcelExportService.center_alignment
        return cell

    @staticmethod
    def set_percentage(cell, fraction):
        """Write a 0..1 fraction shown as a two-decimal percentage"""
        cell.value = fraction
        cell.number_format = PERCENT_FORMAT
        cell.alignment = ExcelExportService.center_alignment
        return cell

    @staticmethod
    def write_matrix_row(ws, row_num, layout, day_index, row):
        """Write one student row and border every cell in it"""
        for col_num, value in enumerate([row.student_id, row.name, row.email], layout.student_first_col):
            ws.cell(row=row_num, column=col_num, value=value).alignment = ExcelExportService.left_alignment
        ws.cell(row=row_num, column=layout.student_last_col,
                value=row.section_display).alignment = ExcelExportService.center_alignment

        for col_num, day in enumerate(day_index, layout.first_day_col):
            ExcelExportService.set_status(ws.cell(row=row_num, column=col_num), row.cells[day])

        ws.cell(row=row_num, column=layout.total_col, value=row.total).alignment = ExcelExportService.center_alignment
        ExcelExportService.set_percentage(ws.cell(row=row_num, column=layout.percentage_col), row.attendance_fraction)

        for col_num in range(layout.student_first_col, layout.percentage_col + 1):
            ws.cell(row=row_num, column=col_num).border = ExcelExportService.thin_border

    @staticmethod
    def build_attendance_workbook(rows, day_index):
        """Build the attendance workbook for already ordered matrix rows"""
        layout = SheetLayout(day_count=len(day_index))
        wb = ExcelExportService.create_workbook('Attendance')
        ws = wb.active

        ExcelExportService.style_band_row(ws, layout)
        headers = STUDENT_HEADERS + [f'Day {day}' for day in day_index] + SUMMARY_HEADERS
        ExcelExportService.style_header_row(ws, layout.header_row, headers)
        ExcelExportService.set_column_widths(ws, layout)
        ws.freeze_panes = layout.freeze_cell

        for row_num, row in enumerate(rows, layout.first_data_row):
            ExcelExportService.write_matrix_row(ws, row_num, layout, day_index, row)

        return wb

    @staticmethod
    def workbook_to_bytes(workbook):
        """Convert workbook to bytes for download"""
        output = BytesIO()
        workbook.save(output)
        output.seek(0)
        return output.getvalue()

    @staticmethod
    def export_attendance_matrix(rows, day_index):
        """Render the attendance matrix to xlsx bytes"""
        wb = ExcelExportService.build_attendance_workbook(rows, day_index)
        return ExcelExportService.workbook_to_bytes(wb)
