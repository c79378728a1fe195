"""
Export routes for the University Attendance System
Handles the attendance spreadsheet download
"""

from flask import Blueprint, request, make_response, current_app, jsonify
from services.attendance_export_service import AttendanceExportService
from utils.errors import ExportError

export_bp = Blueprint('export', __name__)

@export_bp.route('', methods=['GET'])
@export_bp.route('/', methods=['GET'])
def export_attendance():
    """Export class attendance as an Excel workbook with status icons"""
    try:
        result = AttendanceExportService.export_attendance(
            class_id=request.args.get('classId'),
            section_id=request.args.get('sectionId'),
            export_format=request.args.get('format'),
            max_workers=current_app.config.get('EXPORT_ROW_WORKERS', 1)
        )
    except ExportError:
        raise
    except Exception as e:
        current_app.logger.exception('Error exporting attendance')
        return jsonify({'success': False, 'message': f'Error exporting attendance: {str(e)}'}), 500

    response = make_response(result.content)
    response.headers['Content-Type'] = result.mimetype
    response.headers['Content-Disposition'] = f'attachment; filename={result.filename}'
    return response
