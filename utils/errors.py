"""
Error types raised by the attendance export
"""


class ExportError(Exception):
    """Base class for export failures reported back to the caller"""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'success': False, 'message': self.message}


class BadRequestError(ExportError):
    """Missing class id or unsupported export format"""

    status_code = 400


class NotFoundError(ExportError):
    """Class or sections could not be resolved"""

    status_code = 404
