# employee_admin/exceptions.py
from typing import Optional


class NetworkOrServerError(Exception):
    """Raised when a call to the employee resource fails or its response
    cannot be read as JSON."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
