# employee_admin/schemas/__init__.py
from .employee import EmployeeId, EmployeeCreate, EmployeeUpdate, EmployeeOut
