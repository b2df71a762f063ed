# employee_admin/schemas/employee.py
from typing import Any, Optional, Union
from pydantic import BaseModel

EmployeeId = Union[int, str]

class EmployeeBase(BaseModel):
    first_name: str = ""
    last_name: str = ""
    department: str = ""

class EmployeeCreate(EmployeeBase):
    # None goes out as JSON null when the salary text is not a number
    salary: Optional[Union[int, float]]

class EmployeeUpdate(EmployeeCreate):
    pass

class EmployeeOut(EmployeeBase):
    # Whatever the resource holds is shown as is
    id: EmployeeId
    first_name: Any = ""
    last_name: Any = ""
    department: Any = ""
    salary: Any = None

    class Config:
        extra = "ignore"
