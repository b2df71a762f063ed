# employee_admin/models/table.py
from typing import Any, List
from pydantic import BaseModel
from employee_admin.schemas.employee import EmployeeOut

def display_text(value: Any) -> str:
    """Render a JSON value the way it shows up as cell text in a browser."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

class RowAction(BaseModel):
    label: str
    method: str = "post"
    url: str

class EmployeeRow(BaseModel):
    employee: EmployeeOut
    cells: List[str]
    actions: List[RowAction]

    @classmethod
    def from_employee(cls, employee: EmployeeOut, prefix: str = "") -> "EmployeeRow":
        cells = [
            display_text(employee.id),
            display_text(employee.first_name),
            display_text(employee.last_name),
            display_text(employee.department),
            display_text(employee.salary),
        ]
        actions = [
            RowAction(label="Edit", url=f"{prefix}/employees/{employee.id}/edit"),
            RowAction(label="Delete", url=f"{prefix}/employees/{employee.id}/delete"),
        ]
        return cls(employee=employee, cells=cells, actions=actions)

class EmployeeTable(BaseModel):
    rows: List[EmployeeRow] = []

    def clear(self) -> None:
        self.rows = []

    def insert_row(self, row: EmployeeRow) -> None:
        self.rows.append(row)

    def find(self, employee_id: str):
        """Return the employee rendered with the given id, or None."""
        for row in self.rows:
            if str(row.employee.id) == employee_id:
                return row.employee
        return None

    def __len__(self) -> int:
        return len(self.rows)
