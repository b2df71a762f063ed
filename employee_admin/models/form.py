# employee_admin/models/form.py
from typing import Literal, Union
from pydantic import BaseModel

class CreateMode(BaseModel):
    """No employee selected, so submitting the form creates a record."""
    kind: Literal["create"] = "create"

class EditMode(BaseModel):
    """The form holds an existing employee and submitting updates it."""
    kind: Literal["edit"] = "edit"
    id: str

FormMode = Union[CreateMode, EditMode]

class FormState(BaseModel):
    employee_id: str = ""
    first_name: str = ""
    last_name: str = ""
    department: str = ""
    salary: str = ""
    cancel_visible: bool = False

    @property
    def mode(self) -> FormMode:
        # The id field is the only thing that decides the mode
        if self.employee_id:
            return EditMode(id=self.employee_id)
        return CreateMode()

    def clear(self) -> None:
        self.employee_id = ""
        self.first_name = ""
        self.last_name = ""
        self.department = ""
        self.salary = ""
        self.cancel_visible = False

    def fields(self) -> dict:
        """Field values keyed by the names used in the page markup."""
        return {
            "employee-id": self.employee_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "department": self.department,
            "salary": self.salary,
        }

class FormSubmission(BaseModel):
    """Values posted by the employee form."""
    employee_id: str = ""
    first_name: str = ""
    last_name: str = ""
    department: str = ""
    salary: str = ""
