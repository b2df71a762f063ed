# employee_admin/admin.py
"""State and actions behind the employee admin page.

The page shows one table of employees and one form. The form creates a new
employee while its id field is empty and updates the selected employee once
the Edit action of a row has filled it in. Every action talks to the employee
resource through a ``ResourceClient`` and refreshes the table afterwards.
Failures are logged and otherwise leave the page as it was.
"""
import logging
import math
import random
import re
from typing import Iterable, Optional, Union
from employee_admin.api_client import ResourceClient
from employee_admin.exceptions import NetworkOrServerError
from employee_admin.models.form import CreateMode, EditMode, FormState, FormSubmission
from employee_admin.models.table import EmployeeRow, EmployeeTable, display_text
from employee_admin.schemas.employee import EmployeeCreate, EmployeeId, EmployeeOut, EmployeeUpdate

logger = logging.getLogger(__name__)

MIN_SALARY = 30000
MAX_SALARY = 100000

def generate_random_salary(rng: Optional[random.Random] = None) -> int:
    """Return a random whole salary between 30000 and 100000 inclusive."""
    value = (rng or random).random()
    return math.floor(value * (MAX_SALARY - MIN_SALARY + 1)) + MIN_SALARY

DECIMAL_NUMBER = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
PREFIXED_INTEGER = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")

def parse_salary(text: str) -> Optional[Union[int, float]]:
    """Convert salary text to a number the way a browser's ``Number()`` does.

    Blank text is 0, ``0x``/``0o``/``0b`` prefixes are read as integers and
    anything else that is not a plain decimal gives None. Infinite values
    also give None since JSON has no way to carry them.
    """
    text = text.strip()
    if not text:
        return 0
    if PREFIXED_INTEGER.fullmatch(text):
        return int(text, 0)
    if not DECIMAL_NUMBER.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value

class EmployeeAdminClient:
    def __init__(
        self,
        resource: ResourceClient,
        rng: Optional[random.Random] = None,
        prefix: str = "",
    ):
        self.resource = resource
        self.rng = rng or random.Random()
        self.prefix = prefix
        self.table = EmployeeTable()
        self.form = FormState()

    async def on_load(self):
        self.reset_form()
        await self.fetch_employees()

    async def fetch_employees(self):
        try:
            employees = await self.resource.list_employees()
        except NetworkOrServerError as e:
            logger.error("Error fetching employees: %s", e)
            return
        self.populate_table(employees)

    def populate_table(self, employees: Iterable[EmployeeOut]):
        self.table.clear()
        for employee in employees:
            self.table.insert_row(EmployeeRow.from_employee(employee, prefix=self.prefix))

    async def handle_form_submit(self, submission: FormSubmission):
        self.form.employee_id = submission.employee_id
        self.form.first_name = submission.first_name
        self.form.last_name = submission.last_name
        self.form.department = submission.department
        self.form.salary = submission.salary

        salary = submission.salary
        if not salary:
            salary = str(self.generate_random_salary())

        payload = {
            "first_name": submission.first_name,
            "last_name": submission.last_name,
            "department": submission.department,
            "salary": parse_salary(salary),
        }

        mode = self.form.mode
        if isinstance(mode, EditMode):
            try:
                await self.resource.update_employee(mode.id, EmployeeUpdate(**payload))
            except NetworkOrServerError as e:
                logger.error("Error updating employee: %s", e)
                return
        else:
            try:
                await self.resource.create_employee(EmployeeCreate(**payload))
            except NetworkOrServerError as e:
                logger.error("Error creating employee: %s", e)
                return

        self.reset_form()
        await self.fetch_employees()

    def populate_form_for_edit(self, employee: EmployeeOut):
        self.form.employee_id = display_text(employee.id)
        self.form.first_name = display_text(employee.first_name)
        self.form.last_name = display_text(employee.last_name)
        self.form.department = display_text(employee.department)
        self.form.salary = display_text(employee.salary)
        self.form.cancel_visible = True

    def edit_employee(self, employee_id: str):
        employee = self.table.find(employee_id)
        if employee is None:
            logger.error("Error editing employee: no row with id %s", employee_id)
            return
        self.populate_form_for_edit(employee)

    def reset_form(self):
        self.form.clear()

    async def delete_employee(self, employee_id: EmployeeId):
        try:
            await self.resource.delete_employee(employee_id)
        except NetworkOrServerError as e:
            logger.error("Error deleting employee: %s", e)
            return
        await self.fetch_employees()

    def generate_random_salary(self) -> int:
        return generate_random_salary(self.rng)

    @property
    def mode(self) -> Union[CreateMode, EditMode]:
        return self.form.mode
