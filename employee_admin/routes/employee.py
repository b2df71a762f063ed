# employee_admin/routes/employee.py
from pathlib import Path
from typing import Any, Dict
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from employee_admin.admin import EmployeeAdminClient
from employee_admin.models.form import FormSubmission

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

def get_admin(request: Request) -> EmployeeAdminClient:
    return request.app.state.admin

def back_to_page(request: Request) -> RedirectResponse:
    """Send the browser back to the admin page after an action."""
    return RedirectResponse(url=request.url_for("admin_page"), status_code=status.HTTP_303_SEE_OTHER)

@router.get("/", response_class=HTMLResponse, name="admin_page")
async def admin_page(request: Request, admin: EmployeeAdminClient = Depends(get_admin)):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "rows": admin.table.rows,
            "form": admin.form,
            "prefix": admin.prefix,
        },
    )

@router.get("/state")
async def admin_state(admin: EmployeeAdminClient = Depends(get_admin)) -> Dict[str, Any]:
    return {
        "mode": admin.mode.model_dump(),
        "form": admin.form.model_dump(),
        "rows": [{"cells": row.cells, "employee": row.employee.model_dump()} for row in admin.table.rows],
    }

@router.post("/employees/submit")
async def submit_employee_form(request: Request, admin: EmployeeAdminClient = Depends(get_admin)):
    form = await request.form()
    submission = FormSubmission(
        employee_id=str(form.get("employee-id", "")),
        first_name=str(form.get("first_name", "")),
        last_name=str(form.get("last_name", "")),
        department=str(form.get("department", "")),
        salary=str(form.get("salary", "")),
    )
    await admin.handle_form_submit(submission)
    return back_to_page(request)

@router.post("/employees/refresh")
async def refresh_employees(request: Request, admin: EmployeeAdminClient = Depends(get_admin)):
    await admin.fetch_employees()
    return back_to_page(request)

@router.post("/employees/{employee_id}/edit")
async def edit_employee(employee_id: str, request: Request, admin: EmployeeAdminClient = Depends(get_admin)):
    admin.edit_employee(employee_id)
    return back_to_page(request)

@router.post("/employees/{employee_id}/delete")
async def delete_employee(employee_id: str, request: Request, admin: EmployeeAdminClient = Depends(get_admin)):
    await admin.delete_employee(employee_id)
    return back_to_page(request)

@router.post("/form/cancel")
async def cancel_edit(request: Request, admin: EmployeeAdminClient = Depends(get_admin)):
    admin.reset_form()
    return back_to_page(request)
