#employee_admin/routes/__init__.py

from .employee import router as employee_router
