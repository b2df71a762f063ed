# employee_admin/main.py
import logging
from typing import Optional
from fastapi import FastAPI
from contextlib import asynccontextmanager
from employee_admin.admin import EmployeeAdminClient
from employee_admin.api_client import ResourceClient
from employee_admin.routes import employee_router
from employee_admin.config import Settings, get_settings

logger = logging.getLogger(__name__)

def configure_logging(settings: Settings):
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

def create_app(settings: Optional[Settings] = None, resource: Optional[ResourceClient] = None) -> FastAPI:
    settings = settings or get_settings()
    resource = resource or ResourceClient(settings.API_URL, timeout=settings.REQUEST_TIMEOUT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        await resource.connect()
        await app.state.admin.on_load()
        logger.info("Employee admin ready, %d employees loaded", len(app.state.admin.table))
        yield
        # Shutdown
        await resource.close()

    app = FastAPI(title="Employee Admin", lifespan=lifespan)
    app.state.admin = EmployeeAdminClient(resource, prefix=settings.ADMIN_PREFIX)
    app.include_router(employee_router, prefix=settings.ADMIN_PREFIX, tags=["employees"])
    return app

def run():
    settings = get_settings()
    import uvicorn
    uvicorn.run(
        "employee_admin.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )

configure_logging(get_settings())
app = create_app()

if __name__ == "__main__":
    run()
