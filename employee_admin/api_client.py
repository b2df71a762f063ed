# employee_admin/api_client.py
import logging
from typing import List, Optional
import httpx
from pydantic import ValidationError
from employee_admin.exceptions import NetworkOrServerError
from employee_admin.schemas.employee import EmployeeCreate, EmployeeId, EmployeeOut, EmployeeUpdate

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

class ResourceClient:
    """Async client for the REST resource holding the employee records."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def connect(self):
        if self.client is None:
            self.client = httpx.AsyncClient(timeout=self.timeout, transport=self.transport)
            logger.info("Connected to employee resource: %s", self.base_url)

    async def close(self):
        if self.client is not None:
            await self.client.aclose()
            self.client = None
            logger.info("Closed employee resource client")

    def item_url(self, employee_id: EmployeeId) -> str:
        return f"{self.base_url}/{employee_id}"

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        if self.client is None:
            await self.connect()
        try:
            return await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise NetworkOrServerError(f"{method} {url} failed: {e}") from e

    async def list_employees(self) -> List[EmployeeOut]:
        response = await self._send("GET", self.base_url)
        try:
            data = response.json()
        except ValueError as e:
            raise NetworkOrServerError(
                f"GET {self.base_url} returned a body that is not JSON",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, list):
            raise NetworkOrServerError(
                f"GET {self.base_url} returned {type(data).__name__}, expected a list of employees",
                status_code=response.status_code,
            )
        try:
            return [EmployeeOut.model_validate(item) for item in data]
        except ValidationError as e:
            raise NetworkOrServerError(
                f"GET {self.base_url} returned malformed employees: {e}",
                status_code=response.status_code,
            ) from e

    async def create_employee(self, employee: EmployeeCreate) -> httpx.Response:
        return await self._mutate("POST", self.base_url, employee)

    async def update_employee(self, employee_id: EmployeeId, employee: EmployeeUpdate) -> httpx.Response:
        return await self._mutate("PUT", self.item_url(employee_id), employee)

    async def delete_employee(self, employee_id: EmployeeId) -> httpx.Response:
        response = await self._send("DELETE", self.item_url(employee_id))
        self._check_status(response)
        return response

    async def _mutate(self, method: str, url: str, employee: EmployeeCreate) -> httpx.Response:
        response = await self._send(method, url, json=employee.model_dump(), headers=JSON_HEADERS)
        self._check_status(response)
        return response

    @staticmethod
    def _check_status(response: httpx.Response):
        # A mutation counts as resolved once the server answers at all
        if response.is_error:
            logger.warning(
                "%s %s answered with status %s",
                response.request.method,
                response.request.url,
                response.status_code,
            )
