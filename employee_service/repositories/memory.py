# employee_service/repositories/memory.py
from typing import Dict, List, Optional

from employee_service.models.employee import EmployeeModel
from .base import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Dict-backed repository for tests and local runs.

    Records are copied on the way in and out so callers never share state
    with the store. Not safe across processes.
    """

    def __init__(self):
        self._employees: Dict[int, EmployeeModel] = {}
        self._last_id = 0

    async def save(self, employee: EmployeeModel) -> EmployeeModel:
        stored = employee.model_copy()
        if stored.id is None:
            self._last_id += 1
            stored.id = self._last_id
        else:
            self._last_id = max(self._last_id, stored.id)
        self._employees[stored.id] = stored
        return stored.model_copy()

    async def find_all(self) -> List[EmployeeModel]:
        return [self._employees[key].model_copy() for key in sorted(self._employees)]

    async def find_by_id(self, employee_id: int) -> Optional[EmployeeModel]:
        employee = self._employees.get(employee_id)
        return employee.model_copy() if employee else None

    async def delete_by_id(self, employee_id: int) -> None:
        self._employees.pop(employee_id, None)

    async def count(self) -> int:
        return len(self._employees)
