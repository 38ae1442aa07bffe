# employee_service/repositories/base.py
from abc import ABC, abstractmethod
from typing import List, Optional

from employee_service.models.employee import EmployeeModel


class EmployeeRepository(ABC):
    """Storage boundary for employees.

    ``save`` assigns a new integer id when the employee has none and
    otherwise inserts or replaces the record stored under its id.
    ``delete_by_id`` is a no-op for ids that are not stored.
    """

    @abstractmethod
    async def save(self, employee: EmployeeModel) -> EmployeeModel:
        raise NotImplementedError  # pragma: no cover

    @abstractmethod
    async def find_all(self) -> List[EmployeeModel]:
        raise NotImplementedError  # pragma: no cover

    @abstractmethod
    async def find_by_id(self, employee_id: int) -> Optional[EmployeeModel]:
        raise NotImplementedError  # pragma: no cover

    @abstractmethod
    async def delete_by_id(self, employee_id: int) -> None:
        raise NotImplementedError  # pragma: no cover

    @abstractmethod
    async def count(self) -> int:
        raise NotImplementedError  # pragma: no cover
