# employee_service/repositories/__init__.py
from .base import EmployeeRepository
from .memory import InMemoryEmployeeRepository
from .mongo import MongoEmployeeRepository
