# employee_service/models/__init__.py
from .employee import EmployeeModel
