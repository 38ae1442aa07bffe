# employee_service/schemas/employee.py
from typing import Optional
from pydantic import BaseModel, ConfigDict

class EmployeeBase(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None

class EmployeeCreate(EmployeeBase):
    pass

class EmployeeUpdate(EmployeeBase):
    pass

class EmployeeOut(EmployeeBase):
    id: int

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
