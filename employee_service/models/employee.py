# employee_service/models/employee.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class EmployeeModel(BaseModel):
    id: Optional[int] = Field(default=None, alias="_id")
    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)
