# employee_service/routes/employee.py
import logging
from typing import Annotated, List
from fastapi import APIRouter, Depends, Path
from fastapi.responses import PlainTextResponse
from employee_service.dependencies import get_employee_repository
from employee_service.errors import EmployeeNotFoundError
from employee_service.models.employee import EmployeeModel
from employee_service.repositories import EmployeeRepository
from employee_service.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut

logger = logging.getLogger(__name__)

router = APIRouter()

DELETE_CONFIRMATION = "Employee deleted successfully , deleted"

# Ids are stored as signed 64-bit BSON integers.
EmployeeId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]

def to_employee_out(employee: EmployeeModel) -> EmployeeOut:
    return EmployeeOut(**employee.model_dump())

@router.post("/employees", response_model=EmployeeOut)
async def create_employee(employee: EmployeeCreate, repo: EmployeeRepository = Depends(get_employee_repository)):
    created_employee = await repo.save(EmployeeModel(**employee.model_dump()))
    logger.info("Created employee %s", created_employee.id)
    return to_employee_out(created_employee)

@router.get("/employees", response_model=List[EmployeeOut])
async def get_employees(repo: EmployeeRepository = Depends(get_employee_repository)):
    employees = await repo.find_all()
    return [to_employee_out(employee) for employee in employees]

@router.get("/employees/{employee_id}", response_model=EmployeeOut)
async def get_employee(employee_id: EmployeeId, repo: EmployeeRepository = Depends(get_employee_repository)):
    employee = await repo.find_by_id(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)
    return to_employee_out(employee)

@router.put("/employees/{employee_id}", response_model=EmployeeOut)
async def update_employee(
    employee_id: EmployeeId,
    employee: EmployeeUpdate,
    repo: EmployeeRepository = Depends(get_employee_repository)
):
    existing_employee = await repo.find_by_id(employee_id)
    if existing_employee is None:
        raise EmployeeNotFoundError(employee_id)

    # All three fields are overwritten, missing ones included; the id is kept.
    existing_employee.name = employee.name
    existing_employee.email = employee.email
    existing_employee.department = employee.department

    updated_employee = await repo.save(existing_employee)
    logger.info("Updated employee %s", updated_employee.id)
    return to_employee_out(updated_employee)

@router.delete("/employees/{employee_id}", response_class=PlainTextResponse)
async def delete_employee(employee_id: EmployeeId, repo: EmployeeRepository = Depends(get_employee_repository)):
    # No existence check: deleting an unknown id still reports success.
    await repo.delete_by_id(employee_id)
    logger.info("Deleted employee %s", employee_id)
    return DELETE_CONFIRMATION
