# employee_service/dependencies.py
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from employee_service.config import get_settings
from employee_service.database import get_database
from employee_service.errors import RepositoryError
from employee_service.repositories import (
    EmployeeRepository,
    InMemoryEmployeeRepository,
    MongoEmployeeRepository,
)

# Shared by every request when STORAGE_BACKEND is "memory".
memory_repository = InMemoryEmployeeRepository()

def get_employee_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> EmployeeRepository:
    if get_settings().STORAGE_BACKEND == "memory":
        return memory_repository
    if db is None:
        raise RepositoryError("MongoDB connection has not been initialized")
    return MongoEmployeeRepository(db)
