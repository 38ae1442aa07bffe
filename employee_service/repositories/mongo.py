# employee_service/repositories/mongo.py
import logging
from typing import List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from employee_service.errors import RepositoryError
from employee_service.models.employee import EmployeeModel
from .base import EmployeeRepository

logger = logging.getLogger(__name__)

EMPLOYEE_COLLECTION = "employees"
COUNTER_COLLECTION = "counters"


class MongoEmployeeRepository(EmployeeRepository):
    """Employees stored in MongoDB with integer ``_id`` values.

    Ids come from a per-collection sequence document in ``counters`` that is
    incremented atomically on the server.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[EMPLOYEE_COLLECTION]
        self.counters = db[COUNTER_COLLECTION]

    async def _next_id(self) -> int:
        counter = await self.counters.find_one_and_update(
            {"_id": EMPLOYEE_COLLECTION},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return counter["seq"]

    async def save(self, employee: EmployeeModel) -> EmployeeModel:
        try:
            if employee.id is None:
                employee = employee.model_copy(update={"id": await self._next_id()})
            document = employee.model_dump(by_alias=True)
            await self.collection.replace_one({"_id": employee.id}, document, upsert=True)
        except PyMongoError as e:
            raise RepositoryError(f"Failed to save employee: {e}") from e
        logger.debug("Saved employee %s", employee.id)
        return employee

    async def find_all(self) -> List[EmployeeModel]:
        try:
            documents = await self.collection.find().sort("_id", ASCENDING).to_list(length=None)
        except PyMongoError as e:
            raise RepositoryError(f"Failed to list employees: {e}") from e
        return [EmployeeModel.model_validate(document) for document in documents]

    async def find_by_id(self, employee_id: int) -> Optional[EmployeeModel]:
        try:
            document = await self.collection.find_one({"_id": employee_id})
        except PyMongoError as e:
            raise RepositoryError(f"Failed to load employee {employee_id}: {e}") from e
        if document is None:
            return None
        return EmployeeModel.model_validate(document)

    async def delete_by_id(self, employee_id: int) -> None:
        try:
            result = await self.collection.delete_one({"_id": employee_id})
        except PyMongoError as e:
            raise RepositoryError(f"Failed to delete employee {employee_id}: {e}") from e
        logger.debug("Deleted %s document(s) for employee %s", result.deleted_count, employee_id)

    async def count(self) -> int:
        try:
            return await self.collection.count_documents({})
        except PyMongoError as e:
            raise RepositoryError(f"Failed to count employees: {e}") from e
