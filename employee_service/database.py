# employee_service/database.py
import logging
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from pymongo.errors import PyMongoError
from employee_service.config import get_settings
from employee_service.errors import RepositoryError
from employee_service.models.employee import EmployeeModel
from employee_service.repositories.base import EmployeeRepository
from employee_service.repositories.mongo import EMPLOYEE_COLLECTION, COUNTER_COLLECTION

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = [
    {"name": "John Doe", "email": "john.doe@example.com", "department": "Sales"},
    {"name": "Jane Smith", "email": "jane.smith@example.com", "department": "Marketing"},
    {"name": "Bob Johnson", "email": "bob.johnson@example.com", "department": "IT"},
]

class Database:
    client: AsyncIOMotorClient = None
    db = None

db = Database()

async def connect_to_mongo():
    settings = get_settings()
    db.client = AsyncIOMotorClient(settings.MONGODB_URI)
    db.db = db.client[settings.MONGODB_DB_NAME]
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)

async def close_mongo_connection():
    if db.client:
        db.client.close()
        db.client = None
        db.db = None
        logger.info("Closed MongoDB connection")

async def get_database():
    return db.db

async def init_db():
    if not db.client:
        await connect_to_mongo()
    try:
        collections = await db.db.list_collection_names()
        if EMPLOYEE_COLLECTION not in collections:
            await db.db.create_collection(EMPLOYEE_COLLECTION)
        if COUNTER_COLLECTION not in collections:
            await db.db.create_collection(COUNTER_COLLECTION)

        await db.db[EMPLOYEE_COLLECTION].create_index([("department", ASCENDING)])
    except PyMongoError as e:
        raise RepositoryError(f"Database initialization failed: {e}") from e
    logger.info("Database initialized successfully")

async def insert_sample_data(repository: EmployeeRepository) -> bool:
    """Seed the store with a few employees unless it already has data."""
    if await repository.count() > 0:
        logger.info("Sample data already exists. Skipping insertion.")
        return False

    for employee in SAMPLE_EMPLOYEES:
        await repository.save(EmployeeModel(**employee))

    logger.info("Inserted %d sample employees", len(SAMPLE_EMPLOYEES))
    return True
