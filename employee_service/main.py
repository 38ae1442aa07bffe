# employee_service/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
from employee_service.routes import employee_router
from employee_service.database import connect_to_mongo, close_mongo_connection, init_db, insert_sample_data, db
from employee_service.dependencies import get_employee_repository
from employee_service.errors import register_exception_handlers
from employee_service.logging_config import setup_logging
from employee_service.config import get_settings

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    use_mongo = settings.STORAGE_BACKEND == "mongo"
    if use_mongo:
        await connect_to_mongo()
        await init_db()
    if settings.SEED_SAMPLE_DATA:
        await insert_sample_data(get_employee_repository(db.db))
    yield
    # Shutdown
    if use_mongo:
        await close_mongo_connection()

app = FastAPI(title="Employee Service", lifespan=lifespan)

register_exception_handlers(app)

app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Employee Service"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "employee_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
