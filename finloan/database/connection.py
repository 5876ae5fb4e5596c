import motor.motor_asyncio
from beanie import init_beanie
from finloan.database.models import DOCUMENT_MODELS
from finloan.core import settings
from finloan.core.config import mask_mongo_uri
import logging

logger = logging.getLogger(__name__)

# Global database instance
database = None


async def init_db():
    global database
    try:
        mongodb_uri = settings.MONGODB_URI
        mongodb_db_name = settings.MONGODB_DB_NAME

        if not mongodb_uri:
            raise ValueError("MONGODB_URI is not set in environment variables")
        if not mongodb_db_name:
            raise ValueError("MONGODB_DB_NAME is not set in environment variables")

        logger.info("Attempting to connect to MongoDB at: %s", mask_mongo_uri(mongodb_uri))
        logger.info("Database name: %s", mongodb_db_name)

        client_options = {
            "serverSelectionTimeoutMS": settings.MONGODB_TIMEOUT_MS,
            "connectTimeoutMS": settings.MONGODB_TIMEOUT_MS,
            "socketTimeoutMS": settings.MONGODB_TIMEOUT_MS,
        }
        if settings.MONGODB_TLS:
            client_options["tls"] = True

        client = motor.motor_asyncio.AsyncIOMotorClient(mongodb_uri, **client_options)

        await client.admin.command('ping')
        logger.info("Successfully connected to MongoDB")

        database = client[mongodb_db_name]

        await init_beanie(database, document_models=DOCUMENT_MODELS)
        logger.info("Beanie initialized with models: %s", [m.__name__ for m in DOCUMENT_MODELS])

        return database

    except ValueError as e:
        logger.error(f"Configuration error: {str(e)}")
        raise RuntimeError(f"Configuration error: {str(e)}") from e
    except Exception as e:
        logger.error(f"Database initialization failed: {type(e).__name__}: {str(e)}")
        raise


def get_database():
    """Get the initialized database instance"""
    if database is None:
        raise RuntimeError("Database not initialized. Call init_db() first.")
    return database
