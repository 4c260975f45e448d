"""
MongoDB database connection and collection accessors
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from app.core.config import config
from app.core.errors import ErrorResponse
from app.core.logger import logger

CATEGORIES = "categories"
SUBCATEGORIES = "subcategories"
SIZE_CHARTS = "size_charts"
SIZE_LABELS = "size_labels"
MEASUREMENT_INSTRUCTIONS = "measurement_instructions"
API_KEYS = "api_keys"
LABEL_TYPE_CONFIGS = "label_type_configs"


class Database:
    """Database connection manager"""

    client: Optional[AsyncIOMotorClient] = None
    database = None


db = Database()


async def connect_to_mongo():
    """Create database connection"""
    logger.info("Connecting to MongoDB...")

    try:
        db.client = AsyncIOMotorClient(config.mongodb_url)
        db.database = db.client[config.mongodb_database]

        # Test connection
        await db.client.admin.command('ping')

        logger.info(
            f"Successfully connected to MongoDB database '{config.mongodb_database}'",
            metadata={
                "event": "mongodb_connected",
                "database": config.mongodb_database,
                "host": config.mongodb_host,
                "port": config.mongodb_port
            }
        )
    except PyMongoError as e:
        logger.error(
            f"Could not connect to MongoDB: {e}",
            metadata={"event": "mongodb_connection_error", "error": str(e)}
        )
        raise ErrorResponse(
            f"Could not connect to MongoDB: {e}",
            status_code=503
        )


async def close_mongo_connection():
    """Close database connection"""
    logger.info("Closing connection to MongoDB...")
    if db.client is not None:
        db.client.close()
        db.client = None
        db.database = None


async def get_database():
    """Get database instance"""
    if db.database is None:
        await connect_to_mongo()
    return db.database


async def get_collection(name: str) -> AsyncIOMotorCollection:
    database = await get_database()
    return database[name]


async def ensure_indexes():
    """Create the unique and lookup indexes the service relies on"""
    database = await get_database()

    await database[CATEGORIES].create_index([("slug", ASCENDING)], unique=True)
    await database[CATEGORIES].create_index([("display_order", ASCENDING)])
    await database[SUBCATEGORIES].create_index(
        [("category_id", ASCENDING), ("slug", ASCENDING)], unique=True
    )
    await database[SIZE_CHARTS].create_index([("slug", ASCENDING)], unique=True)
    await database[SIZE_CHARTS].create_index([("subcategories.subcategory_id", ASCENDING)])
    await database[SIZE_CHARTS].create_index([("name", ASCENDING)])
    await database[SIZE_LABELS].create_index([("key", ASCENDING)], unique=True)
    await database[SIZE_LABELS].create_index([("label_type", ASCENDING), ("sort_order", ASCENDING)])
    await database[MEASUREMENT_INSTRUCTIONS].create_index([("key", ASCENDING)], unique=True)
    await database[API_KEYS].create_index([("key", ASCENDING)], unique=True)
    await database[API_KEYS].create_index([("key_prefix", ASCENDING)])
    await database[LABEL_TYPE_CONFIGS].create_index([("label_type", ASCENDING)], unique=True)

    logger.info("MongoDB indexes ensured", metadata={"event": "mongodb_indexes_ensured"})
