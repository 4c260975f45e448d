#!/usr/bin/env python3

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from dotenv import load_dotenv

load_dotenv()

from app.core.config import config
from app.db.mongodb import (
    API_KEYS,
    CATEGORIES,
    LABEL_TYPE_CONFIGS,
    MEASUREMENT_INSTRUCTIONS,
    SIZE_CHARTS,
    SIZE_LABELS,
    SUBCATEGORIES,
    close_mongo_connection,
    connect_to_mongo,
    get_database,
)

SERVICE_COLLECTIONS = [
    SIZE_CHARTS,
    SUBCATEGORIES,
    CATEGORIES,
    SIZE_LABELS,
    LABEL_TYPE_CONFIGS,
    MEASUREMENT_INSTRUCTIONS,
    API_KEYS,
]


class SizeChartDatabaseCleaner:
    def __init__(self):
        self.db = None

    async def connect(self):
        """Establish MongoDB connection"""
        print(f"Connecting to MongoDB database '{config.mongodb_database}'...")
        await connect_to_mongo()
        self.db = await get_database()
        print("Successfully connected to MongoDB!")

    async def _existing_collections(self):
        collections = await self.db.list_collection_names()
        return [name for name in SERVICE_COLLECTIONS if name in collections]

    async def clear_all_data(self):
        """Delete every document owned by the size chart service"""
        print("Clearing all size chart service data...")

        collections = await self._existing_collections()
        if not collections:
            print("No collections found in database")
            return

        for collection_name in collections:
            result = await self.db[collection_name].delete_many({})
            print(f"Deleted {result.deleted_count} documents from '{collection_name}' collection")

        print("All size chart service data cleared successfully!")

    async def drop_all_collections(self):
        """Drop the service's collections, indexes included"""
        print("Dropping all size chart service collections...")

        collections = await self._existing_collections()
        if not collections:
            print("No collections found in database")
            return

        for collection_name in collections:
            await self.db[collection_name].drop()
            print(f"Dropped collection: {collection_name}")

        print("All size chart service collections dropped successfully!")

    async def close(self):
        """Close MongoDB connection"""
        await close_mongo_connection()
        print("MongoDB connection closed")


async def main():
    cleaner = SizeChartDatabaseCleaner()
    operation = sys.argv[1] if len(sys.argv) > 1 else "clear"

    try:
        print("=" * 50)
        print("Size Chart Service Database Cleaner")
        print("=" * 50)

        await cleaner.connect()

        if operation == "drop":
            await cleaner.drop_all_collections()
        else:
            await cleaner.clear_all_data()

        print("=" * 50)
        print(f"Size chart database {operation} completed!")
        print("=" * 50)
    except Exception as error:
        print(f"Size chart database {operation} failed: {error}")
        sys.exit(1)
    finally:
        await cleaner.close()


if __name__ == "__main__":
    asyncio.run(main())
