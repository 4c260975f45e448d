#!/usr/bin/env python3

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from app.core.config import config
from app.db.mongodb import (
    CATEGORIES,
    MEASUREMENT_INSTRUCTIONS,
    SIZE_CHARTS,
    SIZE_LABELS,
    SUBCATEGORIES,
    close_mongo_connection,
    connect_to_mongo,
    ensure_indexes,
    get_collection,
)
from app.repositories.category import CategoryRepository, SubcategoryRepository
from app.repositories.measurement_instruction import MeasurementInstructionRepository
from app.repositories.size_chart import SizeChartRepository
from app.repositories.size_label import SizeLabelRepository
from app.services.demo import DemoService


class SizeChartDatabaseSeeder:
    """Loads the demo catalog (instructions, labels, categories and charts)"""

    def __init__(self):
        self.service = None

    async def connect(self):
        """Establish MongoDB connection and make sure indexes exist"""
        print(f"Connecting to MongoDB database '{config.mongodb_database}'...")
        await connect_to_mongo()
        await ensure_indexes()
        print("Successfully connected to MongoDB!")

        self.service = DemoService(
            CategoryRepository(await get_collection(CATEGORIES)),
            SubcategoryRepository(await get_collection(SUBCATEGORIES)),
            SizeChartRepository(await get_collection(SIZE_CHARTS)),
            MeasurementInstructionRepository(await get_collection(MEASUREMENT_INSTRUCTIONS)),
            SizeLabelRepository(await get_collection(SIZE_LABELS)),
        )

    async def seed_data(self):
        """Upsert the demo dataset; existing records are updated in place"""
        print("Seeding size chart service data...")
        counts = await self.service.seed()
        for name, count in counts.items():
            print(f"  {name}: {count}")
        print("Size chart service data seeding completed successfully!")

    async def close(self):
        """Close MongoDB connection"""
        await close_mongo_connection()
        print("MongoDB connection closed")


async def main():
    seeder = SizeChartDatabaseSeeder()

    try:
        print("=" * 50)
        print("Size Chart Service Database Seeder")
        print("=" * 50)

        await seeder.connect()
        await seeder.seed_data()

        print("=" * 50)
        print("Size chart database seeding completed!")
        print("=" * 50)
    except Exception as error:
        print(f"Size chart database seeding failed: {error}")
        sys.exit(1)
    finally:
        await seeder.close()


if __name__ == "__main__":
    asyncio.run(main())
