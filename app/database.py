"""MongoDB database connection manager."""

from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from typing import Optional

from app.config import settings
from app.core.logging import logger


class Database:
    """MongoDB database connection manager."""
    
    client: Optional[AsyncIOMotorClient] = None
    
    @classmethod
    async def connect_db(cls):
        """Connect to MongoDB and initialize Beanie."""
        cls.client = AsyncIOMotorClient(settings.MONGODB_URL)
        
        # Import document models
        from app.features.doctors.models import Doctor
        from app.features.appointments.models import Appointment
        from app.features.medications.models import Medication
        from app.features.status.models import StatusEntry
        from app.features.documents.models import MedicalDocument
        
        await init_beanie(
            database=cls.client[settings.DATABASE_NAME],
            document_models=[
                Doctor,
                Appointment,
                Medication,
                StatusEntry,
                MedicalDocument,
            ]
        )
        
        logger.info(f"Connected to MongoDB database: {settings.DATABASE_NAME}")
    
    @classmethod
    async def close_db(cls):
        """Close MongoDB connection."""
        if cls.client:
            cls.client.close()
            logger.info("Closed MongoDB connection")
