import uvicorn
from pymongo.errors import PyMongoError
from tripmate.settings.config import settings
from tripmate.settings.logging import setup_logger
from tripmate.api.routes import app
from tripmate.services.mongoDB import mongoDB
import logging
import sys


logging.basicConfig(
    level=logging.INFO,
    stream=sys.stdout,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    force=True  # This forces the basic configuration, overriding any previous settings
)
logger = setup_logger("main")

if __name__ == "__main__":
    if settings.validate():
        logger.info("Settings validated successfully")

    logger.info("Connecting to MongoDB")
    if mongoDB.checkConnection():
        logger.info("Connected to MongoDB")
    else:
        logger.error("Failed to connect to MongoDB")
        sys.exit(1)

    try:
        mongoDB.ensureIndexes()
    except PyMongoError as e:
        logger.error("Failed to create user indexes: %s", e)
        sys.exit(1)

    logger.info(f"Starting server at {settings.API_HOST}:{settings.API_PORT}")
    try:
        uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
    finally:
        mongoDB.close()
