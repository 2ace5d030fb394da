from typing import Any, Dict, Optional
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi
from ..settings.config import settings
from ..settings.logging import app_logger


class DuplicateUserError(Exception):
    """A user with the same username, email or phone already exists"""


class MongoDB:
    def __init__(self, uri: Optional[str], database: str):
        # MongoClient connects lazily, so importing this module needs no server
        self.client = MongoClient(uri, server_api=ServerApi("1"), connect=False)
        self.database = self.client[database]
        self.collection = self.database["users"]

    def checkConnection(self) -> bool:
        try:
            self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            app_logger.error("MongoDB ping failed: %s", e)
            return False

    def ensureIndexes(self) -> None:
        self.collection.create_index([("username", ASCENDING)], unique=True)
        self.collection.create_index([("email", ASCENDING)], unique=True)
        # Sparse so that any number of users can register without a phone
        self.collection.create_index([("phone", ASCENDING)], unique=True, sparse=True)

    def find_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"username": username})

    def find_by_username_or_email(self, username: str, email: str) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"$or": [{"username": username}, {"email": email}]})

    def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        try:
            oid = ObjectId(user_id)
        except (InvalidId, TypeError):
            app_logger.info("Rejected malformed user id: %s", user_id)
            return None
        return self.collection.find_one({"_id": oid}, {"password": 0})

    def insert_user(self, user: Dict[str, Any]) -> str:
        document = dict(user)
        # An empty phone must be omitted so the sparse index ignores it
        if not document.get("phone"):
            document.pop("phone", None)
        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError as e:
            raise DuplicateUserError("Username or email already exists") from e
        app_logger.info("Inserted user %s", document.get("username"))
        return str(result.inserted_id)

    def close(self) -> None:
        self.client.close()


mongoDB = MongoDB(settings.MONGO_URI, settings.MONGO_DB_NAME)
