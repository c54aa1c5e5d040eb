import logging

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import settings

logger = logging.getLogger(__name__)

# MongoClient connects lazily, so importing this module never blocks on the store
client = MongoClient(settings.MONGO_URI)

db = client[settings.DB_NAME]
volunteer_collection = db["volunteers"]
request_collection = db["requests"]


def get_volunteer_collection() -> Collection:
    return volunteer_collection


def get_request_collection() -> Collection:
    return request_collection


def ensure_indexes(requests: Collection) -> bool:
    """One active request per (post, volunteer email)."""
    try:
        requests.create_index(
            [("postId", ASCENDING), ("volunteer.email", ASCENDING)],
            unique=True,
            name="post_volunteer_unique",
        )
    except PyMongoError as e:
        # e.g. duplicates already stored; requests still get the pre-insert check
        logger.error("Could not create unique request index: %s", e)
        return False
    return True


def ping() -> bool:
    try:
        client.admin.command({"ping": 1})
    except PyMongoError as e:
        logger.warning("MongoDB ping failed: %s", e)
        return False
    logger.info("Pinged your deployment. Connected to MongoDB database %s", settings.DB_NAME)
    return True
