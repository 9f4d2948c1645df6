"""Load the bundled project catalogue into MongoDB.

Run with ``python seed.py``; uses the same MONGODB_URI / DATABASE_NAME
settings as the API.
"""
import logging
from typing import Iterable, Optional

from pymongo.database import Database

from config import load_settings
from data import PROJECTS
from database import PROJECTS_COLLECTION, DatabaseProvider
from schemas import Project

logger = logging.getLogger(__name__)


def seed_projects(db: Database, projects: Optional[Iterable[dict]] = None) -> int:
    """Upsert projects by their ``id`` slug. Returns how many were inserted or changed."""
    changed = 0
    for p in projects if projects is not None else PROJECTS:
        doc = Project(**p).model_dump()
        res = db[PROJECTS_COLLECTION].update_one({"id": doc["id"]}, {"$set": doc}, upsert=True)
        if res.upserted_id is not None or res.modified_count:
            changed += 1
    logger.info("Seeded projects: %d inserted or updated", changed)
    return changed


if __name__ == "__main__":
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    provider = DatabaseProvider(settings)
    try:
        seed_projects(provider.get_database())
    finally:
        provider.close()
