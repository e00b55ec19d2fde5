"""
HashtagService - hashtag usage counts.

Every product creation bumps the count of each of its hashtags, creating the
hashtag on first use.
"""

from datetime import datetime, timezone
from typing import Iterable

from pymongo.database import Database
from pymongo.errors import PyMongoError

from infrastructure.database import HASHTAGS
from marketplace.catalog.domain.services.base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


class HashtagService(BaseService):
    def __init__(self, db: Database):
        super().__init__()
        self.collection = db[HASHTAGS]

    def create_or_update(self, hashtags: Iterable[str]) -> ServiceResult[int]:
        """
        Upsert hashtags, incrementing their usage count.

        Returns:
            ServiceResult with the number of hashtags touched
        """
        names = [name.strip().lower() for name in hashtags if name and name.strip()]
        names = list(dict.fromkeys(names))
        if not names:
            return service_ok(0)

        now = datetime.now(timezone.utc)
        try:
            for name in names:
                self.collection.update_one(
                    {"name": name},
                    {"$inc": {"count": 1}, "$set": {"lastUsed": now}, "$setOnInsert": {"created": now}},
                    upsert=True,
                )
        except PyMongoError as e:
            self.logger.error(f"Error updating hashtags {names}: {e}", exc_info=True)
            return service_err(ErrorCodes.DATABASE_ERROR, str(e))

        self.logger.debug(f"Updated {len(names)} hashtags")
        return service_ok(len(names))
