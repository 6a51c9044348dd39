"""MongoDB repository resolving country data for the normalizer."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pymongo import MongoClient

from ..utils.config import Config
from ..utils.logging import get_logger
from .directory import country_from_document
from .models import CountryInfo

logger = get_logger(__name__)


class CountryRepository:
    """Country resolver reading ``{"country_id", "iso3_code", "regions"}`` documents."""

    def __init__(
        self,
        url: Optional[str] = None,
        db_name: Optional[str] = None,
        collection: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> None:
        config = config or Config(".env")
        self._url = url or config.get("mongo_url")
        self._db = db_name or config.get("mongo_db")
        self._collection = collection or config.get("countries_collection")
        if not self._url:
            raise ValueError("DB_CONNECTION_URL is required")
        self._client: Optional[MongoClient] = None

    def __enter__(self) -> "CountryRepository":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()

    def connect(self) -> None:
        if self._client is None:
            self._client = MongoClient(self._url, serverSelectionTimeoutMS=5000)

    def disconnect(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def get_country_document(self, country_code: str) -> Optional[Dict[str, Any]]:
        if self._client is None:
            self.connect()
        db = self._client[self._db]
        coll = db[self._collection]
        return coll.find_one({"country_id": country_code.strip().upper()})

    def resolve(self, country_code: Optional[str]) -> CountryInfo:
        if not country_code:
            return CountryInfo.empty()
        document = self.get_country_document(country_code)
        if not document:
            logger.debug(f"No country document for '{country_code}'")
            return CountryInfo.empty()
        return country_from_document(document)
