import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lightbnb.config import DEFAULT_PAGE_SIZE, PROPERTIES_SEED_FILE
from lightbnb.database.models import Property, PropertyReview
from lightbnb.schemas.property_schema import (
    Property as PropertySchema,
    PropertyCreate,
    PropertyListing,
    PropertySearch,
)
from lightbnb.services.property_filter import build_property_filters
from lightbnb.services.result import QueryResult

logger = logging.getLogger(__name__)


class PropertyStore:
    """
    In-memory property map keyed by id.

    New ids are ``len(store) + 1``, so a store seeded with gaps in its ids
    can hand out an id that is already taken. Nothing here is persisted.
    """

    def __init__(self, properties: Optional[Mapping[Any, Any]] = None):
        self._properties: Dict[int, PropertySchema] = {}
        self._lock = threading.Lock()
        for key, value in (properties or {}).items():
            record = dict(value) if not isinstance(value, PropertySchema) else value.model_dump()
            record.setdefault("id", int(key))
            self._properties[int(key)] = PropertySchema.model_validate(record)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "PropertyStore":
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if isinstance(data, list):
            data = {item["id"]: item for item in data}
        return cls(data)

    @classmethod
    def from_settings(cls) -> "PropertyStore":
        if PROPERTIES_SEED_FILE:
            return cls.from_json(PROPERTIES_SEED_FILE)
        return cls()

    def add(self, property_in: PropertyCreate) -> PropertySchema:
        with self._lock:
            property_id = len(self._properties) + 1
            data = property_in.model_dump()
            data["id"] = property_id
            record = PropertySchema.model_validate(data)
            self._properties[property_id] = record
        return record

    def get(self, property_id: int) -> Optional[PropertySchema]:
        return self._properties.get(int(property_id))

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[PropertySchema]:
        return iter(list(self._properties.values()))

    def __contains__(self, property_id) -> bool:
        return int(property_id) in self._properties


def get_all_properties(
    options: Union[PropertySearch, Mapping[str, Any], None],
    db: Session,
    limit: int = DEFAULT_PAGE_SIZE,
) -> QueryResult:
    """
    Properties with at least one review, cheapest first.

    Filters are applied in a fixed order: owner, price range (only when both
    bounds are given) and then a case-insensitive city substring.
    """
    predicates = build_property_filters(options)
    average_rating = func.avg(PropertyReview.rating).label("average_rating")
    try:
        rows = (
            db.query(Property, average_rating)
            .join(PropertyReview, PropertyReview.property_id == Property.id)
            .filter(*[predicate.clause for predicate in predicates])
            .group_by(Property.id)
            .order_by(Property.cost_per_night)
            .limit(limit)
            .all()
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("get_all_properties failed: %s", e)
        return QueryResult.failure(str(e))

    properties = [
        PropertyListing(
            **PropertySchema.model_validate(row.Property).model_dump(),
            average_rating=float(row.average_rating),
        )
        for row in rows
    ]
    return QueryResult.success(properties)


def add_property(property_in, store: PropertyStore) -> QueryResult:
    """Add a property to the in-memory store; the database is not touched."""
    if not isinstance(property_in, PropertyCreate):
        property_in = PropertyCreate.model_validate(property_in)
    record = store.add(property_in)
    logger.info("Added property %s to the in-memory store", record.id)
    return QueryResult.success(record)
