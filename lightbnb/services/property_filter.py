"""
Ordered predicates for the property search.

Every value ends up as a bind parameter on a SQLAlchemy expression, so the
SQL text itself never contains user input.
"""

from typing import Any, List, Mapping, NamedTuple, Tuple, Union

from sqlalchemy import func
from sqlalchemy.sql.elements import ColumnElement

from lightbnb.database.models import Property
from lightbnb.schemas.property_schema import PropertySearch


class Predicate(NamedTuple):
    name: str
    clause: ColumnElement
    params: Tuple[Any, ...]


def to_cents(price_per_night) -> int:
    """Whole dollars to cents; fractional dollars are dropped."""
    return int(price_per_night) * 100


def as_search(options: Union[PropertySearch, Mapping[str, Any], None]) -> PropertySearch:
    if options is None:
        return PropertySearch()
    if isinstance(options, PropertySearch):
        return options
    return PropertySearch.model_validate(dict(options))


def build_property_filters(
    options: Union[PropertySearch, Mapping[str, Any], None]
) -> List[Predicate]:
    search = as_search(options)
    predicates: List[Predicate] = []

    if search.owner_id:
        predicates.append(
            Predicate("owner_id", Property.owner_id == search.owner_id, (search.owner_id,))
        )

    # a single price bound is ignored; both are needed for a range
    if search.minimum_price_per_night and search.maximum_price_per_night:
        minimum = to_cents(search.minimum_price_per_night)
        maximum = to_cents(search.maximum_price_per_night)
        predicates.append(
            Predicate("minimum_price", Property.cost_per_night > minimum, (minimum,))
        )
        predicates.append(
            Predicate("maximum_price", Property.cost_per_night < maximum, (maximum,))
        )

    if search.city:
        pattern = f"%{search.city.lower()}%"
        predicates.append(
            Predicate("city", func.lower(Property.city).like(pattern), (pattern,))
        )

    return predicates
