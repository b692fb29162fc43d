"""
HTML for a single property card.

Field values are interpolated as they are, without escaping; markup stored
in a listing (a title, a photo url) ends up in the page verbatim.
"""

import math
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Union


def _field(property, name: str, default: Any = None) -> Any:
    if isinstance(property, Mapping):
        return property.get(name, default)
    return getattr(property, name, default)


def _format_number(value: float) -> str:
    """Print a number the way a browser would: no trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_rating(average_rating) -> str:
    # round half up to two decimals
    return _format_number(math.floor(float(average_rating) * 100 + 0.5) / 100)


def format_price(cost_per_night) -> str:
    return _format_number(float(cost_per_night) / 100)


def _as_date(value: Union[str, date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()


def format_date(value: Union[str, date, datetime]) -> str:
    """Long date, e.g. ``Jan 1, 2020``."""
    day = _as_date(value)
    return f"{day:%b} {day.day}, {day.year}"


def create_listing(property, is_reservation: bool = False) -> str:
    dates = ""
    if is_reservation:
        start_date = _field(property, "start_date")
        end_date = _field(property, "end_date")
        if start_date is None or end_date is None:
            raise ValueError("A reservation listing needs both start_date and end_date")
        start = format_date(start_date)
        end = format_date(end_date)
        dates = f"<p>{start} - {end}</p>"

    return f"""
    <article class="property-listing">
        <section class="property-listing__preview-image">
          <img src="{_field(property, 'thumbnail_photo_url')}" alt="house">
        </section>
        <section class="property-listing__details">
          <h3 class="property-listing__title">"{_field(property, 'title')}"</h3>
          <ul class="property-listing__details">
            <li>Bedrooms: {_field(property, 'number_of_bedrooms')}</li>
            <li>Bathrooms: {_field(property, 'number_of_bathrooms')}</li>
            <li>Parking Spaces: {_field(property, 'parking_spaces')}</li>
          </ul>
          {dates}
          <footer class="property-listing__footer">
            <div class="property-listing__rating">{format_rating(_field(property, 'average_rating', 0))}/5 stars</div>
            <div class="property-listing__price">${format_price(_field(property, 'cost_per_night', 0))}/night</div>
            <div class="property-listing__city">(Located in {_field(property, 'city')})</div>

            <button type="button">Make a reservation</button>
          </footer>
        </section>
      </article>
    """


def create_listings(properties: Iterable, is_reservation: bool = False) -> str:
    return "".join(create_listing(property, is_reservation) for property in properties)
