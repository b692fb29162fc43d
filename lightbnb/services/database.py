"""Query layer: the six operations the application calls into."""

from lightbnb.services.user_service import (
    get_user_with_email,
    get_user_with_id,
    add_user,
)
from lightbnb.services.reservation_service import get_all_reservations
from lightbnb.services.property_service import get_all_properties, add_property

__all__ = [
    "get_user_with_email",
    "get_user_with_id",
    "add_user",
    "get_all_reservations",
    "get_all_properties",
    "add_property",
]
