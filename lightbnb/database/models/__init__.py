from .user_model import User
from .property_model import Property
from .reservation_model import Reservation
from .property_review_model import PropertyReview

__all__ = ["User", "Property", "Reservation", "PropertyReview"]
