from sqlalchemy import Column, Integer, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from ..init import Base


class PropertyReview(Base):
    __tablename__ = "property_reviews"
    __table_args__ = (CheckConstraint("rating BETWEEN 1 AND 5", name="ck_property_reviews_rating"),)

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=True)

    rating = Column(Integer, nullable=False)
    message = Column(Text, nullable=True)

    property = relationship("Property", back_populates="reviews")
    guest = relationship("User")
    reservation = relationship("Reservation")
