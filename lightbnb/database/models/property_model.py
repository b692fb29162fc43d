from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from lightbnb.database.init import Base


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    thumbnail_photo_url = Column(String(255), nullable=False)
    cover_photo_url = Column(String(255), nullable=True)
    # stored in cents
    cost_per_night = Column(Integer, nullable=False, default=0)
    parking_spaces = Column(Integer, nullable=False, default=0)
    number_of_bathrooms = Column(Integer, nullable=False, default=0)
    number_of_bedrooms = Column(Integer, nullable=False, default=0)

    country = Column(String(255), nullable=True)
    street = Column(String(255), nullable=True)
    city = Column(String(255), nullable=False)
    province = Column(String(255), nullable=True)
    post_code = Column(String(255), nullable=True)

    active = Column(Boolean, nullable=False, default=True)

    owner = relationship("User", back_populates="properties")
    reservations = relationship("Reservation", back_populates="property", cascade="all, delete-orphan")
    reviews = relationship("PropertyReview", back_populates="property", cascade="all, delete-orphan")
