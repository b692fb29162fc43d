from lightbnb.database.init import Base

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)

    properties = relationship("Property", back_populates="owner", cascade="all, delete-orphan")
    reservations = relationship("Reservation", back_populates="guest", cascade="all, delete-orphan")
