import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lightbnb.database.models import User
from lightbnb.schemas.user_schema import UserCreate, UserResponse
from lightbnb.services.result import QueryResult

logger = logging.getLogger(__name__)


def get_user_with_email(email: str, db: Session) -> QueryResult:
    try:
        user = db.query(User).filter(User.email == email).first()
        return QueryResult.success(UserResponse.model_validate(user) if user else None)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("get_user_with_email failed: %s", e)
        return QueryResult.failure(str(e))


def get_user_with_id(user_id: int, db: Session) -> QueryResult:
    try:
        user = db.query(User).filter(User.id == user_id).first()
        return QueryResult.success(UserResponse.model_validate(user) if user else None)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("get_user_with_id failed: %s", e)
        return QueryResult.failure(str(e))


def add_user(payload, db: Session) -> QueryResult:
    """
    Insert a user and return it with its generated id.

    No uniqueness pre-check is made; a duplicate email comes back as a
    failure from the unique constraint.
    """
    if not isinstance(payload, UserCreate):
        payload = UserCreate.model_validate(payload)

    user = User(name=payload.name, email=payload.email, password=payload.password)
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
        return QueryResult.success(UserResponse.model_validate(user))
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("add_user failed: %s", e)
        return QueryResult.failure(str(e))
