import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lightbnb.config import RESERVATION_LIMIT, DEFAULT_PAGE_SIZE
from lightbnb.database.models import Property, PropertyReview, Reservation
from lightbnb.schemas.property_schema import ReservationListing, Property as PropertySchema
from lightbnb.services.result import QueryResult

logger = logging.getLogger(__name__)


def get_all_reservations(
    guest_id: int, db: Session, limit: Optional[int] = DEFAULT_PAGE_SIZE
) -> QueryResult:
    """
    All reservations of a guest, earliest first, with the reserved property
    and its average rating.

    ``limit`` is accepted but the query is always capped at
    ``RESERVATION_LIMIT`` rows. Properties without reviews drop out of the
    inner join, and so do their reservations.
    """
    try:
        rows = (
            db.query(
                Reservation.id.label("reservation_id"),
                Reservation.start_date,
                Reservation.end_date,
                func.avg(PropertyReview.rating).label("average_rating"),
                Property,
            )
            .join(Property, Reservation.property_id == Property.id)
            .join(PropertyReview, PropertyReview.property_id == Property.id)
            .filter(Reservation.guest_id == guest_id)
            .group_by(Property.id, Reservation.id)
            .order_by(Reservation.start_date)
            .limit(RESERVATION_LIMIT)
            .all()
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("get_all_reservations failed: %s", e)
        return QueryResult.failure(str(e))

    reservations = [
        ReservationListing(
            **PropertySchema.model_validate(row.Property).model_dump(),
            reservation_id=row.reservation_id,
            start_date=row.start_date,
            end_date=row.end_date,
            average_rating=float(row.average_rating),
        )
        for row in rows
    ]
    return QueryResult.success(reservations)
