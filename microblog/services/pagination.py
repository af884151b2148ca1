"""Offset pagination for SQLAlchemy queries."""

from sqlalchemy.orm import Query


def paginate(query: Query, page: int, per_page: int) -> list:
    """Return one page of ``query``; pages are 1-based."""
    return query.offset((page - 1) * per_page).limit(per_page).all()
