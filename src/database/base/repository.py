"""Generic database repository utilities.

These functions provide the CRUD operations shared by every table so the
per-domain operation modules stay free of duplication.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def get_by_id[T](session: Session, model_class: type[T], record_id: int) -> T | None:
    """Get a record by its primary key.

    :param session: The database session.
    :param model_class: The SQLAlchemy model class.
    :param record_id: The record ID.
    :returns: The record, or None if not found.
    """
    return session.get(model_class, record_id)


def record_exists_by_field[T](
    session: Session,
    model_class: type[T],
    field_name: str,
    field_value: Any,
) -> bool:
    """Check if a record exists with a specific field value.

    :param session: The database session.
    :param model_class: The SQLAlchemy model class.
    :param field_name: The name of the field to filter by.
    :param field_value: The value to match.
    :returns: True if a matching record exists.
    """
    field = getattr(model_class, field_name)
    return session.query(model_class).filter(field == field_value).first() is not None


def update_fields[T](
    session: Session,
    model_class: type[T],
    record_id: int,
    changes: dict[str, Any],
) -> T | None:
    """Apply field changes to a record.

    :param session: The database session.
    :param model_class: The SQLAlchemy model class.
    :param record_id: The record ID.
    :param changes: Mapping of column attribute to new value.
    :returns: The updated record, or None if not found.
    """
    record = session.get(model_class, record_id)
    if record is None:
        return None

    for name, value in changes.items():
        setattr(record, name, value)
    session.flush()
    logger.debug(f"{model_class.__name__} {record_id} updated: fields={sorted(changes)}")
    return record


def delete_by_id[T](session: Session, model_class: type[T], record_id: int) -> bool:
    """Delete a record by its primary key.

    :param session: The database session.
    :param model_class: The SQLAlchemy model class.
    :param record_id: The record ID.
    :returns: True if a row was deleted.
    """
    id_field = getattr(model_class, "id")
    result = session.execute(delete(model_class).where(id_field == record_id))
    deleted = (result.rowcount or 0) > 0
    if deleted:
        logger.debug(f"{model_class.__name__} {record_id} deleted")
    return deleted


def delete_all[T](session: Session, model_class: type[T]) -> int:
    """Delete every row of a table.

    :param session: The database session.
    :param model_class: The SQLAlchemy model class.
    :returns: The number of rows deleted.
    """
    result = session.execute(delete(model_class))
    count = result.rowcount or 0
    logger.debug(f"{model_class.__name__}: deleted {count} rows")
    return count
