"""Classification of raw storage faults.

The single point where SQLAlchemy exceptions become domain errors. Only
the store adapters call this; nothing above them ever sees a raw
exception or re-classifies a ModelError.

Mapping:
    IntegrityError (unique, foreign key, not null, check) -> ConflictError
    NoResultFound                                         -> NotFoundError
    Any other SQLAlchemyError                             -> StorageFailureError
"""

from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError

from entitygate.core.errors import (
    ConflictError,
    ModelError,
    NotFoundError,
    StorageFailureError,
)


def map_storage_error(
    exc: SQLAlchemyError, *, entity_name: str | None = None
) -> ModelError:
    """Map a SQLAlchemy exception to a model error.

    Args:
        exc: Exception raised by the driver or the ORM.
        entity_name: Entity type being accessed, for error context.

    Returns:
        ConflictError, NotFoundError or StorageFailureError.
    """
    if isinstance(exc, IntegrityError):
        return ConflictError(
            entity_name=entity_name,
            constraint=str(exc.orig) if exc.orig is not None else None,
        )
    if isinstance(exc, NoResultFound):
        if entity_name is None:
            return NotFoundError()
        return NotFoundError(
            message=f"{entity_name} not found", entity_name=entity_name
        )
    return StorageFailureError(details={"error_type": type(exc).__name__})
