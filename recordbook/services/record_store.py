"""
Recordbook: Record Store (Persistence Layer)
===============================================

What:  The five parameterized statements the API needs against the `records`
       table, plus a connectivity probe for the health check.
How:   Wraps an async SQLAlchemy session factory. Every operation opens its
       own session inside a transaction that commits on success and rolls
       back on any exception.
Who:   Constructed once by main.create_app(), attached to app.state and
       injected into route handlers through dependencies.get_record_store.

Error translation:
    - Zero rows affected (update/delete) or no row (get_one) → NotFoundError
    - Anything else that goes wrong, including a row that cannot be decoded
      into a RecordResponse                                  → DatabaseError
    The original exception is chained and its text kept in the message.
"""

import logging
from typing import List

from sqlalchemy import delete, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from recordbook.exceptions import DatabaseError, NotFoundError
from recordbook.models.record import Record
from recordbook.schemas.record import RecordResponse

logger = logging.getLogger(__name__)


class RecordStore:
    """
    CRUD access to person records.

    Responsibilities:
        - create(): insert and return the record with its assigned id
        - update(): rewrite name/age of an existing record
        - delete(): remove an existing record
        - get_all(): every record, ordered by id
        - get_one(): a single record by id
        - ping(): SELECT 1 for the health check
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def create(self, name: str, age: int) -> RecordResponse:
        """
        Insert a new record.

        The id is read back from the flushed ORM object, i.e. from the
        INSERT's last row id. A missing id after flush is an error.

        Raises:
            DatabaseError: insert failed or no id was assigned
        """
        try:
            async with self._session_factory.begin() as session:
                record = Record(name=name, age=age)
                session.add(record)
                await session.flush()
                record_id = record.id
                if record_id is None:
                    raise DatabaseError(
                        message="Could not create record: no id was assigned",
                    )
        except DatabaseError:
            raise
        except Exception as e:
            logger.error("Database error creating record: %s", str(e))
            raise DatabaseError(
                message=f"Could not create record: {e}",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Record %d created", record_id)
        return RecordResponse(id=record_id, name=name, age=age)

    async def update(self, record_id: int, name: str, age: int) -> RecordResponse:
        """
        Overwrite name and age of the record with the given id.

        Raises:
            NotFoundError: no row has this id (zero rows affected)
            DatabaseError: statement failed
        """
        try:
            async with self._session_factory.begin() as session:
                result = await session.execute(
                    update(Record)
                    .where(Record.id == record_id)
                    .values(name=name, age=age)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount == 0:
                    raise NotFoundError(resource="record", resource_id=str(record_id))
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error updating record %s: %s", record_id, str(e))
            raise DatabaseError(
                message=f"Could not update record: {e}",
                context={"record_id": record_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Record %d updated", record_id)
        return RecordResponse(id=record_id, name=name, age=age)

    async def delete(self, record_id: int) -> None:
        """
        Remove the record with the given id.

        Raises:
            NotFoundError: no row has this id (zero rows affected)
            DatabaseError: statement failed
        """
        try:
            async with self._session_factory.begin() as session:
                result = await session.execute(
                    delete(Record)
                    .where(Record.id == record_id)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount == 0:
                    raise NotFoundError(resource="record", resource_id=str(record_id))
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error deleting record %s: %s", record_id, str(e))
            raise DatabaseError(
                message=f"Could not delete record: {e}",
                context={"record_id": record_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Record %d deleted", record_id)

    async def get_all(self) -> List[RecordResponse]:
        """
        Return every record ordered by id; an empty list when there are none.

        Rows are decoded while the result is open. One bad row fails the
        whole call with DatabaseError.
        """
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(Record).order_by(Record.id))
                return [
                    RecordResponse.model_validate(record)
                    for record in result.scalars().all()
                ]
        except Exception as e:
            logger.error("Database error listing records: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not retrieve records: {e}",
                context={"error_type": type(e).__name__},
            ) from e

    async def get_one(self, record_id: int) -> RecordResponse:
        """
        Return the record with the given id.

        Raises:
            NotFoundError: no row has this id
            DatabaseError: query or decode failed
        """
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(Record).where(Record.id == record_id)
                )
                record = result.scalar_one_or_none()
                if record is None:
                    raise NotFoundError(resource="record", resource_id=str(record_id))
                return RecordResponse.model_validate(record)
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error fetching record %s: %s", record_id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve record: {e}",
                context={"record_id": record_id, "error_type": type(e).__name__},
            ) from e

    async def ping(self) -> None:
        """Run SELECT 1. Any failure propagates unwrapped."""
        async with self._session_factory() as session:
            await session.execute(text("SELECT 1"))
