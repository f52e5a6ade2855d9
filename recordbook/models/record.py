"""
Recordbook: Record SQLAlchemy Model
======================================

What:  ORM model representing the `records` table.
How:   Inherits from the shared DeclarativeBase; create_schema() reads this
       to provision the table at startup.
Who:   Used by RecordStore for every statement it builds.

Table Design:
    records(id INTEGER PRIMARY KEY, name TEXT, age INTEGER)

    - id: SQLite rowid alias, assigned on insert, never rewritten
    - name / age: no NOT NULL or CHECK constraints; bounds are enforced
      by the validator at write time only. A row that violates them
      (written by some other tool) fails to decode and surfaces as a
      DatabaseError from the store.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from recordbook.database import Base


class Record(Base):
    """A person record: name and age, keyed by a store-assigned integer id."""

    __tablename__ = "records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Record(id={self.id}, name={self.name!r}, age={self.age})>"
