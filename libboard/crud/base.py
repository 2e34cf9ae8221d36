"""Generic repository base class for SQLAlchemy models."""

from __future__ import annotations

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from libboard.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
	"""Reusable repository helper for SQLAlchemy models.

	Methods never commit. Writes are flushed so generated identifiers are
	available immediately; the caller's unit of work decides whether they are
	committed or rolled back.
	"""

	def __init__(self, model: Type[ModelType]):
		self.model = model

	# ----- Read -----
	def get(self, db: Session, id: Any) -> Optional[ModelType]:
		"""Get one record by primary key."""
		return db.get(self.model, id)

	def get_by_field(self, db: Session, field_name: str, value: Any) -> Optional[ModelType]:
		"""Get first record where given field equals value."""
		if not hasattr(self.model, field_name):
			raise AttributeError(f"Model '{self.model.__name__}' has no field '{field_name}'")
		stmt = select(self.model).where(getattr(self.model, field_name) == value).limit(1)
		return db.scalars(stmt).first()

	# ----- Write -----
	def save(self, db: Session, db_obj: ModelType) -> ModelType:
		"""Insert or update a record and return it with its identifier assigned."""
		db.add(db_obj)
		db.flush()
		db.refresh(db_obj)
		return db_obj

	def remove(self, db: Session, db_obj: ModelType) -> None:
		"""Physically delete a record."""
		db.delete(db_obj)
		db.flush()
