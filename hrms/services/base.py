import enum
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hrms.core.exceptions import ConflictError, NotFoundError

ModelT = TypeVar("ModelT")


def column_values(data: Dict[str, Any]) -> Dict[str, Any]:
    # Enum members are stored by value in plain String columns
    return {k: (v.value if isinstance(v, enum.Enum) else v) for k, v in data.items()}


class BaseService:
    """Holds the request-scoped session and a per-class logger."""

    def __init__(self, db: Session):
        self.db = db
        self._logger = logging.getLogger(self.__class__.__module__)

    def log_info(self, message: str, **extra):
        self._logger.info(message, extra=extra or None)

    def log_warning(self, message: str, **extra):
        self._logger.warning(message, extra=extra or None)

    def commit(self):
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            self._logger.warning(f"Integrity error on commit: {e.orig}")
            raise ConflictError("Record conflicts with existing data") from e
        except Exception:
            self.db.rollback()
            raise


class RecordRepository(BaseService, Generic[ModelT]):
    """
    Plain CRUD over a single table.
    Subclasses (or instances) bind a model class and a human-readable entity name.
    """

    def __init__(self, db: Session, model: Type[ModelT], entity_name: Optional[str] = None):
        super().__init__(db)
        self.model = model
        self.entity_name = entity_name or model.__name__

    def list(self, order_by=None, **filters) -> List[ModelT]:
        query = self.db.query(self.model)
        for field, value in filters.items():
            if value is not None:
                query = query.filter(getattr(self.model, field) == value)
        query = query.order_by(order_by if order_by is not None else self.model.id)
        return query.all()

    def get(self, record_id: int) -> ModelT:
        record = self.db.get(self.model, record_id)
        if record is None:
            raise NotFoundError(self.entity_name, record_id)
        return record

    def create(self, data: Dict[str, Any]) -> ModelT:
        record = self.model(**column_values(data))
        self.db.add(record)
        self.commit()
        self.db.refresh(record)
        self.log_info(f"Created {self.entity_name} {record.id}")
        return record

    def update(self, record_id: int, data: Dict[str, Any]) -> ModelT:
        record = self.get(record_id)
        for field, value in column_values(data).items():
            setattr(record, field, value)
        self.commit()
        self.db.refresh(record)
        return record

    def delete(self, record_id: int) -> None:
        record = self.get(record_id)
        self.db.delete(record)
        self.commit()
        self.log_info(f"Deleted {self.entity_name} {record_id}")
