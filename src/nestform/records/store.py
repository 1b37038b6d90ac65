from __future__ import annotations

import logging
import threading
from typing import Generic, Mapping, Optional, TypeVar

from nestform.records.models import Course, RecordInstance, Student

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=RecordInstance)


class RecordStore(Generic[ModelT]):
    """
    Append-only, process-lifetime collection of one record kind.
    There is no update or delete; ids are assigned in creation order starting at 1.
    Appends are serialised so a store can be shared by more than one thread.
    """

    def __init__(self, model: type[ModelT]):
        self.model = model
        self._items: list[ModelT] = []
        self._lock = threading.Lock()

    def create(self, record: Mapping[str, Optional[str]]) -> ModelT:
        known = self.model.record_fields()
        ignored = sorted(set(record) - known)
        if ignored:
            logger.debug("ignoring undeclared fields", extra={"model": self.model.__name__, "fields": ignored})
        values = {name: value for name, value in record.items() if name in known}

        with self._lock:
            instance = self.model(id=len(self._items) + 1, **values)
            self._items.append(instance)
        return instance

    def all(self) -> list[ModelT]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class Registry:
    """Owns the stores for every record kind; hand it to whatever creates or lists records."""

    def __init__(self) -> None:
        self.students: RecordStore[Student] = RecordStore(Student)
        self.courses: RecordStore[Course] = RecordStore(Course)
