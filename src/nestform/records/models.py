from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class RecordInstance(BaseModel):
    """
    Stored, typed form of a decoded record.
    Every declared field is optional: a field missing from the submission is
    stored as None rather than rejected.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int

    @classmethod
    def record_fields(cls) -> frozenset[str]:
        return frozenset(name for name in cls.model_fields if name != "id")


class Student(RecordInstance):
    name: Optional[str] = None
    grade: Optional[str] = None


class Course(RecordInstance):
    name: Optional[str] = None
    topic: Optional[str] = None
