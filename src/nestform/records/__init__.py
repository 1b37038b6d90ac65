from nestform.records.models import Course, RecordInstance, Student
from nestform.records.store import RecordStore, Registry

__all__ = [
    "Course",
    "RecordInstance",
    "RecordStore",
    "Registry",
    "Student",
]
