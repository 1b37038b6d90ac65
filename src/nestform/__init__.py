from nestform.exceptions import (
    AmbiguousGroupError,
    ConfigError,
    MalformedPathError,
    NestFormError,
    UnknownIndexingError,
)
from nestform.forms import (
    DecodedForm,
    FieldPath,
    NestedFormDecoder,
    SubmissionField,
    decode,
    encode,
    field_name,
    from_pairs,
    parse_urlencoded,
)
from nestform.records import Course, RecordStore, Registry, Student
from nestform.service import EnrollmentResult, EnrollmentService, build_service

__version__ = "1.0.0"

__all__ = [
    "AmbiguousGroupError",
    "ConfigError",
    "Course",
    "DecodedForm",
    "EnrollmentResult",
    "EnrollmentService",
    "FieldPath",
    "MalformedPathError",
    "NestFormError",
    "NestedFormDecoder",
    "RecordStore",
    "Registry",
    "Student",
    "SubmissionField",
    "UnknownIndexingError",
    "build_service",
    "decode",
    "encode",
    "field_name",
    "from_pairs",
    "parse_urlencoded",
]
