import pytest
from nestform.forms import NestedFormDecoder, from_pairs
from nestform.records import Registry
from nestform.service import EnrollmentService

# Field order as the lesson's form lists its inputs: the student first, then
# each course's inputs back to back.
TWO_COURSE_PAIRS = [
    ("student[name]", "Vic"),
    ("student[courses][][name]", "AP US History"),
    ("student[courses][][topic]", "History"),
    ("student[courses][][name]", "AP Human Geography"),
    ("student[courses][][topic]", "History"),
]

@pytest.fixture
def decoder():
    return NestedFormDecoder(root_key="student", group_key="courses")

@pytest.fixture
def two_course_fields():
    return from_pairs(TWO_COURSE_PAIRS)

@pytest.fixture
def registry():
    """
    Fresh stores per test; nothing leaks between tests through module globals.
    """
    return Registry()

@pytest.fixture
def service(registry, decoder):
    return EnrollmentService(registry=registry, decoder=decoder)
