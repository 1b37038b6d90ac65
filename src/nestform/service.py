from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from pydantic import BaseModel, Field

from nestform.config import settings
from nestform.forms.decoder import NestedFormDecoder
from nestform.forms.models import SubmissionField
from nestform.forms.submission import parse_urlencoded
from nestform.records.models import Course, Student
from nestform.records.store import Registry

logger = logging.getLogger(__name__)


class EnrollmentResult(BaseModel):
    student: Student
    courses: list[Course] = Field(default_factory=list)


class EnrollmentService:
    def __init__(self, registry: Registry, decoder: NestedFormDecoder):
        self.registry = registry
        self.decoder = decoder

    def enroll(self, fields: Iterable[SubmissionField]) -> EnrollmentResult:
        # Decode everything before creating anything: a malformed field leaves the stores untouched.
        form = self.decoder.decode(fields)

        student = self.registry.students.create(form.root)
        courses = [self.registry.courses.create(child) for child in form.children]

        if settings.logging.log_decodes:
            logger.info(
                "enrollment created",
                extra={"student_id": student.id, "course_ids": [course.id for course in courses]},
            )
        return EnrollmentResult(student=student, courses=courses)

    def enroll_body(self, body: Union[str, bytes]) -> EnrollmentResult:
        return self.enroll(parse_urlencoded(body))

    def students(self) -> list[Student]:
        return self.registry.students.all()

    def courses(self) -> list[Course]:
        return self.registry.courses.all()


def build_service(registry: Optional[Registry] = None) -> EnrollmentService:
    decoder = NestedFormDecoder.from_settings(settings.forms)
    return EnrollmentService(registry=registry or Registry(), decoder=decoder)
