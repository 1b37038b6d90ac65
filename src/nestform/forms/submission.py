from __future__ import annotations

from typing import Iterable, Optional, Union
from urllib.parse import parse_qsl

from nestform.forms.models import SubmissionField


def from_pairs(pairs: Iterable[tuple[str, Optional[str]]]) -> list[SubmissionField]:
    """Keeps the order the pairs arrive in; repeated keys stay separate fields."""
    return [SubmissionField.of(key, value) for key, value in pairs]


def parse_urlencoded(body: Union[str, bytes], encoding: str = "utf-8") -> list[SubmissionField]:
    if isinstance(body, bytes):
        # Same replacement policy parse_qsl applies to percent-escaped bytes.
        body = body.decode(encoding, errors="replace")
    return from_pairs(parse_qsl(body, keep_blank_values=True, encoding=encoding))
