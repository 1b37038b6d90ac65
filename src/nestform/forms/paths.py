"""
Bracketed key paths as used in HTML form input names.

`student[courses][][name]` splits into `("student", "courses", "", "name")`;
the empty segment is the anonymous marker of a repeated group.
"""
from __future__ import annotations

import re
from typing import Optional, Sequence

from nestform.exceptions import MalformedPathError

ANONYMOUS_MARKER = ""

_HEAD = re.compile(r"[^\[\]]+")
_SEGMENT = re.compile(r"\[([^\[\]]*)\]")
_INDEX = re.compile(r"[0-9]+")


def split_key(key: str) -> tuple[str, ...]:
    if not isinstance(key, str):
        raise MalformedPathError(repr(key), "field keys must be strings")

    head = _HEAD.match(key)
    if head is None:
        raise MalformedPathError(key, "missing root segment")

    segments = [head.group(0)]
    pos = head.end()
    while pos < len(key):
        match = _SEGMENT.match(key, pos)
        if match is None:
            raise MalformedPathError(key, f"unbalanced or stray bracket at offset {pos}")
        segments.append(match.group(1))
        pos = match.end()
    return tuple(segments)


def render_key(segments: Sequence[str]) -> str:
    if not segments or not segments[0]:
        raise MalformedPathError(repr(tuple(segments)), "missing root segment")
    head, *rest = segments
    return head + "".join(f"[{segment}]" for segment in rest)


def is_index(segment: str) -> bool:
    return bool(_INDEX.fullmatch(segment))


def field_name(
    root_key: str,
    field: str,
    group_key: Optional[str] = None,
    index: Optional[int] = None,
) -> str:
    """
    Input name for a form field.
    Without `group_key` the field belongs to the root record; with it, the field
    belongs to a child, addressed by `index` or by the anonymous marker.
    """
    if group_key is None:
        if index is not None:
            raise ValueError("index requires a group_key")
        return render_key((root_key, field))
    if index is not None and index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    marker = ANONYMOUS_MARKER if index is None else str(index)
    return render_key((root_key, group_key, marker, field))
