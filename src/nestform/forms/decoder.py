from __future__ import annotations

import logging
from typing import Iterable, Optional

from nestform.config import FormSettings
from nestform.exceptions import MalformedPathError, UnknownIndexingError
from nestform.forms.models import ChildRecord, DecodedForm, RootRecord, SubmissionField
from nestform.forms.paths import ANONYMOUS_MARKER, is_index

logger = logging.getLogger(__name__)

INDEXING_MODES = ("anonymous", "explicit")


class _OrdinalGroup:
    """
    Children addressed through the anonymous marker.
    No index travels with the fields, so a field name that is already set on
    the open child starts the next one.
    """

    def __init__(self) -> None:
        self.ordinal = -1
        self.children: list[ChildRecord] = []

    def assign(self, key: str, marker: str, name: str, value: Optional[str]) -> None:
        if marker != ANONYMOUS_MARKER:
            raise MalformedPathError(key, "explicit index used where the anonymous marker is expected")
        if self.ordinal < 0 or name in self.children[self.ordinal]:
            self.ordinal += 1
            self.children.append({})
        self.children[self.ordinal][name] = value

    def records(self) -> list[ChildRecord]:
        return self.children


class _IndexedGroup:
    """Children addressed by an explicit numeric index, compacted in index order."""

    def __init__(self) -> None:
        self.by_index: dict[int, ChildRecord] = {}

    def assign(self, key: str, marker: str, name: str, value: Optional[str]) -> None:
        if not is_index(marker):
            raise MalformedPathError(key, "expected a numeric index for the repeated group")
        child = self.by_index.setdefault(int(marker), {})
        if name in child:
            logger.debug("overwriting child field", extra={"key": key})
        child[name] = value

    def records(self) -> list[ChildRecord]:
        return [self.by_index[index] for index in sorted(self.by_index)]


class NestedFormDecoder:
    """
    Decodes flat bracketed form fields into one root record plus an ordered list
    of child records.

    Two shapes are recognised, everything else is rejected:
    - `root[field]`: scalar of the root record
    - `root[group][][field]`: scalar of a child record (`root[group][N][field]`
      when `indexing="explicit"`)

    Fields must be given in submission order; with the anonymous marker that
    order is the only thing that tells children apart.
    """

    def __init__(self, root_key: str = "student", group_key: str = "courses", indexing: str = "anonymous"):
        if indexing not in INDEXING_MODES:
            raise UnknownIndexingError(f"Unknown indexing mode {indexing!r}, expected one of {INDEXING_MODES}")
        self.root_key = root_key
        self.group_key = group_key
        self.indexing = indexing

    @classmethod
    def from_settings(cls, forms: FormSettings) -> "NestedFormDecoder":
        return cls(root_key=forms.root_key, group_key=forms.group_key, indexing=forms.indexing)

    def decode(
        self,
        fields: Iterable[SubmissionField],
        root_key: Optional[str] = None,
        group_key: Optional[str] = None,
    ) -> DecodedForm:
        root_key = self.root_key if root_key is None else root_key
        group_key = self.group_key if group_key is None else group_key

        root: RootRecord = {}
        group = _OrdinalGroup() if self.indexing == "anonymous" else _IndexedGroup()

        for field in fields:
            key = field.key
            if field.path.head != root_key:
                raise MalformedPathError(key, f"expected root segment {root_key!r}")

            rest = field.path.segments[1:]
            if len(rest) == 1:
                name = rest[0]
                if name == ANONYMOUS_MARKER:
                    raise MalformedPathError(key, "anonymous marker outside the repeated group")
                if name == group_key:
                    raise MalformedPathError(key, f"{group_key!r} names the repeated group, not a scalar")
                if name in root:
                    logger.debug("overwriting root field", extra={"key": key})
                root[name] = field.value
            elif len(rest) == 3 and rest[0] == group_key:
                marker, name = rest[1], rest[2]
                if name == ANONYMOUS_MARKER:
                    raise MalformedPathError(key, "missing child field name")
                group.assign(key, marker, name, field.value)
            else:
                raise MalformedPathError(key, "unrecognised path shape")

        form = DecodedForm(root=root, children=group.records())
        logger.debug(
            "decoded form",
            extra={
                "root_key": root_key,
                "group_key": group_key,
                "root_fields": len(form.root),
                "children": len(form.children),
            },
        )
        return form


def decode(fields: Iterable[SubmissionField], root_key: str, group_key: str) -> DecodedForm:
    return NestedFormDecoder(root_key=root_key, group_key=group_key).decode(fields)
