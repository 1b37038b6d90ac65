from __future__ import annotations

from nestform.exceptions import AmbiguousGroupError, UnknownIndexingError
from nestform.forms.models import DecodedForm, SubmissionField
from nestform.forms.paths import field_name


def encode(
    form: DecodedForm,
    root_key: str,
    group_key: str,
    indexing: str = "anonymous",
) -> list[SubmissionField]:
    """
    Flattens a decoded form into the ordered fields an HTML form would submit.

    Root fields come first, then each child's fields back to back. With the
    anonymous marker a child only starts where its first field repeats one of
    the previous child's fields, so children that cannot be told apart that
    way raise AmbiguousGroupError.
    """
    if indexing not in ("anonymous", "explicit"):
        raise UnknownIndexingError(f"Unknown indexing mode {indexing!r}")

    for name in form.root:
        if name == "" or name == group_key:
            raise AmbiguousGroupError(f"root field {name!r} would not decode back as a root scalar")
    fields = [SubmissionField.of(field_name(root_key, name), value) for name, value in form.root.items()]

    previous = None
    for index, child in enumerate(form.children):
        if not child:
            raise AmbiguousGroupError(f"child {index} has no fields and would be dropped")
        if "" in child:
            raise AmbiguousGroupError(f"child {index} has a field without a name")
        if indexing == "anonymous" and previous is not None:
            first = next(iter(child))
            if first not in previous:
                raise AmbiguousGroupError(
                    f"child {index} starts with {first!r}, which child {index - 1} does not set"
                )
        marker = None if indexing == "anonymous" else index
        fields.extend(
            SubmissionField.of(field_name(root_key, name, group_key=group_key, index=marker), value)
            for name, value in child.items()
        )
        previous = child
    return fields
