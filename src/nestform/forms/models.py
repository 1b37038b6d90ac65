from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nestform.forms.paths import render_key, split_key

RootRecord = dict[str, Optional[str]]
ChildRecord = dict[str, Optional[str]]


class FieldPath(BaseModel):
    model_config = ConfigDict(frozen=True)

    segments: tuple[str, ...]

    @classmethod
    def parse(cls, key: str) -> "FieldPath":
        return cls(segments=split_key(key))

    @property
    def head(self) -> str:
        return self.segments[0]

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return render_key(self.segments)


class SubmissionField(BaseModel):
    """One form input: where it goes and what was typed into it."""

    model_config = ConfigDict(frozen=True)

    path: FieldPath
    value: Optional[str] = None

    @classmethod
    def of(cls, key: str, value: Optional[str]) -> "SubmissionField":
        return cls(path=FieldPath.parse(key), value=value)

    @property
    def key(self) -> str:
        return str(self.path)


class DecodedForm(BaseModel):
    root: RootRecord = Field(default_factory=dict)
    children: list[ChildRecord] = Field(default_factory=list)
