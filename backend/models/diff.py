"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DiffType(str, Enum):
    """Kind of a single diff record"""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class DiffRecord(BaseModel):
    """One line of the edit script, with 1-indexed line numbers per side"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: DiffType
    old_line_num: int | None = Field(default=None, alias="oldLineNum")  # None if added
    new_line_num: int | None = Field(default=None, alias="newLineNum")  # None if removed
    content: str

    @model_validator(mode="after")
    def check_line_numbers(self) -> "DiffRecord":
        """Each type carries exactly the line numbers of the sides it appears on"""
        has_old = self.type != DiffType.ADDED
        has_new = self.type != DiffType.REMOVED

        if has_old != (self.old_line_num is not None):
            raise ValueError(
                f"{self.type.value} record {'requires' if has_old else 'must not have'} oldLineNum"
            )
        if has_new != (self.new_line_num is not None):
            raise ValueError(
                f"{self.type.value} record {'requires' if has_new else 'must not have'} newLineNum"
            )
        return self

    @classmethod
    def unchanged(cls, content: str, old_line_num: int, new_line_num: int) -> "DiffRecord":
        return cls(
            type=DiffType.UNCHANGED,
            old_line_num=old_line_num,
            new_line_num=new_line_num,
            content=content,
        )

    @classmethod
    def added(cls, content: str, new_line_num: int) -> "DiffRecord":
        return cls(type=DiffType.ADDED, new_line_num=new_line_num, content=content)

    @classmethod
    def removed(cls, content: str, old_line_num: int) -> "DiffRecord":
        return cls(type=DiffType.REMOVED, old_line_num=old_line_num, content=content)


class DiffResult(BaseModel):
    """Complete diff result with derived statistics"""

    model_config = ConfigDict(populate_by_name=True)

    records: list[DiffRecord]
    additions: int = 0
    deletions: int = 0
    unchanged: int = 0
    has_differences: bool = Field(default=False, alias="hasDifferences")

    @classmethod
    def from_records(cls, records: list[DiffRecord]) -> "DiffResult":
        """Build a result and count each record type"""
        additions = sum(1 for r in records if r.type == DiffType.ADDED)
        deletions = sum(1 for r in records if r.type == DiffType.REMOVED)

        return cls(
            records=records,
            additions=additions,
            deletions=deletions,
            unchanged=len(records) - additions - deletions,
            has_differences=bool(additions or deletions),
        )


class DiffRequest(BaseModel):
    """Request to compare two texts"""

    model_config = ConfigDict(populate_by_name=True)

    old_text: str = Field(default="", alias="oldText")
    new_text: str = Field(default="", alias="newText")
