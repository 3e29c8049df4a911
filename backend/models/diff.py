"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class DiffKind(str, Enum):
    """Classification of an aligned line pair"""

    EQUAL = "equal"
    DELETE = "delete"
    INSERT = "insert"


class DiffRecord(BaseModel):
    """A single aligned line pair produced by the line diff engine"""

    kind: DiffKind
    text_a: str | None = None  # None when the line only exists in B
    text_b: str | None = None  # None when the line only exists in A
    line_num_a: int = 0  # 1-indexed, 0 means no corresponding line
    line_num_b: int = 0


class DiffLine(BaseModel):
    """Wire form of a diff record for the side-by-side viewer"""

    type: DiffKind
    line1: str = ""
    line2: str = ""
    line_num1: int = 0
    line_num2: int = 0

    @classmethod
    def from_record(cls, record: DiffRecord) -> "DiffLine":
        return cls(
            type=record.kind,
            line1=record.text_a if record.text_a is not None else "",
            line2=record.text_b if record.text_b is not None else "",
            line_num1=record.line_num_a,
            line_num2=record.line_num_b,
        )


class TextComparison(BaseModel):
    """Rich and line-by-line comparison of two texts"""

    diff_html: str
    lines1: list[str]
    lines2: list[str]
    diff_lines: list[DiffLine]
