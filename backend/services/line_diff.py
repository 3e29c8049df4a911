"""
Line Diff Engine - Align two line sequences for side-by-side display

A single forward scan with one line of lookahead. It is not a minimal
(LCS) diff: once a cursor moves past a line the decision is final, so inputs
with repeated lines can produce a longer edit script than necessary. The
viewer relies on the exact alignment, so the precedence of the lookahead
rules must not change.
"""

from __future__ import annotations

from collections.abc import Sequence

from models.diff import DiffKind, DiffRecord


def split_lines(content: str) -> list[str]:
    """Split text on newlines, keeping empty segments ("" -> [""])"""
    return content.split("\n")


def _equal(text: str, line_num_a: int, line_num_b: int) -> DiffRecord:
    return DiffRecord(
        kind=DiffKind.EQUAL,
        text_a=text,
        text_b=text,
        line_num_a=line_num_a,
        line_num_b=line_num_b,
    )


def _delete(text: str, line_num_a: int) -> DiffRecord:
    return DiffRecord(kind=DiffKind.DELETE, text_a=text, line_num_a=line_num_a)


def _insert(text: str, line_num_b: int) -> DiffRecord:
    return DiffRecord(kind=DiffKind.INSERT, text_b=text, line_num_b=line_num_b)


def diff_lines(lines_a: Sequence[str], lines_b: Sequence[str]) -> list[DiffRecord]:
    """Align two line sequences into equal/delete/insert records.

    When the lines under the cursors differ, the next lines decide, in order:
    both next lines match each other (substitution), A's next line matches
    B's current line (A has an extra line), B's next line matches A's current
    line (B has an extra line), otherwise substitution.
    """
    records: list[DiffRecord] = []
    len_a, len_b = len(lines_a), len(lines_b)
    i = j = 0

    while i < len_a or j < len_b:
        if i >= len_a:
            records.append(_insert(lines_b[j], j + 1))
            j += 1
        elif j >= len_b:
            records.append(_delete(lines_a[i], i + 1))
            i += 1
        elif lines_a[i] == lines_b[j]:
            records.append(_equal(lines_a[i], i + 1, j + 1))
            i += 1
            j += 1
        elif i + 1 < len_a and j + 1 < len_b and lines_a[i + 1] == lines_b[j + 1]:
            records.append(_delete(lines_a[i], i + 1))
            records.append(_insert(lines_b[j], j + 1))
            i += 1
            j += 1
        elif i + 1 < len_a and lines_a[i + 1] == lines_b[j]:
            records.append(_delete(lines_a[i], i + 1))
            i += 1
        elif j + 1 < len_b and lines_b[j + 1] == lines_a[i]:
            records.append(_insert(lines_b[j], j + 1))
            j += 1
        else:
            # No resynchronization in sight
            records.append(_delete(lines_a[i], i + 1))
            records.append(_insert(lines_b[j], j + 1))
            i += 1
            j += 1

    return records
