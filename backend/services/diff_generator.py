"""
Diff Generator Service - Rich and line-by-line comparison of two texts
"""

from __future__ import annotations

from diff_match_patch import diff_match_patch

from models.diff import DiffLine, TextComparison
from services.line_diff import diff_lines, split_lines


class DiffGenerator:
    """Generate the diff views shown by the compare tools"""

    def __init__(self):
        self._dmp = diff_match_patch()

    def compare_texts(self, content_a: str, content_b: str) -> TextComparison:
        """Build both the character-level HTML and the aligned line diff"""
        lines_a = split_lines(content_a)
        lines_b = split_lines(content_b)

        return TextComparison(
            diff_html=self.generate_html(content_a, content_b),
            lines1=lines_a,
            lines2=lines_b,
            diff_lines=self.generate_line_diff(lines_a, lines_b),
        )

    def generate_html(self, content_a: str, content_b: str) -> str:
        """Character-level diff rendered as escaped HTML"""
        diffs = self._dmp.diff_main(content_a, content_b, True)
        return self._dmp.diff_prettyHtml(diffs)

    def generate_line_diff(
        self,
        lines_a: list[str],
        lines_b: list[str],
    ) -> list[DiffLine]:
        """Aligned line records in wire form"""
        return [DiffLine.from_record(record) for record in diff_lines(lines_a, lines_b)]
