"""
Diff Generator Service - Line-based LCS diff between two texts
"""

from __future__ import annotations

from typing import Any

from models.diff import DiffRecord, DiffResult

DEFAULT_MAX_LINES = 20000
DEFAULT_MAX_CELLS = 25_000_000


class DiffTooLargeError(ValueError):
    """Raised when inputs exceed the configured diff size ceiling"""


def _read_limit(cfg: dict[str, Any], key: str, default: int) -> int | None:
    """Read a non-negative integer limit; invalid values fall back to the default"""
    value = cfg.get(key)
    if value is None:
        return None

    try:
        if isinstance(value, bool):
            raise ValueError(value)
        limit = int(value)
        if limit < 0:
            raise ValueError(value)
    except (TypeError, ValueError):
        print(f"[Config] Invalid diff.{key} {value!r}, using default {default}")
        return default

    return limit


def split_lines(text: str) -> list[str]:
    """Split text strictly on '\\n'. A trailing '\\r' stays in the line; '' yields ['']."""
    return text.split("\n")


def build_table(old_lines: list[str], new_lines: list[str]) -> list[list[int]]:
    """
    Build the LCS length table.

    dp[i][j] is the length of the longest common subsequence of
    old_lines[:i] and new_lines[:j]. Row 0 and column 0 are all zero.
    """
    m, n = len(old_lines), len(new_lines)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        old_line = old_lines[i - 1]
        prev_row = dp[i - 1]
        row = dp[i]
        for j in range(1, n + 1):
            if old_line == new_lines[j - 1]:
                row[j] = prev_row[j - 1] + 1
            else:
                row[j] = max(prev_row[j], row[j - 1])

    return dp


def backtrace(
    dp: list[list[int]],
    old_lines: list[str],
    new_lines: list[str],
) -> list[DiffRecord]:
    """
    Walk the table from (m, n) back to (0, 0) and emit records in document order.

    On a tie between an addition and a removal the addition is taken first
    while walking backwards, so removals come before additions in the output.
    """
    records = []
    i, j = len(old_lines), len(new_lines)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and old_lines[i - 1] == new_lines[j - 1]:
            records.append(DiffRecord.unchanged(old_lines[i - 1], i, j))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
            records.append(DiffRecord.added(new_lines[j - 1], j))
            j -= 1
        else:
            records.append(DiffRecord.removed(old_lines[i - 1], i))
            i -= 1

    records.reverse()
    return records


def compute_diff(old_text: str, new_text: str) -> list[DiffRecord]:
    """Compute the line diff between two whole texts"""
    old_lines = split_lines(old_text)
    new_lines = split_lines(new_text)
    dp = build_table(old_lines, new_lines)
    return backtrace(dp, old_lines, new_lines)


class DiffGenerator:
    """Generate line diffs, enforcing an optional input size ceiling"""

    def __init__(self, max_lines: int | None = None, max_cells: int | None = None):
        # None or 0 disables the corresponding check
        self.max_lines = max_lines
        self.max_cells = max_cells

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "DiffGenerator":
        """Create a generator from the 'diff' section of the backend config"""
        cfg = config.get("diff", {})
        return cls(
            max_lines=_read_limit(cfg, "maxLines", DEFAULT_MAX_LINES),
            max_cells=_read_limit(cfg, "maxCells", DEFAULT_MAX_CELLS),
        )

    def generate_diff(self, old_text: str, new_text: str) -> DiffResult:
        """Generate a structured diff result from original and new content"""
        old_lines = split_lines(old_text)
        new_lines = split_lines(new_text)
        self._check_size(len(old_lines), len(new_lines))

        dp = build_table(old_lines, new_lines)
        records = backtrace(dp, old_lines, new_lines)

        return DiffResult.from_records(records)

    def _check_size(self, old_count: int, new_count: int):
        """Raise DiffTooLargeError if either limit is exceeded"""
        if self.max_lines:
            longest = max(old_count, new_count)
            if longest > self.max_lines:
                raise DiffTooLargeError(
                    f"Input too large: {old_count} old lines, {new_count} new lines "
                    f"(limit {self.max_lines} lines per side)"
                )

        if self.max_cells:
            cells = old_count * new_count
            if cells > self.max_cells:
                raise DiffTooLargeError(
                    f"Input too large: {old_count} x {new_count} = {cells} table cells "
                    f"(limit {self.max_cells})"
                )
