"""Character diff engine (LCS alignment)."""

from collections.abc import Iterable, Sequence
from itertools import groupby
from typing import Any

from .DiffResult import DiffResult
from .EditOp import EditOp
from .OpKind import OpKind
from .Span import Span


def compute_diff(left: Sequence[Any], right: Sequence[Any]) -> DiffResult:
    """Compute a minimal edit script turning ``left`` into ``right``.

    The alignment is a longest-common-subsequence alignment. Ties between
    equally long alignments are broken by walking the table of prefix LCS
    lengths from the end toward the start: a match is always taken when the
    current elements are equal; otherwise, when both moves stay on an optimal
    path, the walk consumes from ``right`` (Insert) before ``left`` (Delete).

    Read forward, a replaced region therefore renders as its deletions
    followed by its insertions. For example ``compute_diff("hello", "world")``
    yields Delete "hell", Insert "w", Equal "o", Insert "rld", and
    ``compute_diff("a", "aa")`` yields Insert "a", Equal "a".

    Only the grid of the differing middle is allocated. The common suffix is
    what the walk matches first anyway. Inside the common prefix the prefix
    LCS length of ``left[:i]`` and ``right[:j]`` is ``min(i, j)``, so the walk
    continues through it without a table.

    Time and memory are O(N*M) in the size of the differing middle, so very
    large inputs with scattered changes can be slow.

    Args:
        left: The "before" (expected) sequence
        right: The "after" (actual) sequence

    Returns:
        DiffResult whose ops cover both sequences completely
    """
    n, m = len(left), len(right)
    if n == 0 or m == 0:
        return DiffResult(left, right, tuple(_edge_ops(0, n, 0, m)))

    prefix = _common_prefix(left, right)
    suffix = _common_suffix(left, right, min(n, m) - prefix)

    ops = _align(left, right, prefix, n - suffix, m - suffix)
    if suffix:
        ops.append(EditOp.equal(Span(n - suffix, n), Span(m - suffix, m)))

    return DiffResult(left, right, tuple(_coalesce(ops)))


def _edge_ops(left_start: int, left_end: int, right_start: int, right_end: int) -> list[EditOp]:
    """Ops for a region where at most one side is non-empty."""
    if left_end > left_start:
        return [EditOp.delete(Span(left_start, left_end))]
    if right_end > right_start:
        return [EditOp.insert(Span(right_start, right_end))]
    return []


def _common_prefix(left: Sequence[Any], right: Sequence[Any]) -> int:
    limit = min(len(left), len(right))
    k = 0
    while k < limit and left[k] == right[k]:
        k += 1
    return k


def _common_suffix(left: Sequence[Any], right: Sequence[Any], limit: int) -> int:
    n, m = len(left), len(right)
    k = 0
    while k < limit and left[n - 1 - k] == right[m - 1 - k]:
        k += 1
    return k


def _lcs_table(a: Sequence[Any], b: Sequence[Any]) -> list[list[int]]:
    """Prefix LCS lengths: ``table[i][j]`` is LCS(a[:i], b[:j])."""
    m = len(b)
    table = [[0] * (m + 1)]
    for ai in a:
        prev = table[-1]
        row = [0] * (m + 1)
        for j in range(1, m + 1):
            if ai == b[j - 1]:
                row[j] = prev[j - 1] + 1
            elif prev[j] >= row[j - 1]:
                row[j] = prev[j]
            else:
                row[j] = row[j - 1]
        table.append(row)
    return table


def _align(left: Sequence[Any], right: Sequence[Any], prefix: int, left_end: int, right_end: int) -> list[EditOp]:
    """Align ``left[:left_end]`` with ``right[:right_end]``.

    Both share their first ``prefix`` elements; only the part after that
    gets a table.
    """
    table = _lcs_table(left[prefix:left_end], right[prefix:right_end])

    def lcs(i: int, j: int) -> int:
        if i <= prefix or j <= prefix:
            return min(i, j)
        return prefix + table[i - prefix][j - prefix]

    # Backward walk, one step per element
    steps: list[OpKind] = []
    i, j = left_end, right_end
    while i > 0 and j > 0:
        if left[i - 1] == right[j - 1]:
            steps.append(OpKind.EQUAL)
            i -= 1
            j -= 1
        elif lcs(i, j - 1) >= lcs(i - 1, j):
            steps.append(OpKind.INSERT)
            j -= 1
        else:
            steps.append(OpKind.DELETE)
            i -= 1
    steps.extend([OpKind.INSERT] * j)
    steps.extend([OpKind.DELETE] * i)
    steps.reverse()

    return list(_runs(steps))


def _runs(steps: Iterable[OpKind]) -> Iterable[EditOp]:
    """Group single-element steps into spans."""
    li = rj = 0
    for kind, group in groupby(steps):
        count = sum(1 for _ in group)
        if kind is OpKind.EQUAL:
            yield EditOp.equal(Span(li, li + count), Span(rj, rj + count))
            li += count
            rj += count
        elif kind is OpKind.DELETE:
            yield EditOp.delete(Span(li, li + count))
            li += count
        else:
            yield EditOp.insert(Span(rj, rj + count))
            rj += count


def _coalesce(ops: Iterable[EditOp]) -> list[EditOp]:
    merged: list[EditOp] = []
    for op in ops:
        if len(op) == 0:
            continue
        if merged and merged[-1].kind is op.kind:
            merged[-1] = merged[-1].merge(op)
        else:
            merged.append(op)
    return merged
