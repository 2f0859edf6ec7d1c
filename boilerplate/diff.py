"""
Line-oriented diff between the expected boilerplate lines ("want") and the lines
actually found in a file ("got").

Rendered groups use one of three position notations:

    [i]       the line at index i differs in both sequences
    [i->?]    want[i] has no counterpart in got
    [?->j]    got[j] has no counterpart in want
"""
from dataclasses import dataclass
from typing import List, Sequence
import enum

from boilerplate.text import quote

NON_EXISTENT = "<non-existent>"


class EditKind(enum.Enum):
    EQUAL = "equal"
    MODIFIED = "modified"
    DELETED = "deleted"
    INSERTED = "inserted"


@dataclass(frozen=True)
class Edit:
    kind: EditKind
    want_index: int | None = None
    got_index: int | None = None
    want: str | None = None
    got: str | None = None

    @property
    def position(self) -> str:
        if self.kind == EditKind.DELETED:
            return f"[{self.want_index}->?]"
        if self.kind == EditKind.INSERTED:
            return f"[?->{self.got_index}]"
        return f"[{self.want_index}]"

    def render(self) -> str:
        want = quote(self.want) if self.want is not None else NON_EXISTENT
        got = quote(self.got) if self.got is not None else NON_EXISTENT
        return f"{self.position}:\n\t-: {want}\n\t+: {got}\n"


def _lcs_table(want: Sequence[str], got: Sequence[str]) -> List[List[int]]:
    # table[i][j] is the LCS length of want[:i] and got[:j]
    table = [[0] * (len(got) + 1) for _ in range(len(want) + 1)]
    for i in range(1, len(want) + 1):
        for j in range(1, len(got) + 1):
            if want[i - 1] == got[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def _matches(want: Sequence[str], got: Sequence[str]) -> List[tuple]:
    """
    Returns the (want_index, got_index) pairs of a longest common subsequence.

    Walking back from the end pairs a trailing line with its last occurrence, so
    lines pushed down by an insertion show up as insertions before it.
    """
    table = _lcs_table(want, got)
    pairs = []
    i, j = len(want), len(got)
    while i > 0 and j > 0:
        if want[i - 1] == got[j - 1]:
            pairs.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    pairs.reverse()
    return pairs


def _gap(want: Sequence[str], got: Sequence[str],
         want_start: int, want_end: int, got_start: int, got_end: int) -> List[Edit]:
    edits: List[Edit] = []
    deleted: List[Edit] = []
    inserted: List[Edit] = []
    for offset in range(max(want_end - want_start, got_end - got_start)):
        i, j = want_start + offset, got_start + offset
        if i < want_end and j < got_end and i == j:
            edits.append(Edit(EditKind.MODIFIED, i, j, want[i], got[j]))
            continue
        if i < want_end:
            deleted.append(Edit(EditKind.DELETED, want_index=i, want=want[i]))
        if j < got_end:
            inserted.append(Edit(EditKind.INSERTED, got_index=j, got=got[j]))
    return edits + deleted + inserted


def align(want: Sequence[str], got: Sequence[str]) -> List[Edit]:
    """
    Aligns two line sequences, returning every step including equal lines.
    """
    edits: List[Edit] = []
    i, j = 0, 0
    for mi, mj in _matches(want, got) + [(len(want), len(got))]:
        edits.extend(_gap(want, got, i, mi, j, mj))
        if mi < len(want) and mj < len(got):
            edits.append(Edit(EditKind.EQUAL, mi, mj, want[mi], got[mj]))
        i, j = mi + 1, mj + 1
    return edits


def render(edits: Sequence[Edit]) -> str:
    return ''.join(edit.render() for edit in edits if edit.kind != EditKind.EQUAL)


def diff(want: Sequence[str], got: Sequence[str]) -> str:
    return render(align(want, got))
