from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, TextIO
from pathlib import Path

from boilerplate.diff import Edit, align, render
from boilerplate.text import normalize, denormalize, join_block

# Number of lines searched for the first boilerplate line. Leaves room for
# shebangs, build tags and package declarations above the header.
ANCHOR_LOOKAHEAD = 10


@dataclass(frozen=True)
class Template:
    """
    The normalized boilerplate lines every checked file must start with.
    """
    lines: Tuple[str, ...]

    def __post_init__(self):
        if not self.lines:
            raise ValueError("Boilerplate template must have at least one line.")

    @classmethod
    def from_text(cls, text: str) -> Template:
        if text == "":
            raise ValueError("Boilerplate text is empty.")
        return cls(tuple(normalize(line) for line in text.split('\n')))

    @classmethod
    def load(cls, path: Path) -> Template:
        with open(path, 'rt', encoding='utf-8') as f:
            return cls.from_text(f.read())

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index):
        return self.lines[index]


class MatchResult:
    """
    Outcome of checking one file against the template. `line` is the 1-based
    line a finding is reported at.
    """
    line: int

    @property
    def is_clean(self) -> bool:
        return False

    def body(self, year: int | None = None) -> str:
        raise NotImplementedError()


@dataclass(frozen=True)
class Clean(MatchResult):
    line: int = 0

    @property
    def is_clean(self) -> bool:
        return True

    def body(self, year: int | None = None) -> str:
        return ""


@dataclass(frozen=True)
class Missing(MatchResult):
    expected: Tuple[str, ...]
    line: int = 1

    def body(self, year: int | None = None) -> str:
        return denormalize(join_block(self.expected), year)


@dataclass(frozen=True)
class Incomplete(MatchResult):
    line: int
    remainder: Tuple[str, ...]

    def body(self, year: int | None = None) -> str:
        return denormalize(join_block(self.remainder), year)


@dataclass(frozen=True)
class Mismatched(MatchResult):
    line: int
    anchor_line: int
    offset: int
    edits: Tuple[Edit, ...]

    def body(self, year: int | None = None) -> str:
        return denormalize(render(self.edits), year)


def check_lines(template: Template, lines: Iterable[str]) -> MatchResult:
    """
    Checks a stream of physical lines (without line terminators) against the
    template. Only as many lines as needed to decide are consumed.
    """
    it = iter(lines)

    anchor_line = 0
    for index, line in enumerate(it, start=1):
        if normalize(line) == template[0]:
            anchor_line = index
            break
        if index >= ANCHOR_LOOKAHEAD:
            break
    if anchor_line == 0:
        return Missing(template.lines)

    collected: List[str] = [template[0]]
    for _ in template[1:]:
        line = next(it, None)
        if line is None:
            return Incomplete(anchor_line, template[len(collected):])
        collected.append(normalize(line))

    for i, (want, got) in enumerate(zip(template.lines, collected)):
        if want != got:
            # Report the first differing line rather than the start of the
            # header: review tools drop comments outside the changed lines.
            return Mismatched(
                line=anchor_line + i,
                anchor_line=anchor_line,
                offset=i,
                edits=tuple(align(template[i:], collected[i:])))
    return Clean()


def iter_file_lines(f: TextIO) -> Iterator[str]:
    # Lines end at \n only; a CR before it belongs to the terminator.
    for line in f:
        line = line[:-1] if line.endswith('\n') else line
        yield line[:-1] if line.endswith('\r') else line


def check_file(template: Template, path: Path) -> MatchResult:
    """
    Checks a file on disk. Read and decoding errors propagate to the caller.
    """
    with open(path, 'rt', encoding='utf-8', newline='\n') as f:
        return check_lines(template, iter_file_lines(f))
