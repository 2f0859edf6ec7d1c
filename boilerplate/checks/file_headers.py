"""
Checks that source files start with the required boilerplate (license header),
ignoring differences in copyright years, and fixes them in place on request.
"""
from typing import List
from pathlib import Path

from boilerplate.checks.base import FileCheck, Issue, IssueType
from boilerplate.diff import EditKind, Edit
from boilerplate.io import read_text_file, write_text_file
from boilerplate.matcher import (
    Template, MatchResult, Missing, Incomplete, Mismatched, check_file, check_lines,
)
from boilerplate.text import normalize, denormalize, split_lines


E_MISSING_BOILERPLATE    = IssueType("2f6b7c1e-8d4a-4e0b-9a51-3c7e5d2b9f14", "missing boilerplate:\n{expected}")
E_INCOMPLETE_BOILERPLATE = IssueType("a4c93e07-15bd-4f62-8e3a-6d0f2b7c91e5", "incomplete boilerplate, missing:\n{remainder}")
E_MISMATCHED_BOILERPLATE = IssueType("d81e5f3a-7c26-4b98-b0d4-92a6e1f8c357", "found mismatched boilerplate lines:\n{diff}")


def _complete_header(template: Template, raw: List[str], year: int | None) -> List[str]:
    """
    Completes a header cut short by the end of the file. Lines that already match
    keep their text, so old years survive; any other file line follows the header.
    """
    header = []
    rest = []
    for i, want in enumerate(template.lines):
        if i < len(raw) and normalize(raw[i]) == want:
            header.append(raw[i])
        else:
            header.append(denormalize(want, year))
            if i < len(raw):
                rest.append(raw[i])
    return header + rest + raw[len(template):]


def _apply_edits(template: Template, raw: List[str], edits: List[Edit],
                 keep_inserted: bool, year: int | None) -> List[str]:
    """
    Rebuilds a header window from its alignment against the template. Inserted
    lines are either kept in place or, when they sit inside the header, dropped.
    """
    last_aligned = max(
        (e.got_index for e in edits if e.kind in (EditKind.EQUAL, EditKind.MODIFIED)),
        default=-1)
    result = []
    for edit in edits:
        if edit.kind == EditKind.EQUAL:
            result.append(raw[edit.got_index])
        elif edit.kind == EditKind.INSERTED:
            if keep_inserted or edit.got_index > last_aligned:
                result.append(raw[edit.got_index])
        else:
            result.append(denormalize(template[edit.want_index], year))
    return result


def fix_lines(template: Template, lines: List[str], year: int | None = None) -> List[str]:
    """
    Returns the physical lines of a file rewritten so that they match the template.
    """
    result = check_lines(template, lines)

    if isinstance(result, Missing):
        at = 1 if lines and lines[0].startswith('#!') else 0
        return lines[:at] + [denormalize(line, year) for line in template.lines] + lines[at:]

    if isinstance(result, Incomplete):
        start = result.line - 1
        return lines[:start] + _complete_header(template, lines[start:], year)

    if isinstance(result, Mismatched):
        start = result.anchor_line - 1 + result.offset
        end = result.anchor_line - 1 + len(template)
        want = template[result.offset:]
        window = lines[start:end]
        edits = list(result.edits)

        # Edit indices count from the first differing line.
        sub = Template(want)
        for keep_inserted in (True, False):
            fixed = lines[:start] + _apply_edits(sub, window, edits, keep_inserted, year) + lines[end:]
            if check_lines(template, fixed).is_clean:
                return fixed
        return fixed

    return lines


def fix_file(template: Template, path: Path) -> None:
    content = read_text_file(path)
    lines = split_lines(content)
    fixed = fix_lines(template, lines)
    if fixed != lines:
        write_text_file(path, '\n'.join(fixed) + '\n')


class BoilerplateHeaderCheck(FileCheck):
    """
    Checks that a file's leading lines match the boilerplate template.
    """
    def __init__(self, template: Template):
        self.template = template

    def issue_for(self, path: Path, result: MatchResult) -> Issue | None:
        if isinstance(result, Missing):
            issue = E_MISSING_BOILERPLATE.make(expected=result.body())
        elif isinstance(result, Incomplete):
            issue = E_INCOMPLETE_BOILERPLATE.make(remainder=result.body())
        elif isinstance(result, Mismatched):
            issue = E_MISMATCHED_BOILERPLATE.make(diff=result.body())
        else:
            return None
        return issue.at(path, result.line).fixable(lambda: fix_file(self.template, path))

    def check(self, path: Path) -> List[Issue]:
        issue = self.issue_for(path, check_file(self.template, path))
        return [issue] if issue is not None else []
