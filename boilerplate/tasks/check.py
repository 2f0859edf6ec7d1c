from __future__ import annotations
from dataclasses import dataclass
from typing import TextIO, List
from pathlib import Path
import logging
import sys

from boilerplate.checks.base import Issue
from boilerplate.checks.file_headers import BoilerplateHeaderCheck
from boilerplate.config import CheckOptions
from boilerplate.io import walk_files, read_ignore_file
from boilerplate.messages import error, info, warning


@dataclass
class CheckSummary:
    checked: int = 0
    findings: int = 0
    fixed: int = 0
    errors: int = 0

    @property
    def failed(self) -> bool:
        return self.errors > 0 or self.fixed > 0


def check_main(options: CheckOptions, out: TextIO | None = None) -> CheckSummary:
    """
    Checks every matching file under the configured root and writes one report
    per finding to `out`. Expects `options.prepare()` to have succeeded.
    """
    assert options.template is not None, "Options have not been prepared"
    out = out if out is not None else sys.stdout

    root = Path(options.root)
    predicate = None
    if options.gitignore:
        if not (root / ".gitignore").exists():
            warning(f"No .gitignore found in {root}. Only .git will be skipped.")
        ignored = read_ignore_file(root / ".gitignore", extra_positive=["/.git"])
        predicate = lambda path: not ignored(path)

    check = BoilerplateHeaderCheck(options.template)
    summary = CheckSummary()

    def report(issue: Issue) -> None:
        out.write(issue.render())
        summary.findings += 1

    def walk_error(path: Path, e: OSError) -> None:
        error(f"{path}: error reading directory: {e}")
        summary.errors += 1

    for path in walk_files(root, predicate=predicate, on_error=walk_error):
        if not options.match(path):
            logging.debug(f"Skipping {path}")
            continue

        logging.debug(f"Checking {path}")
        summary.checked += 1
        try:
            issues: List[Issue] = check.check(path)
        except (OSError, UnicodeDecodeError) as e:
            error(f"{path}: error reading file: {e}")
            summary.errors += 1
            continue

        for issue in issues:
            report(issue)
            if options.fix and issue.fix:
                info(f"Fixing {path}")
                try:
                    issue.fix()
                except (OSError, UnicodeDecodeError) as e:
                    error(f"{path}: error fixing file: {e}")
                    summary.errors += 1
                    continue
                summary.fixed += 1

    logging.debug(f"Checked {summary.checked} files, {summary.findings} findings")
    return summary
