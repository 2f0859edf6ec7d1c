from typing import List, Generator, Callable

import os
from pathlib import Path
from difflib import unified_diff
import pathspec

from boilerplate.messages import info

##################################################################################################
# File Reading/Writing
##################################################################################################

def read_text_file(path: Path) -> str:
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    with open(path, 'rt', encoding='utf-8', newline='\n') as f:
        return f.read()


def write_text_file(path: Path, content: str) -> None:
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    assert '\r\n' not in content, "Windows line endings detected"

    content_bytes = content.encode('utf-8')

    if path.exists():
        old_content = read_text_file(path)
        if old_content == content:
            return

        total_added = 0
        total_removed = 0
        for line in unified_diff(old_content.splitlines(), content.splitlines(), lineterm=''):
            if line.startswith('+') and not line.startswith('+++'):
                total_added += 1
            elif line.startswith('-') and not line.startswith('---'):
                total_removed += 1

        info(f'Modifying {path}: {total_removed} lines removed, {total_added} lines added')
    else:
        info(f'Writing to {path}')

    with open(path, 'wb') as f:
        f.write(content_bytes)


##################################################################################################
# Directory Walking
##################################################################################################

def walk_files(path: Path,
               predicate: Callable[[Path], bool] | None = None,
               on_error: Callable[[Path, OSError], None] | None = None) -> Generator[Path, None, None]:
    """
    Yields the regular files under `path` in lexical order. Symlinks are not
    followed, and directories rejected by the predicate are not entered.

    A directory that cannot be listed is passed to `on_error` and skipped; without
    `on_error` the error propagates.
    """
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"
    if predicate is not None and not predicate(path):
        return

    if path.is_symlink():
        return

    if path.is_file():
        yield path

    elif path.is_dir():
        try:
            entries = sorted(os.listdir(path))
        except OSError as e:
            if on_error is None:
                raise
            on_error(path, e)
            return
        for subfile in entries:
            yield from walk_files(path / subfile, predicate=predicate, on_error=on_error)


class FileSet:
    def __init__(self, base_path: Path, positive: List[str], negative: List[str]):
        self.base_path = base_path
        self.positive = positive
        self.negative = negative

        self.path_spec = pathspec.GitIgnoreSpec.from_lines(list(positive) + ['!' + n for n in negative])

    def __call__(self, path: Path) -> bool:
        rel_path = path.relative_to(self.base_path).as_posix()
        if rel_path == '.':
            return False
        if path.is_dir():
            rel_path += '/'
        return self.path_spec.match_file(rel_path)


def read_ignore_file(path: Path, extra_positive: List[str] | None = None) -> FileSet:
    assert isinstance(path, Path), f"Expected Path, got {type(path)}"

    if not path.exists():
        return FileSet(path.parent, extra_positive or [], [])

    with open(path, 'rt', encoding='utf-8') as f:
        ignore = f.readlines()
        ignore = [i.strip() for i in ignore]
        ignore = [i for i in ignore if not i.startswith("#")]
        ignore = [i for i in ignore if i != ""]

        positive = [i for i in ignore if not i.startswith("!")]
        negative = [i[1:] for i in ignore if i.startswith("!")]

        return FileSet(path.parent, positive + (extra_positive or []), negative)
