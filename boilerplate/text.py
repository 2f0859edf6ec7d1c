from typing import List
import datetime
import re

YEAR_PLACEHOLDER = "YYYY"

# Any run of four digits counts as a year, so port numbers and the like are
# normalized too. Five-digit years are not handled.
MATCH_YEAR = re.compile(r"[0-9]{4}")


def normalize(line: str) -> str:
    """
    Replaces year-like strings with YYYY so that files with older copyright
    years still match the boilerplate.
    """
    return MATCH_YEAR.sub(YEAR_PLACEHOLDER, line)


def denormalize(text: str, year: int | None = None) -> str:
    """
    Replaces YYYY with the given year (the current year by default).
    """
    if year is None:
        year = datetime.date.today().year
    return text.replace(YEAR_PLACEHOLDER, str(year))


_ESCAPES = {
    '\a': '\\a', '\b': '\\b', '\f': '\\f', '\n': '\\n',
    '\r': '\\r', '\t': '\\t', '\v': '\\v', '\\': '\\\\', '"': '\\"',
}


def _escape(c: str) -> str:
    if c in _ESCAPES:
        return _ESCAPES[c]
    if c.isprintable():
        return c
    code = ord(c)
    if code < 0x80:
        return f"\\x{code:02x}"
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def quote(line: str) -> str:
    """
    Quotes a line the way Go's %q does, e.g. "\\thttp://...". Printable characters
    are kept as they are; control characters get \\x, \\u or \\U escapes.
    """
    return '"' + ''.join(_escape(c) for c in line) + '"'


def split_lines(content: str) -> List[str]:
    """
    Splits file content into physical lines at each newline, dropping a CR before it. A
    final newline terminates the last line rather than starting an empty one.
    """
    lines = [line[:-1] if line.endswith('\r') else line for line in content.split('\n')]
    if lines and lines[-1] == '':
        lines.pop()
    return lines


def join_block(lines: List[str] | tuple) -> str:
    """
    Joins lines for display, making sure the block ends with a newline.
    """
    text = '\n'.join(lines)
    if not text.endswith('\n'):
        text += '\n'
    return text
