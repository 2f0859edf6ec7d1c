import pytest

from boilerplate.diff import EditKind
from boilerplate.matcher import (
    Template, Clean, Missing, Incomplete, Mismatched, check_lines, check_file, ANCHOR_LOOKAHEAD,
)


def template(*lines):
    return Template(tuple(lines))


def test_template_from_text():
    t = Template.from_text("// Copyright 2020 Name\n// License\n")
    assert t.lines == ("// Copyright YYYY Name", "// License", "")
    assert len(t) == 3


def test_template_rejects_empty():
    with pytest.raises(ValueError):
        Template.from_text("")
    with pytest.raises(ValueError):
        Template(())


def test_result_variants():
    assert Clean().line == 0
    assert Clean().is_clean
    assert Missing(("A",)).line == 1
    assert Incomplete(3, ("B",)).line == 3
    result = Mismatched(line=4, anchor_line=3, offset=1, edits=())
    assert result.line == 4
    assert not result.is_clean
    assert result.body() == ""


def test_clean():
    t = template("A", "B", "C")
    assert check_lines(t, ["A", "B", "C", "body"]) == Clean()


def test_clean_after_preamble():
    t = template("A", "B")
    lines = ["#!/bin/sh", "// +build tools", "", "A", "B"]
    assert check_lines(t, lines).is_clean


def test_year_tolerance():
    t = Template.from_text("Copyright 2020 Name")
    assert check_lines(t, ["Copyright 1999 Name"]) == Clean()


def test_anchor_within_lookahead():
    t = template("A")
    lines = [""] * (ANCHOR_LOOKAHEAD - 1) + ["A"]
    assert check_lines(t, lines) == Clean()


def test_anchor_beyond_lookahead_is_missing():
    t = template("A", "B")
    lines = [""] * ANCHOR_LOOKAHEAD + ["A", "B"]
    result = check_lines(t, lines)
    assert isinstance(result, Missing)
    assert result.line == 1
    assert result.body(year=2031) == "A\nB\n"


def test_missing_in_empty_file():
    assert isinstance(check_lines(template("A"), []), Missing)


def test_missing_body_is_denormalized():
    t = Template.from_text("Copyright 2020 Name\n")
    result = check_lines(t, ["package foo"])
    assert result.body(year=2031) == "Copyright 2031 Name\n"


def test_mismatch_reports_first_differing_line():
    t = template("A", "B", "C")
    result = check_lines(t, ["A", "B", "X"])
    assert isinstance(result, Mismatched)
    assert result.line == 3
    assert result.anchor_line == 1
    assert result.offset == 2
    assert [(e.kind, e.want, e.got) for e in result.edits] == [(EditKind.MODIFIED, "C", "X")]
    assert result.body() == '[0]:\n\t-: "C"\n\t+: "X"\n'


def test_mismatch_line_counts_from_anchor():
    t = template("A", "B", "C")
    result = check_lines(t, ["package foo", "", "A", "X", "C"])
    assert isinstance(result, Mismatched)
    assert result.line == 4


def test_mismatch_tab_is_not_spaces():
    t = template("/*", "    http://example.com", "*/")
    result = check_lines(t, ["/*", "\thttp://example.com", "*/"])
    assert isinstance(result, Mismatched)
    assert result.line == 2
    assert result.body() == '[0]:\n\t-: "    http://example.com"\n\t+: "\\thttp://example.com"\n'


def test_mismatch_body_is_denormalized():
    t = Template.from_text("/*\nCopyright 2020 Name")
    result = check_lines(t, ["/*", "Copyright 2020 Nam"])
    assert isinstance(result, Mismatched)
    assert result.line == 2
    assert result.body(year=2031) == '[0]:\n\t-: "Copyright 2031 Name"\n\t+: "Copyright 2031 Nam"\n'


def test_incomplete():
    t = template("A", "B", "C", "D", "E")
    result = check_lines(t, ["#!/bin/sh", "A", "B", "C"])
    assert isinstance(result, Incomplete)
    assert result.line == 2
    assert result.remainder == ("D", "E")
    assert result.body() == "D\nE\n"


def test_incomplete_is_denormalized():
    t = Template.from_text("A\nCopyright 2020 Name")
    result = check_lines(t, ["A"])
    assert result.body(year=2031) == "Copyright 2031 Name\n"


def test_stops_reading_once_decided():
    consumed = []

    def lines():
        for line in ["A", "B", "body", "more", "even more"]:
            consumed.append(line)
            yield line

    assert check_lines(template("A", "B"), lines()) == Clean()
    assert consumed == ["A", "B"]


def test_lookahead_reads_at_most_ten_lines():
    consumed = []

    def lines():
        for i in range(100):
            consumed.append(i)
            yield str(i)

    assert isinstance(check_lines(template("A"), lines()), Missing)
    assert len(consumed) == ANCHOR_LOOKAHEAD


def test_check_file(tmp_path):
    t = Template.from_text("// Copyright 2020 Name\n")
    path = tmp_path / "a.go"
    path.write_text("// Copyright 2011 Name\n\npackage a\n")
    assert check_file(t, path) == Clean()

    path.write_text("// Copyright 2011 Name\r\n\r\npackage a\r\n")
    assert check_file(t, path) == Clean()

    path.write_text("// Copyright 2011 Name")
    assert check_file(t, path) == Incomplete(1, ("",))


def test_check_file_propagates_read_errors(tmp_path):
    t = template("A")
    with pytest.raises(OSError):
        check_file(t, tmp_path / "does-not-exist.go")

    path = tmp_path / "binary.go"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(UnicodeDecodeError):
        check_file(t, path)


def test_check_file_splits_on_newline_only(tmp_path):
    t = template("A", "B")
    path = tmp_path / "a.go"

    # A lone carriage return does not end a line.
    path.write_bytes(b"x\ry\nA\nX\n")
    result = check_file(t, path)
    assert isinstance(result, Mismatched)
    assert result.line == 3

    path.write_bytes(b"A\r\nB\r\n")
    assert check_file(t, path) == Clean()
