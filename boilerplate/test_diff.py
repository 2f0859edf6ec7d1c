from boilerplate.diff import EditKind, Edit, align, render, diff


def kinds(edits):
    return [(e.kind, e.want_index, e.got_index) for e in edits]


def test_identical():
    edits = align(["a", "b"], ["a", "b"])
    assert kinds(edits) == [(EditKind.EQUAL, 0, 0), (EditKind.EQUAL, 1, 1)]
    assert render(edits) == ""


def test_substitution():
    assert diff(["C"], ["X"]) == '[0]:\n\t-: "C"\n\t+: "X"\n'


def test_deletion():
    edits = align(["a", "b", "c"], ["a", "c"])
    assert kinds(edits) == [
        (EditKind.EQUAL, 0, 0),
        (EditKind.DELETED, 1, None),
        (EditKind.EQUAL, 2, 1),
    ]
    assert render(edits) == '[1->?]:\n\t-: "b"\n\t+: <non-existent>\n'


def test_insertion():
    assert diff(["a", "b"], ["a", "x", "b"]) == '[?->1]:\n\t-: <non-existent>\n\t+: "x"\n'


def test_blank_lines_inserted_before_each_line():
    want = ["L1", "L2", "L3", "", ""]
    got = ["", "L1", "", "L2", ""]
    edits = [e for e in align(want, got) if e.kind != EditKind.EQUAL]
    assert [e.position for e in edits] == ["[?->0]", "[?->2]", "[2->?]", "[3->?]"]


def test_shifted_lines_do_not_cascade():
    want = ["a", "b", "c", "d", "e"]
    got = ["x", "a", "b", "c", "d"]
    assert diff(want, got) == (
        '[?->0]:\n\t-: <non-existent>\n\t+: "x"\n'
        '[4->?]:\n\t-: "e"\n\t+: <non-existent>\n'
    )


def test_misaligned_change_is_delete_and_insert():
    edits = align(["a", "b", "c"], ["x", "a", "B", "c"])
    assert [e.position for e in edits if e.kind != EditKind.EQUAL] == ["[?->0]", "[1->?]", "[?->2]"]


def test_trailing_line_pairs_with_last_occurrence():
    want = ["", "a", "b", "", "c", "*/", ""]
    got = ["a", "b", "c", "*/", "", "body", ""]
    assert diff(want, got) == (
        '[0->?]:\n\t-: ""\n\t+: <non-existent>\n'
        '[3->?]:\n\t-: ""\n\t+: <non-existent>\n'
        '[?->4]:\n\t-: <non-existent>\n\t+: ""\n'
        '[?->5]:\n\t-: <non-existent>\n\t+: "body"\n'
    )


def test_edit_render_escapes_tabs():
    edit = Edit(EditKind.MODIFIED, 0, 0, "    http://x", "\thttp://x")
    assert edit.render() == '[0]:\n\t-: "    http://x"\n\t+: "\\thttp://x"\n'
