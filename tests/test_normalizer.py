from arbor.models import SupportedLanguage
from arbor.normalizer import count_nodes, normalize_tree
from arbor.parsers.grammar import GrammarAdapter


def _normalize(source):
    adapter = GrammarAdapter(SupportedLanguage.PYTHON)
    tree = adapter.parse(source)
    return tree, normalize_tree(tree.root_node, source.encode("utf8"))


def test_root_has_no_parent():
    _, root = _normalize("x = 1\n")

    assert root.kind == "module"
    assert root.parent is None


def test_children_keep_source_order():
    _, root = _normalize("a = 1\nb = 2\nc = 3\n")

    assert [child.text for child in root.children] == ["a = 1", "b = 2", "c = 3"]


def test_children_point_back_to_parent():
    _, root = _normalize("def f(x):\n    return x\n")

    func = root.children[0]
    assert func.parent is root
    for child in func.children:
        assert child.parent is func


def test_spans_copy_raw_points():
    tree, root = _normalize("if ok:\n    run()\n")

    raw_if = tree.root_node.children[0]
    normalized_if = root.children[0]
    assert (normalized_if.start.row, normalized_if.start.column) == raw_if.start_point
    assert (normalized_if.end.row, normalized_if.end.column) == raw_if.end_point


def test_text_preserves_whitespace_and_comments():
    source = "call(a,   # first\n     b)\n"
    _, root = _normalize(source)

    assert root.children[0].text == "call(a,   # first\n     b)"


def test_text_of_non_ascii_source():
    _, root = _normalize('name = "naïve"\n')

    string_nodes = [n for n in root.walk() if n.kind == "string"]
    assert string_nodes[0].text == '"naïve"'


def test_count_nodes_matches_raw_tree():
    tree, root = _normalize("class A(B):\n    x: int = 0\n")

    raw_count = 0
    cursor_stack = [tree.root_node]
    while cursor_stack:
        raw = cursor_stack.pop()
        raw_count += 1
        cursor_stack.extend(raw.children)

    assert count_nodes(root) == raw_count


def test_error_nodes_are_kept():
    _, root = _normalize("x = = 2\n")

    assert any(node.is_error for node in root.walk())


def test_repr_does_not_recurse_into_parent():
    _, root = _normalize("x = 1\n")

    text = repr(root.children[0])

    assert "parent" not in text
