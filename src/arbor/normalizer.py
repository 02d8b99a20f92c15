"""Conversion of raw tree-sitter nodes into the normalized ParsedNode tree."""

from tree_sitter import Node

from arbor.models import ParsedNode, Position, Span


def _span_of(raw: Node) -> Span:
    return Span(
        start=Position(row=raw.start_point[0], column=raw.start_point[1]),
        end=Position(row=raw.end_point[0], column=raw.end_point[1]),
    )


def _build_node(raw: Node, source_bytes: bytes, children: list[ParsedNode]) -> ParsedNode:
    """Create the record for ``raw`` once all of its children exist."""
    node = ParsedNode(
        kind=raw.type,
        span=_span_of(raw),
        text=source_bytes[raw.start_byte:raw.end_byte].decode("utf8", errors="replace"),
        children=children,
    )
    # Back-references are patched in only after both sides are built
    for child in children:
        child.parent = node
    return node


def normalize_tree(raw_root: Node, source_bytes: bytes) -> ParsedNode:
    """Convert a raw concrete syntax tree into a ParsedNode tree.

    Every raw node maps to exactly one ParsedNode, in the same order. Each
    node is built after its whole subtree, then set as the parent of its
    children. The walk uses an explicit stack so deeply nested source does
    not hit the interpreter's recursion limit.

    Args:
        raw_root: Root node of the tree-sitter tree.
        source_bytes: The UTF-8 encoded source the tree was parsed from.

    Returns:
        Root of the normalized tree (its ``parent`` is None).
    """
    # Each frame: raw node, iterator over its raw children, finished children
    stack = [(raw_root, iter(raw_root.children), [])]
    while True:
        raw, pending, children = stack[-1]
        raw_child = next(pending, None)
        if raw_child is not None:
            stack.append((raw_child, iter(raw_child.children), []))
            continue

        stack.pop()
        node = _build_node(raw, source_bytes, children)
        if not stack:
            return node
        stack[-1][2].append(node)


def count_nodes(root: ParsedNode) -> int:
    """Count the nodes of a normalized tree, root included."""
    return sum(1 for _ in root.walk())
